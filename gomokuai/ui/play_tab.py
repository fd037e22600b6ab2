"""Play tab: human vs the minimax AI with an interactive SVG board."""

from __future__ import annotations

import logging
import random as _random
from dataclasses import dataclass, field

import gradio as gr

from gomokuai.agent.base import Agent
from gomokuai.agent.minimax_agent import MinimaxAgent
from gomokuai.game.board import InvalidMove, format_point, parse_coordinate
from gomokuai.game.state import GomokuGameState
from gomokuai.game.types import Player
from gomokuai.ui.board_component import render_board_svg

logger = logging.getLogger(__name__)

FIRST_MOVER_CHOICES = ["Random", "You", "AI"]


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    game: GomokuGameState = field(default_factory=GomokuGameState)
    agent: Agent = field(default_factory=MinimaxAgent)

    def reset(self, first_player: Player) -> None:
        self.game = GomokuGameState(first_player=first_player)

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        g = self.game
        if not g.is_over:
            return ""
        if g.winner is Player.HUMAN:
            return "You win!"
        if g.winner is Player.AI:
            return "AI wins!"
        return "Draw!"

    @property
    def status_text(self) -> str:
        g = self.game
        if g.is_draw:
            return "Game over: Draw!"
        if g.is_over:
            line = " ".join(format_point(p) for p in g.winning_span)
            return f"Game over: {self.game_over_banner} (five at {line})"
        if g.current_player is Player.HUMAN:
            return "Your turn"
        return "AI is thinking..."

    @property
    def move_history_table(self) -> list[list[str]]:
        return [
            [str(i + 1), str(move.player), format_point(move.point)]
            for i, move in enumerate(self.game.moves)
        ]


def _make_board_html(session: GameSession) -> str:
    clickable = (
        not session.game.is_over
        and session.game.current_player is Player.HUMAN
    )
    return render_board_svg(
        session.game,
        clickable=clickable,
        game_over_message=session.game_over_banner,
    )


def _outputs(session: GameSession, status: str = ""):
    return (
        _make_board_html(session),
        status or session.status_text,
        session.move_history_table,
        session,
    )


def _ai_turn(session: GameSession) -> None:
    """Let the AI move if it is its turn."""
    game = session.game
    if game.is_over or game.current_player is not Player.AI:
        return
    game.apply_move(session.agent.select_move(game))
    if game.is_over:
        logger.info("Game over after %d moves: %s", len(game.moves), session.game_over_banner)


def _apply_human_move(coord_text: str, session: GameSession):
    """Process a human move, then let the AI respond."""
    if session.game.is_over:
        return _outputs(session) + ("",)

    if session.game.current_player is not Player.HUMAN:
        return _outputs(session, "Wait, it's the AI's turn.") + ("",)

    point = parse_coordinate(coord_text)
    if point is None:
        return _outputs(
            session, f"Invalid coordinate: '{coord_text}'. Use format like H8."
        ) + ("",)

    try:
        session.game.apply_move(point)
    except InvalidMove:
        return _outputs(session, f"{format_point(point)} is already occupied.") + ("",)

    if session.game.is_over:
        logger.info("Game over after %d moves: %s", len(session.game.moves), session.game_over_banner)
    _ai_turn(session)
    return _outputs(session) + ("",)


def _new_game(first_choice: str, session: GameSession):
    """Start a new game. first_choice is 'You', 'AI' or 'Random'."""
    if first_choice == "Random":
        first = _random.choice([Player.HUMAN, Player.AI])
    elif first_choice == "AI":
        first = Player.AI
    else:
        first = Player.HUMAN

    session.reset(first_player=first)
    logger.info("New game, %s moves first", first)
    _ai_turn(session)

    who = "You move" if first is Player.HUMAN else "The AI moves"
    return _outputs(session) + (f"{who} first.",)


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    session_state = gr.State(GameSession())

    with gr.Row():
        # Left: board
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=render_board_svg(GomokuGameState()),
                label="Board",
            )
        # Right: controls
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value="Your turn",
                label="Status",
                interactive=False,
                lines=2,
            )
            first_info = gr.Textbox(
                value="You move first.",
                label="First move",
                interactive=False,
                lines=1,
            )

            gr.Markdown("### New Game")
            first_choice = gr.Radio(
                choices=FIRST_MOVER_CHOICES,
                value="Random",
                label="Who moves first",
            )
            new_game_btn = gr.Button("Play again", variant="primary")

            gr.Markdown("### Enter Move")
            coord_input = gr.Textbox(
                label="Coordinate (e.g. H8)",
                placeholder="H8",
                elem_id="coord-input",
                lines=1,
            )
            coord_submit = gr.Button(
                "Submit Move",
                elem_id="coord-submit",
            )

            gr.Markdown("### Move History")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Move"],
                datatype=["number", "str", "str"],
                interactive=False,
                column_count=3,
            )

    # Outputs shared by all callbacks
    board_outputs = [board_html, status_text, move_table, session_state]

    coord_submit.click(
        fn=_apply_human_move,
        inputs=[coord_input, session_state],
        outputs=board_outputs + [coord_input],
    )

    new_game_btn.click(
        fn=_new_game,
        inputs=[first_choice, session_state],
        outputs=board_outputs + [first_info],
    )
