from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .board import Board, InvalidMove, format_point
from .rules import CONTINUING, GameStatus, TerminalResult, check_terminal
from .types import Player, Point


@dataclass
class Move:
    point: Point
    player: Player

    def __str__(self) -> str:
        return f"{self.player}: {format_point(self.point)}"


class GomokuGameState:
    """Authoritative game state: the board, move history and LastMove."""

    def __init__(self, first_player: Player = Player.HUMAN) -> None:
        self.board = Board()
        self.first_player = first_player
        self.current_player = first_player
        self.moves: list[Move] = []
        self._result: TerminalResult = CONTINUING

    @property
    def last_move(self) -> Optional[Point]:
        return self.moves[-1].point if self.moves else None

    @property
    def result(self) -> TerminalResult:
        return self._result

    @property
    def is_over(self) -> bool:
        return self._result.is_over

    @property
    def winner(self) -> Optional[Player]:
        return self._result.winner

    @property
    def is_draw(self) -> bool:
        return self._result.status is GameStatus.DRAW

    @property
    def winning_span(self) -> tuple[Point, ...]:
        return self._result.span

    def place_stone(self, point: Point, player: Player) -> TerminalResult:
        """Place a stone for `player`, update LastMove and re-check the result.

        The turn passes to the other side regardless of who was expected to
        move; apply_move is the turn-enforcing entry point.
        """
        if self.is_over:
            raise InvalidMove("Game is already over")
        self.board.place(point, player)
        self.moves.append(Move(point=point, player=player))
        self._result = check_terminal(self.board, point)
        self.current_player = player.other
        return self._result

    def apply_move(self, point: Point) -> TerminalResult:
        """Place a stone for the current player and advance the turn."""
        return self.place_stone(point, self.current_player)
