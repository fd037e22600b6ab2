"""Minimax agent with alpha-beta pruning over neighbor-pruned candidates.

The AI maximises, the human minimises. The board is searched in place: every
tentative stone is placed, searched below and removed again, and the last
move is passed down explicitly so terminal checks inside the tree see the
right anchor.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Optional

from gomokuai.agent.base import Agent
from gomokuai.agent.evaluation import evaluate
from gomokuai.game.board import CENTER, Board
from gomokuai.game.rules import is_terminal
from gomokuai.game.state import GomokuGameState
from gomokuai.game.types import Player, Point

logger = logging.getLogger(__name__)

INF = math.inf

# Plies searched below each root candidate
DEFAULT_DEPTH = 2


# ---------------------------------------------------------------------------
# Candidate generation
# ---------------------------------------------------------------------------

def candidate_moves(board: Board) -> list[Point]:
    """Empty cells touching at least one stone, in row-major order."""
    return [p for p in board.empty_points() if board.has_neighbor(p)]


# ---------------------------------------------------------------------------
# Alpha-beta
# ---------------------------------------------------------------------------

def alphabeta(
    board: Board,
    last_move: Optional[Point],
    depth: int,
    alpha: float,
    beta: float,
    human_to_move: bool,
) -> float:
    """Fail-hard alpha-beta value of the position after `last_move`.

    alpha is the best value the AI is already assured of, beta the best the
    human is. A min node starts from the inherited beta and a max node from
    the inherited alpha; both stop as soon as beta <= alpha.
    """
    if depth == 0 or is_terminal(board, last_move):
        return evaluate(board)

    candidates = candidate_moves(board)
    if not candidates:
        return evaluate(board)

    if human_to_move:
        for move in candidates:
            board.place(move, Player.HUMAN)
            value = alphabeta(board, move, depth - 1, alpha, beta, False)
            board.remove(move)

            if value < beta:
                beta = value
            if beta <= alpha:
                return beta
        return beta

    for move in candidates:
        board.place(move, Player.AI)
        value = alphabeta(board, move, depth - 1, alpha, beta, True)
        board.remove(move)

        if value > alpha:
            alpha = value
        if beta <= alpha:
            return alpha
    return alpha


def minimax(
    board: Board,
    last_move: Optional[Point],
    depth: int,
    human_to_move: bool,
) -> float:
    """Exact minimax value without pruning. Used to cross-check alphabeta."""
    if depth == 0 or is_terminal(board, last_move):
        return evaluate(board)

    candidates = candidate_moves(board)
    if not candidates:
        return evaluate(board)

    player = Player.HUMAN if human_to_move else Player.AI
    best = INF if human_to_move else -INF
    for move in candidates:
        board.place(move, player)
        value = minimax(board, move, depth - 1, not human_to_move)
        board.remove(move)

        if human_to_move:
            best = min(best, value)
        else:
            best = max(best, value)
    return best


# ---------------------------------------------------------------------------
# Root move selection
# ---------------------------------------------------------------------------

def choose_move_with_value(
    board: Board,
    last_move: Optional[Point],
    depth: int = DEFAULT_DEPTH,
) -> tuple[Point, float]:
    """Pick the AI move and return it with its search value.

    Candidates are tried in row-major order and only a strictly better value
    replaces the incumbent, so ties keep the earliest cell. With no stone on
    the board the center is returned without searching.
    """
    if last_move is None or board.occupied_count == 0:
        return CENTER, 0.0

    candidates = candidate_moves(board)
    logger.debug("Searching %d candidates to depth %d", len(candidates), depth)

    best_value = -INF
    best_move: Optional[Point] = None
    for move in candidates:
        board.place(move, Player.AI)
        value = alphabeta(board, move, depth, best_value, INF, True)
        board.remove(move)

        if value > best_value:
            best_value = value
            best_move = move
            logger.debug("New best %s (value=%.1f)", move, value)

    assert best_move is not None, "No candidates found"
    return best_move, best_value


def choose_move(
    board: Board,
    last_move: Optional[Point],
    depth: int = DEFAULT_DEPTH,
) -> Point:
    return choose_move_with_value(board, last_move, depth)[0]


def choose_move_exhaustive(
    board: Board,
    last_move: Optional[Point],
    depth: int = DEFAULT_DEPTH,
) -> tuple[Point, float]:
    """Root selection over plain minimax, with the same tie-break as choose_move."""
    if last_move is None or board.occupied_count == 0:
        return CENTER, 0.0

    best_value = -INF
    best_move: Optional[Point] = None
    for move in candidate_moves(board):
        board.place(move, Player.AI)
        value = minimax(board, move, depth, True)
        board.remove(move)

        if value > best_value:
            best_value = value
            best_move = move

    assert best_move is not None, "No candidates found"
    return best_move, best_value


# ---------------------------------------------------------------------------
# MinimaxAgent
# ---------------------------------------------------------------------------

class MinimaxAgent(Agent):
    """Plays the AI side with a fixed-depth alpha-beta search."""

    def __init__(self, depth: int = DEFAULT_DEPTH) -> None:
        self.depth = depth

    @property
    def name(self) -> str:
        return f"MinimaxAgent(d={self.depth})"

    def select_move(self, game_state: GomokuGameState) -> Point:
        assert not game_state.is_over, "Game is already over"
        t0 = time.perf_counter()
        move, value = choose_move_with_value(
            game_state.board, game_state.last_move, self.depth
        )
        logger.info(
            "%s chose %s (value=%.1f) in %.2fs",
            self.name, move, value, time.perf_counter() - t0,
        )
        return move
