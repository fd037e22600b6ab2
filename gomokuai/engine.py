"""Procedural entry points for a front end driving the engine.

Coordinates are plain (row, col) integers, 0-indexed. (-1, -1) stands for
"no stone placed yet".
"""

from __future__ import annotations

import logging
from typing import Optional

from gomokuai.agent.minimax_agent import DEFAULT_DEPTH, choose_move
from gomokuai.game.board import BOARD_SIZE, Board, InvalidMove
from gomokuai.game.rules import TerminalResult, check_terminal
from gomokuai.game.state import GomokuGameState
from gomokuai.game.types import Player, Point

logger = logging.getLogger(__name__)

NO_MOVE = (-1, -1)


def _anchor(last_row: int, last_col: int) -> Optional[Point]:
    if (last_row, last_col) == NO_MOVE:
        return None
    if not (0 <= last_row < BOARD_SIZE and 0 <= last_col < BOARD_SIZE):
        raise InvalidMove(f"({last_row}, {last_col}) is off the grid")
    return Point(last_row, last_col)


class GomokuEngine:
    """Owns the authoritative board and answers the front end's three questions."""

    def __init__(self, depth: int = DEFAULT_DEPTH) -> None:
        self.depth = depth
        self.state = GomokuGameState()

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def last_move(self) -> tuple[int, int]:
        last = self.state.last_move
        return NO_MOVE if last is None else (last.row, last.col)

    def reset(self) -> None:
        self.state = GomokuGameState()

    def place_stone(self, row: int, col: int, side: Player) -> None:
        """Place a stone on the authoritative board. Raises InvalidMove."""
        self.state.place_stone(Point(row, col), side)

    def is_terminal(self, last_row: int, last_col: int) -> TerminalResult:
        """Raises InvalidMove for an anchor off the grid."""
        return check_terminal(self.state.board, _anchor(last_row, last_col))

    def choose_ai_move(self, last_row: int, last_col: int) -> tuple[int, int]:
        """Search for the AI's reply. The board is left as it was found.

        An empty board always gets the center, whatever anchor is passed.
        Raises InvalidMove for an anchor off the grid.
        """
        move = choose_move(self.state.board, _anchor(last_row, last_col), self.depth)
        logger.debug("AI move for last=(%d, %d): %s", last_row, last_col, move)
        return move.row, move.col
