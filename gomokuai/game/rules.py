"""Terminal-state detection: five in a row through the last move, or a full board."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from .board import BOARD_SIZE, WIN_LENGTH, Board
from .types import Player, Point

# Vertical, horizontal, main diagonal (down-right), anti-diagonal (up-right)
AXES = [(1, 0), (0, 1), (1, 1), (-1, 1)]

# Window of offsets scanned on each axis around the last move
WINDOW = range(-(WIN_LENGTH - 1), WIN_LENGTH)


class GameStatus(enum.Enum):
    CONTINUING = "continuing"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class TerminalResult:
    status: GameStatus
    winner: Optional[Player] = None
    span: tuple[Point, ...] = ()

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.CONTINUING


CONTINUING = TerminalResult(GameStatus.CONTINUING)
DRAW = TerminalResult(GameStatus.DRAW)


def find_five(board: Board, last_move: Point) -> Optional[tuple[Point, ...]]:
    """Return the winning 5-cell span through `last_move`, or None.

    Each axis is scanned over offsets -4..+4; the counter resets on any cell
    not owned by the last mover (including cells off the grid).
    """
    owner = board.get(last_move)
    if owner is None:
        return None
    row, col = last_move
    for dr, dc in AXES:
        count = 0
        for offset in WINDOW:
            r, c = row + dr * offset, col + dc * offset
            if 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and board.get(Point(r, c)) is owner:
                count += 1
            else:
                count = 0
            if count == WIN_LENGTH:
                return tuple(
                    Point(row + dr * o, col + dc * o)
                    for o in range(offset - WIN_LENGTH + 1, offset + 1)
                )
    return None


def check_terminal(board: Board, last_move: Optional[Point]) -> TerminalResult:
    """Classify the position after `last_move` as a win, a draw or still going."""
    if last_move is not None:
        span = find_five(board, last_move)
        if span is not None:
            return TerminalResult(GameStatus.WIN, board.get(last_move), span)
    if board.is_full():
        return DRAW
    return CONTINUING


def is_terminal(board: Board, last_move: Optional[Point]) -> bool:
    """Cheap form of check_terminal for the search loop."""
    if last_move is not None and find_five(board, last_move) is not None:
        return True
    return board.is_full()
