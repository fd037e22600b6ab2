"""Static evaluation: per-stone line potential plus a center bonus.

Scores are from the AI's point of view. Human stones count negatively and
are weighted DEFENSE_WEIGHT times heavier, so blocking outranks building.
"""

from __future__ import annotations

from gomokuai.game.board import BOARD_SIZE, CENTER, WIN_LENGTH, Board
from gomokuai.game.types import Player, Point

# Eight signed directions: up, down, left, right, then the four diagonals
DIRECTIONS = [
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
]

# Cells a line needs beyond the stone itself to still be able to reach five
REACH = WIN_LENGTH - 1

DEFENSE_WEIGHT = 5
CENTER_WEIGHT = 0.1


def _scan(grid, row: int, col: int, owner: Player, dr: int, dc: int) -> float:
    opponent = owner.other
    extendable = 0
    r, c = row + dr, col + dc
    while (
        extendable < REACH
        and 0 <= r < BOARD_SIZE
        and 0 <= c < BOARD_SIZE
        and grid[r][c] is not opponent
    ):
        extendable += 1
        r += dr
        c += dc
    if extendable < REACH:
        return 0.0

    value = 10.0
    r, c = row + dr, col + dc
    while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and grid[r][c] is owner:
        value *= 10.0
        r += dr
        c += dc
    return value


def scan_direction(board: Board, point: Point, dr: int, dc: int) -> float:
    """Potential of the stone at `point` in direction (dr, dc).

    Walks up to REACH steps, stopping at the edge or an opponent stone. If
    fewer than REACH cells are free or friendly the line is dead and scores 0.
    Otherwise the score is 10 ** run, where run counts the stone itself plus
    the friendly stones directly following it.
    """
    grid = board.grid
    owner = grid[point.row][point.col]
    assert owner is not None, f"No stone at {point}"
    return _scan(grid, point.row, point.col, owner, dr, dc)


def _center_bonus(row: int, col: int) -> float:
    return CENTER_WEIGHT * (BOARD_SIZE - abs(row - CENTER.row) - abs(col - CENTER.col))


def center_bonus(point: Point) -> float:
    return _center_bonus(point.row, point.col)


def _stone_value(grid, row: int, col: int, owner: Player) -> float:
    value = 0.0
    for dr, dc in DIRECTIONS:
        value += _scan(grid, row, col, owner, dr, dc)
    return value + _center_bonus(row, col)


def stone_value(board: Board, point: Point) -> float:
    """Unweighted value of one stone: all eight directions plus the center bonus."""
    grid = board.grid
    owner = grid[point.row][point.col]
    assert owner is not None, f"No stone at {point}"
    return _stone_value(grid, point.row, point.col, owner)


def evaluate(board: Board) -> float:
    """Full-board evaluation. Positive favours the AI, negative the human.

    Runs at every search leaf, so it walks the raw grid rather than going
    through Point-yielding helpers.
    """
    grid = board.grid
    score = 0.0
    for row, cells in enumerate(grid):
        for col, owner in enumerate(cells):
            if owner is None:
                continue
            value = _stone_value(grid, row, col, owner)
            if owner is Player.HUMAN:
                value = -value * DEFENSE_WEIGHT
            score += value
    return score
