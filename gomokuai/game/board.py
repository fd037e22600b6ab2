from __future__ import annotations

from typing import Iterator, Optional

from .types import Player, Point

BOARD_SIZE = 15
WIN_LENGTH = 5
CENTER = Point(BOARD_SIZE // 2, BOARD_SIZE // 2)

# Column labels: A-O (skipping no letters for 15x15)
COL_LABELS = "ABCDEFGHIJKLMNO"

# The eight cells surrounding a point
NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


class InvalidMove(ValueError):
    """Raised when a stone is placed off the grid or on an occupied cell."""


def parse_coordinate(text: str) -> Optional[Point]:
    """Parse a coordinate string like 'H8' or 'A15' into a Point.

    Column is a letter A-O, row is a number 1-15 counted from the top.
    Returns None if the string is invalid.
    """
    text = text.strip().upper()
    if len(text) < 2 or len(text) > 3:
        return None
    col_char = text[0]
    row_str = text[1:]
    if col_char not in COL_LABELS:
        return None
    try:
        row = int(row_str)
    except ValueError:
        return None
    if not (1 <= row <= BOARD_SIZE):
        return None
    return Point(row - 1, COL_LABELS.index(col_char))


def format_point(point: Point) -> str:
    """Format a Point as a coordinate string like 'H8'."""
    return f"{COL_LABELS[point.col]}{point.row + 1}"


class Board:
    """15x15 Gomoku grid, row-major. Cells hold a Player or None."""

    def __init__(self) -> None:
        self._grid: list[list[Optional[Player]]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]
        self._count = 0

    def place(self, point: Point, player: Player) -> None:
        if not self.is_on_grid(point):
            raise InvalidMove(f"{point} is off the grid")
        if self._grid[point.row][point.col] is not None:
            raise InvalidMove(f"{format_point(point)} is occupied")
        self._grid[point.row][point.col] = player
        self._count += 1

    def remove(self, point: Point) -> None:
        """Clear a cell. Only used to roll back tentative search moves."""
        if self._grid[point.row][point.col] is not None:
            self._count -= 1
        self._grid[point.row][point.col] = None

    def get(self, point: Point) -> Optional[Player]:
        return self._grid[point.row][point.col]

    def is_empty(self, point: Point) -> bool:
        return self._grid[point.row][point.col] is None

    def is_on_grid(self, point: Point) -> bool:
        return 0 <= point.row < BOARD_SIZE and 0 <= point.col < BOARD_SIZE

    def is_full(self) -> bool:
        return self._count == BOARD_SIZE * BOARD_SIZE

    def has_neighbor(self, point: Point) -> bool:
        """True if any of the 8 surrounding cells holds a stone."""
        grid = self._grid
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = point.row + dr, point.col + dc
            if 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and grid[r][c] is not None:
                return True
        return False

    def empty_points(self) -> Iterator[Point]:
        """Yield every empty cell in row-major order."""
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                if self._grid[r][c] is None:
                    yield Point(r, c)

    def stones(self) -> Iterator[tuple[Point, Player]]:
        """Yield (point, owner) for every occupied cell in row-major order."""
        for r in range(BOARD_SIZE):
            row = self._grid[r]
            for c in range(BOARD_SIZE):
                if row[c] is not None:
                    yield Point(r, c), row[c]

    def copy(self) -> Board:
        other = Board()
        other._grid = [list(row) for row in self._grid]
        other._count = self._count
        return other

    @property
    def grid(self) -> list[list[Optional[Player]]]:
        """The live row-major grid, for hot loops. Do not mutate."""
        return self._grid

    @property
    def occupied_count(self) -> int:
        return self._count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        symbols = {None: ".", Player.HUMAN: "X", Player.AI: "O"}
        return "\n".join("".join(symbols[cell] for cell in row) for row in self._grid)
