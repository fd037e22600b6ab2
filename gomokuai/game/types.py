from __future__ import annotations

import enum
from typing import NamedTuple


class Player(enum.Enum):
    HUMAN = 1
    AI = -1

    @property
    def other(self) -> Player:
        return Player.AI if self is Player.HUMAN else Player.HUMAN

    def __str__(self) -> str:
        return self.name if self is Player.AI else self.name.capitalize()


class Point(NamedTuple):
    row: int  # 0-indexed, 0 = top
    col: int  # 0-indexed, 0 = left
