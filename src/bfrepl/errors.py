from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    LEFT = 'left'
    RIGHT = 'right'


def _bounds_message(direction: Direction) -> str:
    if direction is Direction.RIGHT:
        return 'Error! current cell is at the end of memory'
    return 'Error! current cell is at the beginning of memory'


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class UnbalancedBlocksError(BFError):
    # index of the offending bracket, -1 when unknown
    position: int


@dataclass
class OutOfBoundsError(BFError):
    direction: Direction
    cursor: int


def make_unbalanced_error(*, position: int = -1) -> UnbalancedBlocksError:
    return UnbalancedBlocksError(message='Error! unbalanced blocks', position=position)


def make_bounds_error(*, direction: Direction, cursor: int) -> OutOfBoundsError:
    return OutOfBoundsError(
        message=_bounds_message(direction),
        direction=direction,
        cursor=cursor,
    )
