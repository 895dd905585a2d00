from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import numpy as np

from .errors import Direction, make_bounds_error

MEMORY_SIZE = 256


@dataclass
class Tape:
    size: int = MEMORY_SIZE
    memory: np.ndarray = field(init=False, repr=False, compare=False)
    cursor: int = 0
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f'Tape size must be positive, got {self.size}')
        self.memory = np.zeros(self.size, dtype=np.uint8)

    @property
    def current(self) -> int:
        return int(self.memory[self.cursor])

    @current.setter
    def current(self, value: int) -> None:
        self.memory[self.cursor] = np.uint8(value & 0xFF)

    def move(self, direction: Direction) -> None:
        # Cursor is left untouched when the move would leave the tape.
        if direction is Direction.RIGHT:
            if self.cursor + 1 >= self.size:
                raise make_bounds_error(direction=direction, cursor=self.cursor)
            self.cursor += 1
        else:
            if self.cursor == 0:
                raise make_bounds_error(direction=direction, cursor=self.cursor)
            self.cursor -= 1

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
