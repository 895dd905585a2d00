"""
Bracket analysis for command strings.

Only '[' and ']' matter here; every other character is skipped. The scans
run over an int32 array of code points so they can be JIT-compiled the same
way the execution loop is.
"""
from __future__ import annotations

from enum import Enum
from functools import lru_cache

import numpy as np
from numba import njit

OPEN = '['
CLOSE = ']'
NOT_FOUND = -1


class BlockState(Enum):
    INVALID = -1
    CLOSED = 0
    OPEN = 1


@lru_cache(maxsize=512)
def to_codes(command: str) -> np.ndarray:
    """Code point array for a command string. Cached, so callers must not mutate it."""
    return np.array([ord(c) for c in command], dtype=np.int32)


@njit(cache=True)
def jit_balance_scan(program_arr):
    """
    Returns (balance, bad_index).

    bad_index is the position of the first ']' that drives the balance
    negative; the scan stops there. Otherwise bad_index is -1 and balance
    is the final count of unmatched '['.
    """
    balance = 0
    for i in range(len(program_arr)):
        command = program_arr[i]
        if command == 91:  # '['
            balance += 1
        elif command == 93:  # ']'
            balance -= 1
            if balance < 0:
                return balance, i
    return balance, -1


@njit(cache=True)
def jit_match_close(program_arr, start):
    balance = 0
    for i in range(start, len(program_arr)):
        command = program_arr[i]
        if command == 91:  # '['
            balance += 1
        elif command == 93:  # ']'
            balance -= 1
            if balance == 0:
                return i
    return -1


def classify(command: str) -> BlockState:
    balance, bad_index = jit_balance_scan(to_codes(command))
    if bad_index >= 0:
        return BlockState.INVALID
    return BlockState.OPEN if balance > 0 else BlockState.CLOSED


def find_invalid_close(command: str) -> int:
    _, bad_index = jit_balance_scan(to_codes(command))
    return int(bad_index)


def find_matching_close(command: str, start: int = 0) -> int:
    """Index of the ']' matching the first '[' at or after start, or NOT_FOUND."""
    return int(jit_match_close(to_codes(command), start))


def has_blocks(command: str) -> bool:
    return OPEN in command
