from __future__ import annotations

import sys
from typing import Optional, TextIO

from numba import njit

from .brackets import to_codes
from .errors import Direction
from .tape import Tape

STOP_END = 0
STOP_OUTPUT = 1
STOP_INPUT = 2
STOP_BOUND_RIGHT = 3
STOP_BOUND_LEFT = 4


@njit(cache=True)
def jit_run_flat(program_arr, memory, pc, pointer):
    """
    Run a bracket-free program until it ends or needs the host.

    Stops before '.' and ',' so the caller can do the I/O, and before a
    move that would leave the tape. Returns (pc, pointer, stop_reason);
    pc points at the instruction that caused the stop.
    """
    stop_reason = 0
    mem_len = len(memory)
    prog_len = len(program_arr)

    while pc < prog_len:
        command = program_arr[pc]

        if command == 62:  # '>'
            if pointer + 1 >= mem_len:
                stop_reason = 3
                break
            pointer += 1
        elif command == 60:  # '<'
            if pointer == 0:
                stop_reason = 4
                break
            pointer -= 1
        elif command == 43:  # '+'
            memory[pointer] = (memory[pointer] + 1) & 255
        elif command == 45:  # '-'
            memory[pointer] = (memory[pointer] - 1) & 255
        elif command == 46:  # '.'
            stop_reason = 1
            break
        elif command == 44:  # ','
            stop_reason = 2
            break

        pc += 1

    return pc, pointer, stop_reason


class FlatExecutor:
    """Executes bracket-free command strings against a tape."""

    def __init__(self, tape: Tape, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.tape = tape
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def execute(self, instructions: str) -> None:
        program_arr = to_codes(instructions)
        pc = 0
        while True:
            pc, pointer, stop_reason = jit_run_flat(program_arr, self.tape.memory, pc, self.tape.cursor)
            self.tape.cursor = int(pointer)

            if stop_reason == STOP_END:
                return
            if stop_reason == STOP_OUTPUT:
                self._write_cell()
            elif stop_reason == STOP_INPUT:
                self._read_cell()
            elif stop_reason == STOP_BOUND_RIGHT:
                self.tape.move(Direction.RIGHT)
            elif stop_reason == STOP_BOUND_LEFT:
                self.tape.move(Direction.LEFT)
            pc += 1

    def _write_cell(self) -> None:
        self.stdout.write(chr(self.tape.current))
        self.stdout.flush()

    def _read_cell(self) -> None:
        char = self.stdin.read(1)
        if not char or char == '\n':
            self.tape.current = 0
        else:
            self.tape.current = ord(char)
