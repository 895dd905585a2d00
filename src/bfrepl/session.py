from __future__ import annotations

import sys
from typing import Optional, TextIO

from .blocks import BlockEngine
from .brackets import BlockState, classify, find_invalid_close, has_blocks
from .errors import BFError, make_unbalanced_error
from .executor import FlatExecutor
from .options import ReplOptions
from .tape import Tape


class Session:
    """
    One interactive interpreter session.

    The tape lives as long as the session. Lines are read from stdin,
    output and error messages go to stdout, and ',' reads from the same
    stdin the lines come from.
    """

    def __init__(self, options: Optional[ReplOptions] = None, *,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.options = options or ReplOptions()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.tape = Tape(self.options.memory_size, is_tracing=self.options.trace)
        self.executor = FlatExecutor(self.tape, self.stdin, self.stdout)
        self.engine = BlockEngine(self.executor)

    def read_line(self, prompt: str) -> Optional[str]:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip('\r\n')

    def read_command(self) -> Optional[str]:
        # Prompt once, then keep reading silently past empty lines.
        prompt = self.options.prompt
        while True:
            line = self.read_line(prompt)
            if line is None or line:
                return line
            prompt = ''

    def read_block(self, command: str) -> str:
        """Keep reading continuation lines until the loops in command are closed."""
        state = classify(command)
        while state is BlockState.OPEN:
            line = self.read_line(self.options.continuation_prompt)
            if line is None:
                raise EOFError('end of input inside an open block')
            command += line
            state = classify(command)

        if state is BlockState.INVALID:
            raise make_unbalanced_error(position=find_invalid_close(command))
        return command

    def execute(self, command: str) -> None:
        if has_blocks(command):
            self.engine.execute_with_blocks(command)
        else:
            self.executor.execute(command)

    def feed(self, line: str) -> bool:
        """Run one top-level input. Returns False if it failed with an error."""
        try:
            self.execute(self.read_block(line))
        except BFError as e:
            print(e, file=self.stdout)
            return False
        return True

    def run(self) -> int:
        try:
            while True:
                command = self.read_command()
                if command is None:
                    break
                self.feed(command)
        except EOFError:
            pass
        self.stdout.write('\n')
        self.stdout.flush()
        return 0
