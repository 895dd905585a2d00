from __future__ import annotations

from .brackets import CLOSE, NOT_FOUND, OPEN, find_matching_close, has_blocks
from .errors import make_unbalanced_error
from .executor import FlatExecutor


class BlockEngine:
    """
    Executes balanced command strings that contain loops.

    The string is split around its first loop into prefix, body and
    suffix. The prefix runs once, the body runs while the current cell is
    nonzero, and the suffix is split again until no loops remain. Nested
    loops recurse into the body; sibling loops are handled in the same
    call, left to right.
    """

    def __init__(self, executor: FlatExecutor):
        self.executor = executor
        self.tape = executor.tape

    def execute_with_blocks(self, command: str) -> None:
        pos = 0
        while pos < len(command):
            start = command.find(OPEN, pos)
            if start == NOT_FOUND:
                self.executor.execute(command[pos:])
                return

            prefix = command[pos:start]
            if CLOSE in prefix:
                raise make_unbalanced_error(position=pos + prefix.find(CLOSE))
            end = find_matching_close(command, start)
            if end == NOT_FOUND:
                raise make_unbalanced_error(position=start)

            body = command[start + 1:end]
            pos = end + 1
            if self.tape.is_tracing:
                self.tape.add_trace(f"split: prefix={prefix!r} body={body!r} rest={command[pos:]!r}")

            if prefix:
                self.executor.execute(prefix)
            self._loop(body)

    def _loop(self, body: str) -> None:
        # No iteration cap, an endless loop is a valid program.
        nested = has_blocks(body)
        while self.tape.current != 0:
            if nested:
                self.execute_with_blocks(body)
            else:
                self.executor.execute(body)
