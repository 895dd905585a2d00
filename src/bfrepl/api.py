from __future__ import annotations

import io
from dataclasses import dataclass
from typing import List, Optional

from .brackets import BlockState, classify, find_invalid_close
from .errors import make_unbalanced_error
from .options import ReplOptions
from .session import Session


@dataclass(frozen=True)
class RunResult:
    output: str
    memory: bytes
    cursor: int
    trace: List[str]


def run_string(source: str, *, options: Optional[ReplOptions] = None, input_data: str = "") -> RunResult:
    """
    Run a complete program on a fresh tape and capture what it prints.

    Line breaks in source are dropped, the same way continuation lines are
    joined in a session. Errors are raised rather than printed, and a
    program with an unclosed '[' is rejected instead of waiting for more
    input.
    """
    command = source.replace('\r', '').replace('\n', '')
    if classify(command) is not BlockState.CLOSED:
        raise make_unbalanced_error(position=find_invalid_close(command))

    stdout = io.StringIO()
    session = Session(options, stdin=io.StringIO(input_data), stdout=stdout)
    session.execute(command)
    return RunResult(
        output=stdout.getvalue(),
        memory=session.tape.memory.tobytes(),
        cursor=session.tape.cursor,
        trace=list(session.tape.trace),
    )
