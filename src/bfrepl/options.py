from __future__ import annotations

from dataclasses import dataclass

from .tape import MEMORY_SIZE


@dataclass(frozen=True)
class ReplOptions:
    memory_size: int = MEMORY_SIZE
    prompt: str = '>>> '
    continuation_prompt: str = '... '
    trace: bool = False
