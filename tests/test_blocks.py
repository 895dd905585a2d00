#!/usr/bin/env python3
"""
Tests for loop execution through the block engine.
"""

import sys
import os
import io
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfrepl.blocks import BlockEngine
from bfrepl.errors import OutOfBoundsError, UnbalancedBlocksError
from bfrepl.executor import FlatExecutor
from bfrepl.tape import Tape

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def make_engine(input_data="", size=256, tracing=False):
    tape = Tape(size, is_tracing=tracing)
    stdout = io.StringIO()
    engine = BlockEngine(FlatExecutor(tape, io.StringIO(input_data), stdout))
    return engine, tape, stdout


def test_clear_loop():
    engine, tape, _ = make_engine()
    engine.execute_with_blocks('+++[-]')
    assert tape.current == 0


def test_loop_skipped_on_zero():
    engine, tape, stdout = make_engine()
    engine.execute_with_blocks('[+.]+')
    assert tape.current == 1
    assert stdout.getvalue() == ''


def test_transfer_loop():
    engine, tape, _ = make_engine()
    engine.execute_with_blocks('+++++[>++<-]>')
    assert tape.cursor == 1
    assert list(tape.memory[:2]) == [0, 10]


def test_sibling_loops_run_left_to_right():
    engine, tape, _ = make_engine()
    engine.execute_with_blocks('+[>+<-]+[>+<-]')
    assert tape.cursor == 0
    assert list(tape.memory[:2]) == [0, 2]


def test_nested_loops():
    """3 * 4 computed with a nested loop, body restored each outer pass."""
    engine, tape, _ = make_engine()
    engine.execute_with_blocks('+++[>++++[>+<-]<-]>>')
    assert tape.cursor == 2
    assert list(tape.memory[:3]) == [0, 0, 12]


def test_many_sibling_loops():
    """Long chains of sibling loops do not grow the call stack."""
    engine, tape, _ = make_engine()
    engine.execute_with_blocks('+[-]+' * 5000)
    assert tape.current == 1


def test_hello_world():
    engine, _, stdout = make_engine()
    engine.execute_with_blocks(HELLO_WORLD)
    assert stdout.getvalue() == "Hello World!\n"


def test_echo_until_newline():
    engine, _, stdout = make_engine("abc\n")
    engine.execute_with_blocks(',[.,]')
    assert stdout.getvalue() == "abc"


def test_out_of_bounds_inside_loop_stops_everything():
    engine, tape, _ = make_engine()
    with pytest.raises(OutOfBoundsError):
        engine.execute_with_blocks('+[>+]+++')
    assert tape.cursor == 255
    assert tape.current == 1


def test_prefix_with_stray_close_is_rejected():
    engine, tape, _ = make_engine()
    with pytest.raises(UnbalancedBlocksError) as exc_info:
        engine.execute_with_blocks('+]+[-]')
    assert exc_info.value.position == 1
    assert tape.current == 0


def test_unclosed_block_is_rejected():
    engine, tape, _ = make_engine()
    with pytest.raises(UnbalancedBlocksError):
        engine.execute_with_blocks('+[-')
    assert tape.current == 0


def test_trace_records_splits():
    engine, tape, _ = make_engine(tracing=True)
    engine.execute_with_blocks('+[-]>')
    assert tape.trace == ["split: prefix='+' body='-' rest='>'"]


def test_trace_off_by_default():
    engine, tape, _ = make_engine()
    engine.execute_with_blocks('+[-]')
    assert tape.trace == []
