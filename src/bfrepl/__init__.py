__version__ = '1.2.0'

from .api import RunResult, run_string
from .blocks import BlockEngine
from .brackets import BlockState, classify, find_invalid_close, find_matching_close, has_blocks
from .errors import BFError, Direction, OutOfBoundsError, UnbalancedBlocksError
from .executor import FlatExecutor
from .options import ReplOptions
from .session import Session
from .tape import Tape

__all__ = [
    'BFError',
    'BlockEngine',
    'BlockState',
    'Direction',
    'FlatExecutor',
    'OutOfBoundsError',
    'ReplOptions',
    'RunResult',
    'Session',
    'Tape',
    'UnbalancedBlocksError',
    'classify',
    'find_invalid_close',
    'find_matching_close',
    'has_blocks',
    'run_string',
]
