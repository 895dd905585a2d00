import io
import sys

from . import __version__
from .session import Session


def main():
    print(f"BrainF**k {__version__} interactive interpreter")
    sys.stdout.flush()

    # Undecodable input bytes become lone surrogates, which run as no-ops.
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors='surrogateescape')

    session = Session()
    try:
        return session.run()
    except KeyboardInterrupt:
        print()
        return 130
