#!/usr/bin/env python3
"""
ex00_halton_sequence

Prints a Halton sequence, one value per line, until it is exhausted.

    python ex00_halton_sequence.py [BASE] [SKIP]

BASE defaults to 2 and must be > 1. SKIP (default 0) drops that many leading
values. Exit codes follow sysexits: 64 on bad arguments, 74 on I/O errors and
141 when the reader closes the pipe.
"""
import sys
from pathlib import Path

EX_USAGE = 64
EX_IOERR = 74
EX_SIGPIPE = 141


def ensure_repo_on_path():
    here = Path(__file__).resolve().parent
    src = here.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def _usage(msg: str) -> int:
    print(msg, file=sys.stderr)
    return EX_USAGE


def print_sequence(base: int, skip: int, out=None) -> None:
    from halton import Sequence

    out = out or sys.stdout
    seq = Sequence.skip(base, skip)
    for value in seq:
        out.write(f"{value!r}\n")


def main(argv=None) -> int:
    ensure_repo_on_path()
    from halton import InvalidBase, RangeOverflow

    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 2:
        return _usage("Usage: ex00_halton_sequence.py [BASE] [SKIP]")
    try:
        base = int(args[0]) if args else 2
    except ValueError:
        base = 0
    if base < 2:
        return _usage("Bad value for BASE")
    try:
        skip = int(args[1]) if len(args) > 1 else 0
    except ValueError:
        skip = -1
    if skip < 0:
        return _usage("Bad value for SKIP")

    try:
        print_sequence(base, skip)
    except InvalidBase:
        return _usage("Bad value for BASE")
    except RangeOverflow:
        return _usage("Bad value for SKIP")
    except BrokenPipeError:
        return EX_SIGPIPE
    except OSError as exc:
        print(exc, file=sys.stderr)
        return EX_IOERR
    return 0


if __name__ == "__main__":
    sys.exit(main())
