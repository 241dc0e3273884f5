"""CLI entry point for the SIMPLE semantics demos.

Usage:
    python -m simplesem [-v|-vv|-vvv] [PROGRAM]
    python -m simplesem [-v...] --big-step [PROGRAM]
    python -m simplesem --list

Options:
  -v            Increase debug verbosity (can be repeated)
  --big-step    Evaluate with the big-step evaluator instead of tracing
                the small-step machine
  --list        List the built-in programs

The small-step machine prints one line per state, ending with the
`do-nothing` state and the final environment. Debug information is
written to `debug.txt` in the current directory when verbosity is
greater than zero.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .big_step import Evaluator
from .errors import SimpleError
from .programs import PROGRAMS
from .small_step import Machine


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="SIMPLE small-step and big-step semantics")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--big-step', action='store_true', help='evaluate with big-step semantics')
    group.add_argument('--list', action='store_true', help='list the built-in programs')
    parser.add_argument('program', nargs='?', default='assign', help='built-in program to run (default: assign)')
    args = parser.parse_args(argv)

    if args.list:
        for name, program in PROGRAMS.items():
            print(f"{name}: {program.render()}")
        return

    if args.program not in PROGRAMS:
        parser.error(f"unknown program {args.program!r}; use --list to see the choices")
    program = PROGRAMS[args.program]
    debug_file = 'debug.txt' if args.v > 0 else None

    try:
        if args.big_step:
            print(program.inspect())
            env = Evaluator(debug_level=args.v, debug_file=debug_file).run(program)
            print(env.render())
        else:
            Machine(program, debug_level=args.v, debug_file=debug_file).run()
    except SimpleError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
