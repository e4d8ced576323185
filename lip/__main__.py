"""CLI entry point for the lip interpreter.

Usage:
    python -m lip [-v|-vv|-vvv] [--debug-file PATH] [--max-depth N] [program_file]

Options:
  -v            Increase debug verbosity (can be repeated)
  --debug-file  Where debug information goes (default: debug.txt; `-` for stderr)
  --max-depth   Maximum nesting of lambda calls (0 disables the limit)

With a program file, every non-blank line is evaluated in order against one
environment and its value printed; the first error stops the run. Without a
program file an interactive shell is started.
"""

import argparse
import sys
from pathlib import Path

from .errors import LipError
from .interpreter import MAX_CALL_DEPTH, Interpreter
from .repl import Repl


def run_file(program_file: Path, interpreter: Interpreter) -> int:
    with open(program_file, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()
    for line in lines:
        if not line.strip():
            continue
        try:
            value = interpreter.run(line)
        except LipError as e:
            print(f"Failed to {e.stage}: {e.message}", file=sys.stderr)
            return 1
        print(value)
    return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='lip', description="lip boolean expression interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', metavar='PATH',
                        help="file to write debug information to ('-' for stderr)")
    parser.add_argument('--max-depth', type=int, default=MAX_CALL_DEPTH, metavar='N',
                        help='maximum nesting of lambda calls (0 disables the limit)')
    parser.add_argument('program', nargs='?', help='lip program file to execute')
    args = parser.parse_args(argv)

    if args.max_depth < 0:
        parser.error('--max-depth must not be negative')
    debug_file = None if args.debug_file == '-' else args.debug_file
    interpreter = Interpreter(debug_level=args.v, debug_file=debug_file, max_depth=args.max_depth or None)
    try:
        if not args.program:
            Repl(interpreter).cmdloop()
            return
        program_file = Path(args.program)
        if not program_file.exists():
            print(f"Error: file {program_file} not found", file=sys.stderr)
            sys.exit(1)
        status = run_file(program_file, interpreter)
    finally:
        interpreter.close()
    if status:
        sys.exit(status)


if __name__ == '__main__':
    main()
