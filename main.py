import argparse
import logging
import sys

from interpreter import *
from core_words import install

log = logging.getLogger(__name__)

# ===================================================================
#      COMMAND-LINE RUNNER
# ===================================================================

def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="wordstack",
        description="A minimal stack-based word interpreter.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument("filepath", nargs="?", default=None,
                        help="Path to the source file to execute ('-' or none reads stdin).")
    parser.add_argument("-e", "--eval", dest="programs", action="append", default=[], metavar="TEXT",
                        help="Evaluate TEXT before the file. May be given several times.")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on tokens that are neither literals nor defined words.")
    parser.add_argument("--float", dest="value_type", action="store_const", const=float, default=int,
                        help="Parse literals as floats instead of integers.")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="Print the final stack state after execution and log debug messages.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log status messages.")
    return parser

def read_source(filepath):
    if filepath == "-" or (filepath is None and not sys.stdin.isatty()):
        return sys.stdin.read()
    if filepath is None:
        return ""
    with open(filepath, 'r', encoding='utf-8') as f:
        return f.read()

def run(interpreter, programs):
    """
    Evaluates each program in turn, stopping at the first failure.
    Returns True if every program completed.
    """
    try:
        for program in programs:
            interpreter.parse(program)
    except (InterpreterError, ArithmeticError, TypeError, ValueError) as e:
        print(f"Runtime Error: {e}", file=sys.stderr)
        print(f"Execution halted. Current stack: {interpreter.stack}", file=sys.stderr)
        return False
    return True

def main(argv=None):
    logging.basicConfig(level=logging.ERROR)
    args = build_arg_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.verbose:
        logging.getLogger().setLevel(logging.INFO)

    try:
        code = read_source(args.filepath)
    except FileNotFoundError:
        print(f"Error: File not found at '{args.filepath}'", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: Could not read file '{args.filepath}': {e}", file=sys.stderr)
        return 1

    interpreter = install(Interpreter(value_type=args.value_type, strict=args.strict))
    log.info("Loaded %d words", len(interpreter.words))
    ok = run(interpreter, args.programs + [code])

    if args.debug:
        print("\n--- Execution Finished ---")
        print(f"Final stack state: {interpreter.stack}")
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
