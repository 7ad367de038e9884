from __future__ import annotations

import argparse
import logging
import sys

from elysp.config import get_log_level, get_recursion_limit
from elysp.interpreter import Interpreter
from elysp.repl import repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="elysp", description="elysp Lisp interpreter")
    parser.add_argument("file", nargs="?", help="source file to run; starts a REPL when omitted")
    parser.add_argument("--no-prelude", action="store_true", help="do not load the bundled prelude")
    parser.add_argument(
        "--log-level",
        default=get_log_level(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(get_recursion_limit())

    interp = Interpreter(prelude=not args.no_prelude)
    if args.file:
        return 0 if interp.run_file(args.file) else 1
    repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
