"""Command-line read-eval-print loop for Pico.

    pico                 interactive session on stdin
    pico FILE [FILE ...] evaluate each file in order, printing every result

Errors are reported to stderr as `error: <message>` and the loop resumes with
the next form.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from pico.config import Settings
from pico.interpreter import Interpreter
from pico.types.value import EOF, FAILURE

logger = logging.getLogger(__name__)

PROMPT = "pico> "


def run_stream(interp: Interpreter, stream: TextIO, out: TextIO, err: TextIO, prompt: str = "") -> int:
    """Read, evaluate and print every form of `stream`. Returns the number of failed forms."""
    reader = interp.reader(stream)
    failures = 0
    while True:
        if prompt:
            out.write(prompt)
            out.flush()
        expr = interp.read(reader)
        if expr is EOF:
            break
        if expr is not FAILURE:
            result = interp.eval(expr)
            if result is not FAILURE:
                interp.print(result, out)
                continue
        failures += 1
        err.write(f"error: {interp.errors.consume()}\n")
    if prompt:
        out.write("\n")
    return failures


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pico", description="Pico Lisp interpreter")
    parser.add_argument("files", nargs="*", help="source files to evaluate (default: read stdin)")
    parser.add_argument("--log-level", default=None, help="logging level (default: $PICO_LOG_LEVEL or WARNING)")
    parser.add_argument("--max-error", type=int, default=None, help="maximum length of an error message")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    if args.log_level:
        settings.log_level = args.log_level.upper()
    if args.max_error is not None:
        settings.max_error = args.max_error
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter(settings)
    if not args.files:
        prompt = PROMPT if sys.stdin.isatty() else ""
        run_stream(interp, sys.stdin, sys.stdout, sys.stderr, prompt)
        return 0

    failures = 0
    for path in args.files:
        logger.info("Evaluating %s", path)
        with open(path, encoding="utf-8") as f:
            failures += run_stream(interp, f, sys.stdout, sys.stderr)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
