"""Line-based interactive loop and command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from ezscheme.config import get_trace_enabled
from ezscheme.errors import SchemeError
from ezscheme.evaluation.trace import LoggingTracer
from ezscheme.interpreter import Interpreter
from ezscheme.printer import to_repr
from ezscheme.reader.parser import parse
from ezscheme.types.nil import NilType
from ezscheme.types.procedures import Closure

PROMPT = "[ez] >> "
BANNER = "Type a Scheme expression or 'quit'"


def format_result(value) -> Optional[str]:
    """What the REPL shows for a value; None means print nothing."""
    if isinstance(value, NilType):
        return None
    if isinstance(value, Closure):
        return ": <procedure object>"
    return f": {to_repr(value)}"


def repl(
    interpreter: Optional[Interpreter] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Read a line, evaluate its first datum, print the result. 'quit' or EOF ends."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    interp = interpreter or Interpreter(stdout)

    stdout.write(BANNER + "\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if line == "quit":
            break
        if not line:
            continue
        try:
            exprs = parse(line)
            if not exprs:
                continue
            shown = format_result(interp.interpret(exprs[0]))
        except SchemeError as e:
            stdout.write(f"error: {e}\n")
            continue
        except RecursionError:
            stdout.write("error: maximum recursion depth exceeded\n")
            continue
        if shown is not None:
            stdout.write(shown + "\n")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="ezscheme", description="A small Scheme interpreter")
    parser.add_argument("file", nargs="?", type=Path, help="Scheme source file to run (default: start the REPL)")
    parser.add_argument("--strict-unbound", action="store_true", default=None,
                        help="Treat reads of unbound variables as errors")
    parser.add_argument("--trace", action="store_true", help="Log every eval/apply step to stderr")
    args = parser.parse_args(argv)

    tracer = None
    if args.trace or get_trace_enabled():
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        tracer = LoggingTracer()

    interp = Interpreter(strict_unbound=args.strict_unbound, tracer=tracer)

    if args.file is None:
        repl(interp)
        return 0

    try:
        interp.run(args.file.read_text())
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except SchemeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
