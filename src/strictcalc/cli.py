"""
Command line entry point.

With arguments, the arguments are joined with single spaces and evaluated once;
the exit code is 0 on success and 1 on failure. Without arguments, a prompt
reads one expression per line until an empty line, `exit`, `quit` or end of
input, and the exit code is always 0.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from strictcalc import __version__
from strictcalc.config import DEFAULT_LIMITS, Limits
from strictcalc.core import Calculator
from strictcalc.logger import configure_logging, logger

PROMPT = "> "
EXIT_COMMANDS = frozenset({"exit", "quit"})


def banner(limits: Limits = DEFAULT_LIMITS) -> str:
    return "\n".join(
        [
            "Calculator (+, -, *, /) with limits.",
            "Enter an expression of the form: <number> <operator> <number> (e.g. 12.5 * 3)",
            "The fractional separator is a dot '.' (e.g. 3.14)",
            f"Limits: two operands, |operand| <= {limits.max_operand_abs:,}, "
            f"|result| <= {limits.max_result_abs:,}, "
            f"up to {limits.max_fraction_digits} digits after the point.",
            "Commands: 'exit', 'quit' or an empty line to leave.",
            "",
        ]
    )


def run_once(
    calculator: Calculator, text: str, stdout: TextIO | None = None
) -> int:
    """Evaluate one expression, print the outcome and return the exit code."""
    stdout = stdout or sys.stdout
    outcome = calculator.evaluate(text)
    print(calculator.render(outcome), file=stdout)
    return 0 if outcome.ok else 1


def run_interactive(
    calculator: Calculator,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Prompt for expressions until the user leaves; always returns 0."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print(banner(calculator.limits), file=stdout)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if not line or line.lower() in EXIT_COMMANDS:
            break
        run_once(calculator, line, stdout)

    logger.debug("interactive session finished")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strictcalc",
        description="Evaluate one <number> <operator> <number> expression "
        "with bounded operands and results.",
    )
    parser.add_argument(
        "expression",
        nargs=argparse.REMAINDER,
        help="expression to evaluate once, e.g. 12.5 '*' 3; "
        "omit to start the interactive prompt",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log pipeline stages to stderr"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    calculator = Calculator()
    if args.expression:
        return run_once(calculator, " ".join(args.expression))
    return run_interactive(calculator)


if __name__ == "__main__":
    sys.exit(main())
