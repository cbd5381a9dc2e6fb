"""Command-line driver.

    kappa                 interactive prompt
    kappa FILE [ARGS...]  run FILE with ARGS bound to *ARGV*
"""

from __future__ import annotations

import atexit
import logging
import sys
from typing import Callable, Sequence

from kappa import config
from kappa.errors import KappaError, ThrowException
from kappa.interpreter import Interpreter
from kappa.printer import pr_str

logger = logging.getLogger(__name__)

# Everything an evaluation may legitimately raise up to the driver
EVAL_ERRORS = (KappaError, ThrowException, RecursionError)


def format_error(ex: BaseException) -> str:
    if isinstance(ex, ThrowException):
        return pr_str(ex.value, True)
    if isinstance(ex, RecursionError):
        return "maximum recursion depth exceeded (recursive call not in tail position?)"
    return str(ex)


def _lift_int_digit_limit() -> None:
    # Integers are unbounded; Python 3.11+ otherwise refuses to read or print
    # integers past 4300 digits
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def _enable_history() -> None:
    history_file = config.get_history_file()
    if history_file is None:
        return
    try:
        import readline
    except ImportError:
        logger.debug("readline unavailable, line history disabled")
        return
    try:
        readline.read_history_file(history_file)
    except FileNotFoundError:
        pass
    except OSError as ex:
        logger.warning("Cannot read history file %s: %s", history_file, ex)
    atexit.register(_save_history, readline, history_file)


def _save_history(readline, history_file) -> None:
    try:
        readline.write_history_file(history_file)
    except OSError as ex:
        logger.warning("Cannot write history file %s: %s", history_file, ex)


def run_repl(
    interp: Interpreter,
    prompt: str | None = None,
    input_fn: Callable[[str], str] | None = None,
) -> None:
    """Read-eval-print until EOF. Errors are reported and the loop continues."""
    prompt = config.get_prompt() if prompt is None else prompt
    input_fn = input_fn or input
    _lift_int_digit_limit()
    while True:
        try:
            line = input_fn(prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue
        try:
            output = interp.rep(line)
        except EVAL_ERRORS as ex:
            print(f"Error: {format_error(ex)}", file=sys.stderr)
            continue
        if output is not None:
            print(output)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    _lift_int_digit_limit()
    debug = config.debug_enabled()
    config.setup_logging("DEBUG" if debug else config.get_log_level())

    interp = Interpreter(argv=args[1:], debug=debug)
    if args:
        try:
            interp.load_file(args[0])
        except EVAL_ERRORS as ex:
            print(f"Error: {format_error(ex)}", file=sys.stderr)
            return 1
        return 0

    _enable_history()
    run_repl(interp)
    return 0
