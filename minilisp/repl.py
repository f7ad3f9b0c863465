"""Interactive line REPL for MiniLisp."""

from __future__ import annotations

import logging
from typing import TextIO

from minilisp import config
from minilisp.interpreter import Interpreter
from minilisp.types.errors import MiniLispError, MiniLispStackExhaustion
from minilisp.types.value import result_number

logger = logging.getLogger(__name__)

# (source, expected) pairs checked with the context-free evaluator at start-up.
SELF_CHECKS = (
    ("(+ 10 (* 2 5))", 20),
    ("(- 100 (* 2 (+ 10 20 5)))", 30),
    ("(car '(10 20 30))", 10),
    ("(car (cdr (quote (10 20 30))))", 20),
    ("(+ (car '(10 5)) (car (cdr '(3 20))))", 30),
)

BANNER = (
    "\n--- MiniLisp Runtime REPL ---\n"
    "Enter Lisp expression (e.g., \"(car '(1 2))\") or 'q' to quit.\n"
)


class SelfCheckFailed(AssertionError):
    pass


def run_self_checks(interpreter: Interpreter) -> None:
    for source, expected in SELF_CHECKS:
        actual = result_number(interpreter.evaluate_pure(source))
        if actual != expected:
            raise SelfCheckFailed(f"{source} evaluated to {actual}, expected {expected}")


def run_repl(interpreter: Interpreter, stdin: TextIO, stdout: TextIO, prompt: str | None = None) -> int:
    """Read-eval-print until EOF or the quit command; return an exit status."""
    prompt = config.get_prompt() if prompt is None else prompt
    stdout.write(BANNER)
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\n")
        if line == config.QUIT_COMMAND:
            break
        if not line.strip():
            continue

        try:
            result = interpreter.eval_number(line)
        except MiniLispStackExhaustion as ex:
            logger.critical("Fatal: %s", ex)
            return 1
        except MiniLispError as ex:
            logger.error("Runtime Lisp Error: %s", ex)
            result = 0
        stdout.write(f"{config.RESULT_PREFIX}{result}\n")
    return 0
