import logging
import sys

from minilisp import config
from minilisp.interpreter import Interpreter
from minilisp.repl import run_repl, run_self_checks


def main() -> int:
    logging.basicConfig(
        level=config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.setrecursionlimit(config.get_recursion_limit())

    interp = Interpreter()
    run_self_checks(interp)
    print("Self-checks passed!")
    return run_repl(interp, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
