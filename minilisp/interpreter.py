from __future__ import annotations

import logging

from minilisp import LispValue
from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import parse, parse_all
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispParseError, MiniLispStackExhaustion
from minilisp.types.function_store import FunctionStore
from minilisp.types.symbol import SymbolTable
from minilisp.types.value import Value, result_number

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One MiniLisp session: a SymbolTable and a FunctionStore shared by every
    evaluation. Each top-level form runs in a fresh Environment.
    Independent Interpreters share nothing.
    """

    def __init__(
        self,
        symbols: SymbolTable | None = None,
        functions: FunctionStore | None = None,
    ):
        self.symbols: SymbolTable = symbols if symbols is not None else SymbolTable()
        self.functions: FunctionStore = functions if functions is not None else FunctionStore()

    def new_environment(self) -> Environment:
        return Environment(self.functions)

    def read(self, code: str) -> list[Value]:
        """Parse every form in `code`."""
        try:
            forms = parse_all(code, self.symbols)
        except RecursionError as ex:
            raise MiniLispStackExhaustion("Stack exhausted while reading") from ex
        if not forms:
            raise MiniLispParseError("Unexpected end of input")
        return forms

    def _run(self, forms: list[Value], with_env: bool) -> LispValue:
        result: LispValue | None = None
        try:
            for expr in forms:
                result = evaluate(expr, self.new_environment() if with_env else None)
        except RecursionError as ex:
            raise MiniLispStackExhaustion("Stack exhausted during evaluation") from ex
        return result

    def _first_form(self, code: str) -> list[Value]:
        try:
            return [parse(code, self.symbols)]
        except RecursionError as ex:
            raise MiniLispStackExhaustion("Stack exhausted while reading") from ex

    def eval(self, code: str) -> LispValue:
        """Evaluate the first form in `code`; trailing text is ignored."""
        return self._run(self._first_form(code), with_env=True)

    def eval_all(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order; return the last result."""
        return self._run(self.read(code), with_env=True)

    def evaluate_pure(self, code: str) -> LispValue:
        """Context-free evaluation of the first form in `code`."""
        return self._run(self._first_form(code), with_env=False)

    def eval_number(self, code: str) -> int:
        """Evaluate `code` and extract the numeric result (0 if not a number)."""
        return result_number(self.eval(code))

    def fn_count(self) -> int:
        return self.functions.size()

    def reset(self, symbols: bool = False) -> None:
        """Forget all function definitions; with `symbols`, clear the interner too."""
        logger.debug("Resetting interpreter session")
        self.functions.clear()
        if symbols:
            self.symbols.clear()
