"""Core evaluator for the MiniLisp interpreter.

`evaluate(expr, env)` implements the full language. Called without an
environment it is the context-free evaluator: numbers, `quote` and the core
builtins only, with every other symbol unbound.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.evaluation.apply import apply
from minilisp.evaluation.special_forms import SPECIAL_FORMS, PURE_SPECIAL_FORMS
from minilisp.types.environment import Environment
from minilisp.types.errors import (
    MiniLispEmptyListEval,
    MiniLispEvalError,
    MiniLispUnboundVariable,
)
from minilisp.types.symbol import Symbol
from minilisp.types.value import List, Number


def evaluate(expr: SExpression, env: Environment | None = None) -> LispValue:
    match expr:
        case Number():
            return expr

        case Symbol():
            if env is None:
                raise MiniLispUnboundVariable(f"Unbound variable: {expr}")
            return env.lookup(expr)

        case List(items=()):
            raise MiniLispEmptyListEval("Cannot evaluate empty list")

        case List(items=(Symbol() as head, *tail)):
            # Special forms decide for themselves which operands to evaluate.
            forms = SPECIAL_FORMS if env is not None else PURE_SPECIAL_FORMS
            form = forms.get(head.name)
            if form is not None:
                return form(tail, env, evaluate)

            args = [evaluate(arg, env) for arg in tail]
            return apply(head, args, env, evaluate)

        case List():
            raise MiniLispEvalError("Operator must be a symbol")

    raise MiniLispEvalError(f"Invalid expression: {expr!r}")


def evaluate_pure(expr: SExpression) -> LispValue:
    """Context-free evaluation: no variables, no `if`/`defun`, no comparisons."""
    return evaluate(expr, None)
