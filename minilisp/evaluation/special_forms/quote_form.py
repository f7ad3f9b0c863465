from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.types.errors import MiniLispArityError


def quote_form(
    tail: list[SExpression], env, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise MiniLispArityError("quote expects exactly 1 argument")
    return tail[0]
