from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.errors import MiniLispArityError, MiniLispTypeError
from minilisp.types.environment import Environment
from minilisp.types.value import Number, to_source


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if cond then else)
    Only the chosen branch is evaluated. Any nonzero number is true.
    """
    if len(tail) != 3:
        raise MiniLispArityError("if requires a condition, a then-expression and an else-expression")

    cond = evaluate_fn(tail[0], env)
    if not isinstance(cond, Number):
        raise MiniLispTypeError(f"if: condition must be a number, got {to_source(cond)}")

    if cond.value != 0:
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
