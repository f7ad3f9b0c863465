from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.types.errors import MiniLispArityError, MiniLispTypeError
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol
from minilisp.types.value import List, to_source


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params...) body)
    Stores the body unevaluated in the shared FunctionStore, replacing any
    earlier definition of `name`, and returns `name`.
    """
    if len(tail) != 3:
        raise MiniLispArityError("defun requires a name, a parameter list and a body")

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise MiniLispTypeError(f"defun: function name must be a symbol, got {to_source(name)}")
    if not isinstance(params, List):
        raise MiniLispTypeError(f"defun: parameter list must be a list, got {to_source(params)}")
    for param in params:
        if not isinstance(param, Symbol):
            raise MiniLispTypeError(f"defun: parameter must be a symbol, got {to_source(param)}")

    env.functions.define(name, Lambda(name, params.items, body))
    return name
