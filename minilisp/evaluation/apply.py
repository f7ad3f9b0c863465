"""Application engine for MiniLisp.

Operands reaching this module are already evaluated. Builtins are tried
first, then user functions from the session's FunctionStore.
"""

from minilisp import LispValue, EvaluatorFn
from minilisp.builtin.operators import lookup_operator
from minilisp.types.environment import Environment
from minilisp.types.errors import MiniLispUnknownOperator
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol


def apply_lambda(
    fn: Lambda,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Call a user function.

    The arity must match exactly. The body runs in a copy of the caller's
    environment with the parameters bound on top; nothing from the
    definition site is captured.
    """
    call_env = fn.bind(args, caller_env)
    return evaluate_fn(fn.body, call_env)


def apply(
    head: Symbol,
    args: list[LispValue],
    env: Environment | None,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply the operator named by `head`.

    Without an environment only the core builtins exist: no comparisons and
    no user functions.
    """
    op = lookup_operator(head.name, comparisons=env is not None)
    if op is not None:
        return op(args)
    if env is not None:
        fn = env.functions.lookup(head)
        if fn is not None:
            return apply_lambda(fn, args, env, evaluate_fn)
    raise MiniLispUnknownOperator(f"Unknown operator: {head}")
