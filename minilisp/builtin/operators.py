"""Built-in operators for the MiniLisp evaluator.

Every operator receives its operands already evaluated and returns a Value.
CORE_OPERATORS are available to both evaluators; COMPARISON_OPERATORS only
to the environment-aware one.
"""
from __future__ import annotations

from typing import Callable

from minilisp import LispValue
from minilisp.types.errors import (
    MiniLispArityError,
    MiniLispDivideByZero,
    MiniLispEvalError,
    MiniLispTypeError,
)
from minilisp.types.value import List, Number, to_source

Operator = Callable[[list[LispValue]], LispValue]

TRUE = Number(1)
FALSE = Number(0)


def number_of(op: str, value: LispValue) -> int:
    """Unwrap a Number operand; anything else is a type error."""
    if not isinstance(value, Number):
        raise MiniLispTypeError(f"{op}: expected a number, got {to_source(value)}")
    return value.value


def list_of(op: str, value: LispValue) -> List:
    """Unwrap a non-empty List operand for car/cdr."""
    if not isinstance(value, List):
        raise MiniLispTypeError(f"{op}: argument must be a list, got {to_source(value)}")
    if not value.items:
        raise MiniLispEvalError(f"{op}: empty list")
    return value


def expect_arity(op: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise MiniLispArityError(f"{op} requires exactly {n} argument(s), got {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    """Sum of all arguments; (+) is 0."""
    total = 0
    for arg in args:
        total += number_of("+", arg)
    return Number(total)


def mul(args: list[LispValue]) -> LispValue:
    """Product of all arguments; (*) is 1."""
    product = 1
    for arg in args:
        product *= number_of("*", arg)
    return Number(product)


def sub(args: list[LispValue]) -> LispValue:
    """First argument minus the rest; unary negation for one arg."""
    if not args:
        raise MiniLispArityError("- requires at least 1 argument")
    first = number_of("-", args[0])
    if len(args) == 1:
        return Number(-first)
    return Number(first - sum(number_of("-", a) for a in args[1:]))


def div(args: list[LispValue]) -> LispValue:
    """(/ a b): integer division truncating toward zero."""
    expect_arity("/", args, 2)
    a = number_of("/", args[0])
    b = number_of("/", args[1])
    if b == 0:
        raise MiniLispDivideByZero("Division by zero")
    return Number(truncate_div(a, b))


def truncate_div(a: int, b: int) -> int:
    # Python's // floors; the language truncates.
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# -------------------------------
# Lists
# -------------------------------
def car(args: list[LispValue]) -> LispValue:
    expect_arity("car", args, 1)
    return list_of("car", args[0]).items[0]


def cdr(args: list[LispValue]) -> LispValue:
    expect_arity("cdr", args, 1)
    return List(list_of("cdr", args[0]).items[1:])


# -------------------------------
# Comparison
# -------------------------------
def _comparison(op: str, test: Callable[[int, int], bool]) -> Operator:
    def compare(args: list[LispValue]) -> LispValue:
        expect_arity(op, args, 2)
        a = number_of(op, args[0])
        b = number_of(op, args[1])
        return TRUE if test(a, b) else FALSE

    compare.__name__ = f"compare_{op}"
    compare.__doc__ = f"({op} a b) => 1 or 0"
    return compare


lt = _comparison("<", lambda a, b: a < b)
gt = _comparison(">", lambda a, b: a > b)
eq = _comparison("=", lambda a, b: a == b)
lte = _comparison("<=", lambda a, b: a <= b)
gte = _comparison(">=", lambda a, b: a >= b)


CORE_OPERATORS: dict[str, Operator] = {
    "+": add,
    "*": mul,
    "-": sub,
    "/": div,
    "car": car,
    "cdr": cdr,
}

COMPARISON_OPERATORS: dict[str, Operator] = {
    "<": lt,
    ">": gt,
    "=": eq,
    "<=": lte,
    ">=": gte,
}

ALL_OPERATORS: dict[str, Operator] = {**CORE_OPERATORS, **COMPARISON_OPERATORS}


def lookup_operator(name: str, comparisons: bool = True) -> Operator | None:
    """Find the builtin named `name`; comparisons only when `comparisons` is set."""
    table = ALL_OPERATORS if comparisons else CORE_OPERATORS
    return table.get(name)
