"""User-defined function representation for MiniLisp."""

from __future__ import annotations

from io import StringIO

from minilisp import SExpression, LispValue
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol
from minilisp.types.errors import MiniLispArityError
from minilisp.types.value import to_source


class Lambda:
    """A named function's parameter list and single-expression body.

    Immutable after creation: redefining a function stores a new Lambda.
    There is no captured environment; the body sees the caller's bindings.
    """

    __slots__ = ("name", "params", "body")

    def __init__(self, name: Symbol, params: tuple[Symbol, ...], body: SExpression):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "params", tuple(params))
        object.__setattr__(self, "body", body)

    def __setattr__(self, key, value):
        raise AttributeError(f"Lambda is immutable, cannot set {key}")

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(defun ")
            buffer.write(str(self.name))
            buffer.write(" (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(") ")
            buffer.write(to_source(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the function."""
        return str(self)

    def bind(self, args: list[LispValue], caller_env: Environment) -> Environment:
        """
        Build the call scope: a copy of the caller's environment with one
        binding per parameter appended on top, in order.
        """
        if len(args) != len(self.params):
            raise MiniLispArityError(
                f"{self.name} expects {len(self.params)} argument(s), got {len(args)}"
            )
        return caller_env.extend(self.params, args)
