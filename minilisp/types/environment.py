"""Runtime environment for MiniLisp.

An Environment is a flat, ordered list of (Symbol, value) bindings for one
evaluation, plus a reference to the session's shared FunctionStore. Lookup
scans newest to oldest, so a later binding shadows an earlier one without
removing it. A function call copies the caller's bindings and appends the
parameters (see Lambda.bind): callee bodies therefore see whatever was
visible at the call site, not at the definition site.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, TYPE_CHECKING

from minilisp.types.errors import MiniLispUnboundVariable, MiniLispTypeError
from minilisp.types.symbol import Symbol
from minilisp.types.value import Value, to_source

if TYPE_CHECKING:
    from minilisp.types.function_store import FunctionStore


class Environment:
    """Stack-like variable scope over a shared FunctionStore."""

    __slots__ = ("bindings", "functions")

    def __init__(self, functions: FunctionStore, bindings: Iterable[tuple[Symbol, Value]] = ()):
        self.bindings: list[tuple[Symbol, Value]] = list(bindings)
        # Not owned: shared by every Environment of the session.
        self.functions: FunctionStore = functions

    def define(self, name: Symbol, value: Value) -> None:
        """Push a binding for `name` on top of the scope."""
        if not isinstance(name, Symbol):
            raise MiniLispTypeError(f"Cannot bind {name!r}: not a symbol")
        self.bindings.append((name, value))

    def find(self, name: Symbol) -> Value | None:
        for bound, value in reversed(self.bindings):
            if bound is name:
                return value
        return None

    def lookup(self, name: Symbol) -> Value:
        """Look up the newest binding of `name`.

        Raises MiniLispUnboundVariable if there is none.
        """
        value = self.find(name)
        if value is None:
            raise MiniLispUnboundVariable(f"Unbound variable: {name}")
        return value

    def is_bound(self, name: Symbol) -> bool:
        return self.find(name) is not None

    def copy(self) -> Environment:
        return Environment(self.functions, self.bindings)

    def extend(self, names: Iterable[Symbol], values: Iterable[Value]) -> Environment:
        """Return a copy of this scope with `names` bound to `values` on top."""
        child = self.copy()
        for name, value in zip(names, values):
            child.define(name, value)
        return child

    def clear(self) -> None:
        self.bindings.clear()

    def __len__(self) -> int:
        return len(self.bindings)

    def __str__(self) -> str:
        """Human-readable view, newest binding last."""
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {to_source(v)}" for k, v in self.bindings))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self} functions={len(self.functions)}>"
