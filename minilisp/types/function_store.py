"""Shared store of user-defined functions, keyed by interned name."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from minilisp.types.symbol import Symbol
from minilisp.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)


class FunctionStore:
    """Ordered mapping from function name to Lambda.

    Last write wins: `define` removes any previous entry for the name before
    inserting, so exactly one definition per name exists and the new one
    sits at the end of the definition order.
    """

    __slots__ = ("_functions",)

    def __init__(self):
        self._functions: dict[Symbol, Lambda] = {}

    def define(self, name: Symbol, fn: Lambda) -> None:
        if self._functions.pop(name, None) is not None:
            logger.debug("Redefining function %s", name)
        else:
            logger.debug("Defining function %s", name)
        self._functions[name] = fn

    def lookup(self, name: Symbol) -> Optional[Lambda]:
        return self._functions.get(name)

    def clear(self) -> None:
        logger.debug("Clearing function store (%d definitions)", len(self._functions))
        self._functions.clear()

    def size(self) -> int:
        return len(self._functions)

    def names(self) -> list[Symbol]:
        return list(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, name: Symbol) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[Lambda]:
        return iter(list(self._functions.values()))

    def __repr__(self) -> str:
        return f"<FunctionStore {[str(n) for n in self._functions]}>"
