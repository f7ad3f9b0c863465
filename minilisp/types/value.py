"""S-expression values.

A Value is exactly one of:
  - Number: a signed integer
  - Symbol: an interned handle (minilisp.types.symbol.Symbol)
  - List:   an ordered, immutable sequence of Values

Number and List are frozen dataclasses; List stores its children in a tuple,
so computing a tail always builds a new List and never mutates the source.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import Union

from minilisp.types.symbol import Symbol


@dataclass(frozen=True, slots=True)
class Number:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class List:
    items: tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return List(self.items[index])
        return self.items[index]

    def __str__(self) -> str:
        return to_source(self)


Value = Union[Number, Symbol, List]


def to_source(value: Value) -> str:
    """Render a Value back into S-expression text."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def _write(value: Value, buffer: StringIO) -> None:
    match value:
        case Number(value=n):
            buffer.write(str(n))
        case Symbol():
            buffer.write(value.name)
        case List(items=items):
            buffer.write("(")
            for i, item in enumerate(items):
                if i:
                    buffer.write(" ")
                _write(item, buffer)
            buffer.write(")")
        case _:
            raise TypeError(f"Not a MiniLisp value: {value!r}")


def result_number(value: Value) -> int:
    """Extract the integer a host sees for a top-level result.

    Numbers surface as their integer; any other result (a `defun` name, a
    list) surfaces as 0. Hosts that must tell a real 0 apart from a
    non-numeric result should inspect the Value itself.
    """
    if isinstance(value, Number):
        return value.value
    return 0
