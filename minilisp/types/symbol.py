"""Symbols and the symbol table that interns them.

A Symbol is a handle issued by a SymbolTable. The table hands out exactly one
Symbol object per distinct name, so two handles are equal iff they are the
same object and equality never re-compares text.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class Symbol:
    __slots__ = ("name", "serial")

    def __init__(self, name: str, serial: int):
        self.name = name
        self.serial = serial

    # Identity equality/hash (object defaults) is the handle comparison.

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Interns symbol names into permanent Symbol handles.

    Entries are never moved or freed while the table lives; Python objects do
    not relocate, so a handle stays valid across any number of later inserts.
    `clear()` forgets every entry: handles issued before it must not be used
    again, and a later `intern` of the same name returns a new, unequal handle.
    """

    __slots__ = ("_by_name", "_entries", "_issued")

    def __init__(self):
        self._by_name: dict[str, Symbol] = {}
        self._entries: list[Symbol] = []
        # Monotonic across clears so serials are never reused.
        self._issued = 0

    def intern(self, name: str) -> Symbol:
        sym = self._by_name.get(name)
        if sym is None:
            sym = Symbol(name, self._issued)
            self._issued += 1
            self._by_name[name] = sym
            self._entries.append(sym)
        return sym

    def lookup(self, name: str) -> Symbol | None:
        """Return the handle for `name` if it was interned, without inserting."""
        return self._by_name.get(name)

    def size(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        logger.debug("Clearing symbol table (%d entries)", len(self._entries))
        self._by_name.clear()
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name
