from __future__ import annotations


class Symbol:
    """A named symbol. Equality is identity; obtain instances via SymbolTable.intern."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


class SymbolTable:
    """Interning store: one Symbol per name for the lifetime of the table.

    The table only grows. Two symbols read or created through the same table
    with the same name are the same object, so bindings compare keys with `is`.
    """

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name)
        if sym is None:
            sym = Symbol(name)
            self._symbols[name] = sym
        return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)
