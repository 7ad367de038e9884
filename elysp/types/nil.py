from __future__ import annotations


class NilType:
    """The empty list. There is exactly one instance, `Nil`."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __iter__(self):
        return iter(())


Nil = NilType()
