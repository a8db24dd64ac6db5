from __future__ import annotations


class NilType:
    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        # Singleton: every NilType() is the same object, so `is Nil` works everywhere
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __reduce__(self):
        return (NilType, ())


Nil = NilType()
