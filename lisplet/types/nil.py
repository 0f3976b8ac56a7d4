from __future__ import annotations


class NilType:
    """The absent value.

    Produced by forms with no printable result (``define``, ``set!``, an empty
    ``begin``) and by a numeric literal the reader could not convert. Nil is
    false in a conditional.
    """

    _instance: NilType | None = None

    def __new__(cls) -> NilType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "nil"

    def __bool__(self):
        return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(None)


Nil = NilType()
