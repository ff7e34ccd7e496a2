from __future__ import annotations

from enum import Enum


class PinDirection(str, Enum):
    input = "I"
    output = "O"
    inout = "B"

    @classmethod
    def from_token(cls, token: str) -> "PinDirection":
        """Map a free-form direction word ("in", "output", "inout", ...).

        ``inout`` is checked before the first-letter rule, which would read it as input.
        """
        if token.startswith("inout"):
            return cls.inout
        if token.startswith("i"):
            return cls.input
        if token.startswith("o"):
            return cls.output
        return cls.inout
