"""
Literal values carried by tokens and AST leaves.

A LiteralValue is one of four variants: boolean, null, number (64-bit
float) or string. Each variant formats itself the way Lox prints values.
"""

import math
from decimal import Decimal
from dataclasses import dataclass
from enum import Enum
from typing import Union


class LiteralKind(Enum):
    """Variant tag of a LiteralValue."""
    BOOLEAN = "boolean"
    NULL = "null"
    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True)
class LiteralValue:
    """
    Tagged union of the primitive constants.

    Build instances through the variant constructors rather than the
    dataclass initializer so the payload always matches the tag.
    """
    kind: LiteralKind
    value: Union[bool, float, str, None] = None

    @classmethod
    def boolean(cls, value: bool) -> "LiteralValue":
        return cls(LiteralKind.BOOLEAN, bool(value))

    @classmethod
    def null(cls) -> "LiteralValue":
        return cls(LiteralKind.NULL, None)

    @classmethod
    def number(cls, value: float) -> "LiteralValue":
        return cls(LiteralKind.NUMBER, float(value))

    @classmethod
    def string(cls, value: str) -> "LiteralValue":
        return cls(LiteralKind.STRING, str(value))

    @property
    def is_null(self) -> bool:
        return self.kind is LiteralKind.NULL

    def __str__(self) -> str:
        if self.kind is LiteralKind.BOOLEAN:
            return "true" if self.value else "false"
        if self.kind is LiteralKind.NULL:
            return "null"
        if self.kind is LiteralKind.NUMBER:
            return format_number(self.value)
        return self.value


def format_number(value: float) -> str:
    """
    Format a float the way Lox prints numbers.

    Integral values drop the fractional part (123.0 -> "123"); everything
    else is written in plain positional notation, never with an exponent.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    if value.is_integer():
        text = str(int(value))
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-" + text
        return text

    # repr() gives the shortest round-tripping digits; Decimal lays them
    # out without an exponent.
    return format(Decimal(repr(value)), "f")
