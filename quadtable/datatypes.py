"""Data types and the value record shared by the parser and the symbol table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional


class DataType(IntEnum):
    """Types known to the compiler."""

    INT = 0
    FLOAT = 1
    STRING = 2
    BOOL = 3
    CHAR = 4
    FUNC = 5
    VOID = 6
    UNKNOWN = 7

    def __str__(self) -> str:
        return self.name


@dataclass
class Value:
    """A semantic value carried by the parser."""

    int_val: int = 0
    float_val: float = 0.0
    bool_val: bool = False
    string_val: Optional[str] = None
    char_val: str = ""
    void_val: Any = None
    type: DataType = DataType.UNKNOWN


def value_name(value: Value) -> str:
    """Return the identifier a value holds, or an empty string if it has none."""
    return value.string_val if value.string_val is not None else ""


def value_type(value: Value) -> DataType:
    """Return the data type recorded in a value."""
    return value.type