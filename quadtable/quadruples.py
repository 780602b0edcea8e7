"""Quadruple intermediate code and its tabular listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from .datatypes import DataType

_MAX_TEXT = 49
_INDEX_WIDTH = 8
_FIELD_WIDTH = 16


@dataclass(frozen=True)
class Quadruple:
    """One three-address instruction."""

    op: str
    arg1: str
    arg2: str
    result: str


@dataclass(frozen=True)
class Operand:
    """A typed operand whose value is rendered into a quadruple."""

    type: DataType
    value: Any = None


def operand_text(operand: Operand) -> str:
    """Render an operand's value as text, as it appears in a quadruple."""
    kind = operand.type
    if kind is DataType.INT:
        text = "%d" % int(operand.value)
    elif kind is DataType.FLOAT:
        text = "%f" % float(operand.value)
    elif kind is DataType.STRING:
        text = str(operand.value)
    elif kind is DataType.BOOL:
        text = "True" if operand.value else "False"
    elif kind is DataType.CHAR:
        text = str(operand.value)[:1]
    else:
        text = "unknown"
    return text[:_MAX_TEXT]


def _arg_text(operand: Optional[Operand]) -> str:
    if operand is None or operand.type is DataType.UNKNOWN:
        return ""
    return operand_text(operand)


def _separator() -> str:
    return "+".join(["-" * _INDEX_WIDTH] + ["-" * _FIELD_WIDTH] * 4)


def _row(index: Any, *cells: str) -> str:
    parts = [f"{index!s:<{_INDEX_WIDTH}}"] + [f"{c:<{_FIELD_WIDTH}}" for c in cells]
    return "|".join(parts)


@dataclass
class QuadrupleList:
    """An ordered list of quadruples."""

    quadruples: list[Quadruple] = field(default_factory=list)
    result_counter: int = 0
    label_counter: int = 0

    def add(
        self,
        op: str,
        arg1: Optional[Operand],
        arg2: Optional[Operand],
        result: str = "",
    ) -> Quadruple:
        """Append a quadruple; unknown or missing operands become empty fields."""
        quad = Quadruple(op, _arg_text(arg1), _arg_text(arg2), result)
        self.quadruples.append(quad)
        return quad

    def format_table(self) -> str:
        """Return the quadruples as a bordered text table."""
        sep = _separator()
        lines = [_row("Index", "Op", "Arg1", "Arg2", "Result"), sep]
        for index, quad in enumerate(self.quadruples):
            lines.append(_row(index, quad.op, quad.arg1, quad.arg2, quad.result))
            lines.append(sep)
        return "\n".join(lines) + "\n"

    def write(self, path: Union[str, Path]) -> None:
        """Write the table to a file."""
        with open(path, "w", encoding="utf-8") as out:
            out.write(self.format_table())

    def merge(self, main: "QuadrupleList") -> "QuadrupleList":
        """Append these quadruples to ``main`` and return it."""
        main.quadruples.extend(self.quadruples)
        return main

    def reverse_merge(self, main: "QuadrupleList") -> "QuadrupleList":
        """Append these quadruples to ``main`` in reverse order and return it."""
        main.quadruples.extend(reversed(self.quadruples))
        return main

    def __iter__(self) -> Iterator[Quadruple]:
        return iter(self.quadruples)

    def __len__(self) -> int:
        return len(self.quadruples)