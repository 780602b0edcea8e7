"""Scoped symbol table with quadruple generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional, TextIO, Union

from .datatypes import DataType, Value, value_name, value_type
from .quadruples import Quadruple

log = logging.getLogger(__name__)

_RULE_WIDTH = 88


class SymbolTableError(Exception):
    """Raised for declaration, type and constness errors."""


@dataclass
class SymbolEntry:
    """A declared name."""

    data_type: DataType
    value: Any = None
    is_const: bool = False
    is_used: bool = False
    args: list[tuple[DataType, str]] = field(default_factory=list)
    return_type: DataType = DataType.VOID


def _bool_text(flag: bool) -> str:
    return "true" if flag else "false"


def _scalar_text(entry: SymbolEntry) -> Optional[str]:
    kind = entry.data_type
    value = entry.value
    if kind is DataType.INT:
        return str(int(value))
    if kind is DataType.FLOAT:
        return format(float(value), "g")
    if kind is DataType.STRING:
        return str(value)
    if kind is DataType.BOOL:
        return _bool_text(bool(value))
    if kind is DataType.CHAR:
        return str(value)[:1]
    return None


class SymbolTable:
    """One scope of declarations, chained to an enclosing scope."""

    def __init__(self, parent: Optional["SymbolTable"] = None) -> None:
        self.parent = parent
        self.quadruples: list[Quadruple] = []
        self._entries: dict[str, SymbolEntry] = {}
        self._temp_counter = 0

    def insert(
        self,
        name: str,
        data_type: DataType,
        value: Any = None,
        is_const: bool = False,
        args: Optional[Iterable[tuple[DataType, str]]] = None,
        return_type: DataType = DataType.VOID,
        is_used: bool = False,
    ) -> SymbolEntry:
        """Declare ``name`` in this scope."""
        existing = self._entries.get(name)
        if existing is not None:
            if existing.data_type is not DataType.FUNC:
                raise SymbolTableError(f"Variable {name} already declared")
            if data_type is DataType.FUNC:
                raise SymbolTableError(f"Function {name} already declared")
        entry = SymbolEntry(
            data_type=data_type,
            value=value,
            is_const=is_const,
            is_used=is_used,
            args=list(args) if args is not None else [],
            return_type=return_type,
        )
        self._entries[name] = entry
        log.debug("Inserted %s", name)
        return entry

    def insert_value(
        self,
        name: Value,
        type_value: Value,
        value: Any = None,
        is_const: bool = False,
        args: Optional[Iterable[tuple[DataType, str]]] = None,
        return_type: DataType = DataType.VOID,
        is_used: bool = False,
    ) -> SymbolEntry:
        """Declare a name taken from parser values."""
        return self.insert(
            value_name(name),
            value_type(type_value),
            value,
            is_const,
            args,
            return_type,
            is_used,
        )

    def update_value(self, name: str, value: Any, data_type: DataType) -> None:
        """Assign to a declared, non-constant name of the same type."""
        entry = self.lookup(name)
        if entry is None:
            raise SymbolTableError(f"Variable {name} not declared")
        if entry.data_type is not data_type:
            raise SymbolTableError(f"Type mismatch for variable {name}")
        if entry.is_const:
            raise SymbolTableError(f"Variable {name} is constant")
        entry.is_used = True
        entry.value = value

    def mark_used(self, name: str) -> None:
        """Record that a name has been used."""
        entry = self.lookup(name)
        if entry is None:
            raise SymbolTableError(f"Function {name} not declared")
        entry.is_used = True

    def lookup(self, name: str) -> Optional[SymbolEntry]:
        """Find ``name`` here or in an enclosing scope."""
        scope: Optional[SymbolTable] = self
        while scope is not None:
            entry = scope._entries.get(name)
            if entry is not None:
                return entry
            scope = scope.parent
        return None

    def add_quadruple(self, op: str, arg1: str, arg2: str, result: str) -> Quadruple:
        """Append a quadruple to this scope's code."""
        quad = Quadruple(op, arg1, arg2, result)
        self.quadruples.append(quad)
        return quad

    def new_temp(self) -> str:
        """Return a fresh temporary name."""
        name = f"t{self._temp_counter}"
        self._temp_counter += 1
        return name

    def unused(self) -> list[str]:
        """Names declared in this scope but never used."""
        names = [name for name, entry in self._entries.items() if not entry.is_used]
        for name in names:
            log.warning("%s is declared but not used", name)
        return names

    def format_quadruples(self) -> str:
        """Return this scope's quadruples as a numbered listing."""
        lines = ["======= QUADRUPLES ======="]
        lines += [
            f"{i}: {q.op} {q.arg1} {q.arg2} {q.result}"
            for i, q in enumerate(self.quadruples)
        ]
        lines.append("=========================")
        return "\n".join(lines) + "\n"

    def write_quadruples(self, path: Union[str, Path]) -> None:
        """Write the quadruple listing to a file."""
        with open(path, "w", encoding="utf-8") as out:
            out.write(self.format_quadruples())

    def format_table(self) -> str:
        """Return a plain listing of this scope's entries."""
        parts = ["Printing Table\n"]
        for name, entry in self._entries.items():
            parts.append(f"{name} : {int(entry.data_type)} : {int(entry.is_const)} : ")
            if entry.data_type is DataType.FUNC:
                arguments = "".join(f"{arg}:{int(kind)} " for kind, arg in entry.args)
                parts.append(
                    f"NULL: \nreturn type: {int(entry.return_type)} "
                    f"and arguments: {arguments}"
                )
            elif entry.value is None:
                parts.append("NULL")
            else:
                text = _scalar_text(entry)
                parts.append(text if text is not None else "Unknown type")
            parts.append("\n")
        parts.append("\nFinishing Table\n")
        return "".join(parts)

    def write_table(self, stream: TextIO) -> None:
        """Write this scope's entries as a column table to ``stream``."""
        rule = "/" * _RULE_WIDTH
        stream.write(rule + "\n")
        stream.write(
            f"{'Name':<20}{'Type':<15}{'isConst':<10}{'isUsed':<20}{'Value':<10}\n"
        )
        stream.write("-" * _RULE_WIDTH + "\n")
        for name, entry in self._entries.items():
            stream.write(
                f"{name:<20}{str(entry.data_type):<15}"
                f"{_bool_text(entry.is_const):<10}{_bool_text(entry.is_used):<20}"
            )
            if entry.data_type is DataType.FUNC:
                arguments = "".join(f"{arg}:{kind} " for kind, arg in entry.args)
                stream.write(
                    f"NULL \nreturn type: {entry.return_type} "
                    f"and arguments: {arguments}"
                )
            elif entry.value is None:
                stream.write("NULL")
            else:
                text = _scalar_text(entry)
                stream.write(text if text is not None else "Unknown type")
            stream.write("\n")
        stream.write("\n" + rule + "\n")