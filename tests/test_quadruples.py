import pytest

from quadtable.datatypes import DataType
from quadtable.quadruples import Operand, Quadruple, QuadrupleList, operand_text


def test_int_operand():
    assert operand_text(Operand(DataType.INT, 42)) == str(42)


def test_float_operand_six_decimals():
    assert operand_text(Operand(DataType.FLOAT, 1.5)) == "1.500000"


@pytest.mark.parametrize("flag,expected", [(True, "True"), (False, "False")])
def test_bool_operand(flag, expected):
    assert operand_text(Operand(DataType.BOOL, flag)) == expected


def test_string_and_char_operands():
    assert operand_text(Operand(DataType.STRING, "hello")) == "hello"
    assert operand_text(Operand(DataType.CHAR, "z")) == "z"


@pytest.mark.parametrize("kind", [DataType.FUNC, DataType.VOID, DataType.UNKNOWN])
def test_other_operand_is_unknown(kind):
    assert operand_text(Operand(kind, None)) == "unknown"


def test_long_string_is_truncated():
    text = operand_text(Operand(DataType.STRING, "x" * 200))
    assert len(text) < 50
    assert set(text) == {"x"}


def test_add_renders_operands():
    quads = QuadrupleList()
    quad = quads.add("ADD", Operand(DataType.INT, 3), Operand(DataType.STRING, "a"), "t0")
    assert quad == Quadruple("ADD", "3", "a", "t0")
    assert list(quads) == [quad]
    assert len(quads) == 1


def test_add_unknown_and_missing_become_empty():
    quads = QuadrupleList()
    quad = quads.add("JMP", Operand(DataType.UNKNOWN), None)
    assert quad.arg1 == ""
    assert quad.arg2 == ""
    assert quad.result == ""


def _list_of(*ops):
    quads = QuadrupleList()
    for op in ops:
        quads.add(op, None, None, op.lower())
    return quads


def test_merge_appends_in_order():
    main = _list_of("A")
    other = _list_of("B", "C")
    result = other.merge(main)
    assert result is main
    assert [q.op for q in main] == ["A", "B", "C"]
    assert [q.op for q in other] == ["B", "C"]


def test_reverse_merge_appends_reversed():
    main = _list_of("A")
    result = _list_of("B", "C", "D").reverse_merge(main)
    assert result is main
    assert [q.op for q in main] == ["A", "D", "C", "B"]


def test_format_table_shape():
    quads = _list_of("MOV", "ADD")
    lines = quads.format_table().splitlines()
    assert len(lines) == 2 + 2 * len(quads)
    assert lines[0].split("|")[0].strip() == "Index"
    assert all(len(line) == len(lines[0]) for line in lines)
    assert lines[2].split("|")[1].strip() == "MOV"
    assert lines[4].split("|")[4].strip() == "add"


def test_write_matches_format(tmp_path):
    quads = _list_of("MOV")
    path = tmp_path / "quads.txt"
    quads.write(path)
    assert path.read_text(encoding="utf-8") == quads.format_table()