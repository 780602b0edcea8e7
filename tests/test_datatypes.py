import pytest

from quadtable.datatypes import DataType, Value, value_name, value_type


def test_value_name_returns_string():
    assert value_name(Value(string_val="counter")) == "counter"


def test_value_name_without_string_is_empty():
    assert value_name(Value()) == ""


@pytest.mark.parametrize("data_type", list(DataType))
def test_value_type_round_trip(data_type):
    assert value_type(Value(type=data_type)) is data_type


def test_default_value_type_is_unknown():
    assert value_type(Value()) is DataType.UNKNOWN


def test_enum_order_matches_numbering():
    numbers = [int(value_type(Value(type=member))) for member in DataType]
    assert numbers == list(range(len(numbers)))
    assert value_type(Value(type=DataType.FUNC)) == 5


def test_str_is_member_name():
    found = value_type(Value(type=DataType.BOOL))
    assert str(found) == DataType.BOOL.name