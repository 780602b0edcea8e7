# quadtable

`quadtable` holds the bookkeeping that the front end of a small compiler needs: data types, symbol-table scopes and quadruple (three-address) code.

## Modules

### `quadtable.datatypes`

- `DataType` is an `IntEnum` of the language's types: `INT`, `FLOAT`, `STRING`, `BOOL`, `CHAR`, `FUNC`, `VOID` and `UNKNOWN`, numbered 0 to 7. `str()` of a member gives its name, for example `"INT"`.
- `Value` is a dataclass for a parser's semantic value. It has the fields `int_val`, `float_val`, `bool_val`, `string_val`, `char_val`, `void_val` and `type`.
- `value_name(value)` returns `value.string_val`, or `""` when that is `None`.
- `value_type(value)` returns `value.type`.

### `quadtable.quadruples`

- `Quadruple(op, arg1, arg2, result)` is a frozen dataclass of four strings.
- `Operand(type, value)` is a typed operand.
- `operand_text(operand)` renders an operand's value as text. Integers use `%d`, floats use `%f` (for example `"2.500000"`), booleans become `"True"` or `"False"`, and a char is cut to its first character. Any other type becomes `"unknown"`. The text is cut to 49 characters.
- `QuadrupleList` collects quadruples:
  - `add(op, arg1, arg2, result="")` appends a quadruple and returns it. An operand that is `None` or of type `UNKNOWN` becomes an empty field.
  - `format_table()` returns a bordered table with the columns Index, Op, Arg1, Arg2 and Result.
  - `write(path)` writes that table to a file.
  - `merge(main)` appends these quadruples to `main` and returns `main`. `reverse_merge(main)` does the same in reverse order.
  - The list can be iterated and supports `len()`. It also has the counters `result_counter` and `label_counter` for the caller's own use.

### `quadtable.symbol_table`

- `SymbolTable(parent=None)` is one scope, and it can be chained to an enclosing scope.
  - `insert(name, data_type, value=None, is_const=False, args=None, return_type=DataType.VOID, is_used=False)` declares a name and returns its `SymbolEntry`. It raises `SymbolTableError` in two cases: redeclaring a variable in the same scope, and declaring a function twice. A name that is already a function may be redeclared as a non-function, and the new entry replaces the old one.
  - `insert_value(name, type_value, ...)` does the same, taking the name and type from two `Value`s.
  - `update_value(name, value, data_type)` looks the name up through the enclosing scopes and assigns the value. It raises `SymbolTableError` in three cases: the name is not declared, the types differ, or the name is constant. A successful update marks the name as used.
  - `mark_used(name)` marks a name as used. It raises `SymbolTableError` if the name is not declared.
  - `lookup(name)` returns the `SymbolEntry` from this scope or the nearest enclosing scope, or `None`.
  - `add_quadruple(op, arg1, arg2, result)` appends to this scope's `quadruples` list. `new_temp()` returns `t0`, `t1`, … in turn.
  - `unused()` returns the names in this scope that were never used, and logs a warning for each one.
  - `format_quadruples()` returns a numbered listing. `write_quadruples(path)` writes that listing to a file.
  - `format_table()` returns a plain listing of this scope's entries. `write_table(stream)` writes a column table (Name, Type, isConst, isUsed, Value) to an open text stream.
- `SymbolEntry` holds `data_type`, `value`, `is_const`, `is_used`, `args` (a list of `(DataType, name)` pairs) and `return_type`.

## Installation

```
pip install .
```

## Usage

```python
from quadtable.datatypes import DataType
from quadtable.quadruples import Operand, QuadrupleList
from quadtable.symbol_table import SymbolTable, SymbolTableError

globals_ = SymbolTable()
globals_.insert("x", DataType.INT, 1, False, None, DataType.VOID, False)

block = SymbolTable(globals_)
block.update_value("x", 5, DataType.INT)   # found in the parent scope
print(block.lookup("x").value)             # 5

try:
    block.update_value("x", "hi", DataType.STRING)
except SymbolTableError as err:
    print(err)                             # Type mismatch for variable x

t = block.new_temp()                       # "t0"
block.add_quadruple("ADD", "x", "1", t)
print(block.format_quadruples())

print(globals_.unused())                   # [] - x was used by the update

code = QuadrupleList()
code.add("MOV", Operand(DataType.INT, 3), Operand(DataType.UNKNOWN, None), "y")
print(code.format_table())
code.write("quadruples.txt")
```

## What it does not do

`quadtable` is a library only. It has no lexer, no parser and no command-line program, so it does not read source files. A caller builds the scopes and the quadruples and decides where the listings go.

## Running the tests

```
pip install .[test]
pytest
```