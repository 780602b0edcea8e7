"""Data types, scoped symbol tables and quadruple lists for a small compiler."""

__version__ = "0.1.0"
__all__ = ["datatypes", "quadruples", "symbol_table"]