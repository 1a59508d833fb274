"""Runtime value model for jist.

This module defines the tagged scalar values the interpreter works with,
the closed set of declarable types, and the helpers used when a value is
stored into a typed variable: default values, the int-to-float widening
rule and the text form used by `print` and the variable dump.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .errors import IntegerOverflow

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


class ValueType(Enum):
    """The fixed set of scalar types a jist value can carry."""
    INT = 'int'
    FLOAT = 'float'
    STR = 'string'
    BOOL = 'bool'
    CHAR = 'char'
    NULL = 'null'

    def __str__(self) -> str:
        return self.value


# Type names accepted after ':' in a declaration. `null` is a runtime tag
# only and cannot be declared from source.
DECLARABLE_TYPES = {
    'int': ValueType.INT,
    'float': ValueType.FLOAT,
    'string': ValueType.STR,
    'bool': ValueType.BOOL,
    'char': ValueType.CHAR,
}


def parse_type_name(text: str) -> Optional[ValueType]:
    """Return the declared type for a type tag, or None if it is unknown."""
    return DECLARABLE_TYPES.get(text)


@dataclass(frozen=True)
class Value:
    """A tagged runtime value.

    Two values are equal only when both the tag and the payload match, so
    `Int(1)` never equals `Float(1.0)` or `Bool(True)`.
    """
    type: ValueType
    data: Any = None

    def __repr__(self) -> str:
        if self.type is ValueType.NULL:
            return 'Null'
        return f"{self.type.name.capitalize()}({self.data!r})"

    # Convenience constructors
    @staticmethod
    def int(data: int) -> 'Value':
        if not INT_MIN <= data <= INT_MAX:
            raise IntegerOverflow(f'integer {data} does not fit in 32 bits')
        return Value(ValueType.INT, data)

    @staticmethod
    def float(data: float) -> 'Value':
        return Value(ValueType.FLOAT, float(data))

    @staticmethod
    def string(data: str) -> 'Value':
        return Value(ValueType.STR, data)

    @staticmethod
    def bool(data: bool) -> 'Value':
        return Value(ValueType.BOOL, bool(data))

    @staticmethod
    def char(data: str) -> 'Value':
        return Value(ValueType.CHAR, data)

    @staticmethod
    def null() -> 'Value':
        return Value(ValueType.NULL)

    @property
    def is_numeric(self) -> bool:
        return self.type in (ValueType.INT, ValueType.FLOAT)


def default_value(value_type: ValueType) -> Value:
    """Return the zero value substituted when a stored value mismatches."""
    if value_type is ValueType.INT:
        return Value.int(0)
    if value_type is ValueType.FLOAT:
        return Value.float(0.0)
    if value_type is ValueType.STR:
        return Value.string('')
    if value_type is ValueType.BOOL:
        return Value.bool(False)
    if value_type is ValueType.CHAR:
        return Value.char('\0')
    return Value.null()


def widen_type(value_type: ValueType) -> ValueType:
    """Apply the interpreter's default numeric type: declared ints are floats."""
    if value_type is ValueType.INT:
        return ValueType.FLOAT
    return value_type


def to_string(value: Value) -> str:
    """Convert a value to the text shown by `print` and the variable dump."""
    if value.type is ValueType.FLOAT:
        return repr(value.data)
    if value.type is ValueType.BOOL:
        return 'true' if value.data else 'false'
    if value.type is ValueType.NULL:
        return 'null'
    return str(value.data)
