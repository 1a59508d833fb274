from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, TextIO

from .errors import NameResolutionError
from .types import Value, ValueType, to_string

MAX_CALL_DEPTH = 100


@dataclass
class Variable:
    name: str
    declared_type: ValueType
    value: Value


class VariableTable:
    """Ordered store of declared variables.

    Declarations only ever append, so declaring a name twice leaves two
    entries. Lookups scan from the end and return the latest entry.
    """
    def __init__(self):
        self.entries: List[Variable] = []

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self.entries)

    def append(self, variable: Variable) -> Variable:
        self.entries.append(variable)
        return variable

    def find(self, name: str) -> Optional[Variable]:
        for variable in reversed(self.entries):
            if variable.name == name:
                return variable
        return None

    def lookup(self, name: str) -> Variable:
        variable = self.find(name)
        if variable is None:
            raise NameResolutionError(f'undefined variable {name}')
        return variable

    def dump(self, out: Optional[TextIO] = None):
        out = out or sys.stdout
        for variable in self.entries:
            out.write(f"Variable Name: {variable.name}\n")
            out.write(f"Variable Type: {variable.declared_type}\n")
            out.write(f"Variable Value: {to_string(variable.value)}\n")


class ExecutionContext:
    """State shared by every compiler while one program runs.

    Holds the variable table, declared functions, the flag set while a
    `while` body executes, collected coercion warnings and the debug trace.
    """
    def __init__(self, debug_level: int = 0, debug_fp: Optional[TextIO] = None,
                 max_iterations: Optional[int] = None):
        self.variables = VariableTable()
        self.functions: Dict[str, Any] = {}
        self.builtins: Dict[str, Any] = {}
        self.in_loop = False
        self.call_depth = 0
        self.max_iterations = max_iterations
        self.warnings: List[str] = []
        self.debug_level = debug_level
        self.debug_fp = debug_fp

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def warn(self, msg: str):
        self.warnings.append(msg)
        print(f"Warning: {msg}", file=sys.stderr)
        if self.debug_level > 0:
            self.debug(f"warning: {msg}")
