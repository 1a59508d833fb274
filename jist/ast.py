"""Node definitions for the jist language.

Each token is classified into exactly one node. Nodes only carry what
could be determined from the token itself, without looking at its
neighbours. Statements group the nodes of one `;`-terminated line, and
control headers own the statements of their braced body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .types import ValueType


@dataclass
class Node:
    """Base class for all nodes."""
    pass


# Literals

@dataclass
class IntLit(Node):
    value: int


@dataclass
class FloatLit(Node):
    value: float


@dataclass
class StringLit(Node):
    value: str


@dataclass
class CharLit(Node):
    value: str


@dataclass
class BoolLit(Node):
    value: bool


# Structure

@dataclass
class Operator(Node):
    symbol: str


@dataclass
class AssignmentOperator(Node):
    symbol: str


@dataclass
class LeftParen(Node):
    pass


@dataclass
class RightParen(Node):
    pass


@dataclass
class LeftBrace(Node):
    pass


@dataclass
class RightBrace(Node):
    pass


@dataclass
class LeftBracket(Node):
    pass


@dataclass
class RightBracket(Node):
    pass


@dataclass
class ArgumentSeparator(Node):
    pass


@dataclass
class SemiColon(Node):
    pass


# Declarations and references

@dataclass
class VariableDecl(Node):
    name: str


@dataclass
class VariableTypeTag(Node):
    raw_type: str
    type: Optional[ValueType] = None  # None when raw_type is not a known type


@dataclass
class FunctionDecl(Node):
    name: str


@dataclass
class FunctionCall(Node):
    name: str


@dataclass
class VariableRef(Node):
    name: str


# Control

@dataclass
class If(Node):
    condition: str


@dataclass
class While(Node):
    condition: str


@dataclass
class For(Node):
    condition: str


@dataclass
class Else(Node):
    pass


@dataclass
class NoneNode(Node):
    pass


# Values that can start or continue an arithmetic expression
OPERAND_NODES = (IntLit, FloatLit, StringLit, CharLit, BoolLit, VariableRef)
CONTROL_NODES = (If, While, For)


@dataclass
class Statement:
    """One statement: its nodes plus, for headers, the body they own."""
    nodes: List[Node]
    body: List['Statement'] = field(default_factory=list)
    orelse: List['Statement'] = field(default_factory=list)

    @property
    def head(self) -> Optional[Node]:
        return self.nodes[0] if self.nodes else None
