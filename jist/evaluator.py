"""Arithmetic expression evaluation.

Expressions are folded strictly left to right with no operator
precedence: `1 + 2 * 3` is `(1 + 2) * 3`. A parenthesised group is folded
on its own, recursively, and contributes a single operand to the
enclosing fold, so groups may nest to any depth.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .ast import (
    Node, IntLit, FloatLit, StringLit, CharLit, BoolLit, VariableRef,
    Operator, AssignmentOperator, LeftParen, RightParen,
    VariableDecl, VariableTypeTag, OPERAND_NODES,
)
from .environment import ExecutionContext
from .errors import (
    DivisionByZero, JistSyntaxError, OperandTypeError, UnhandledNode, UnknownOperator,
)
from .types import Value, ValueType

ARITHMETIC_OPERATORS = ('+', '-', '*', '/')

# Leading nodes of a declaration that are skipped before folding
DECLARATION_NODES = (VariableDecl, VariableTypeTag, AssignmentOperator)


def operand_value(node: Node, ctx: ExecutionContext) -> Value:
    if isinstance(node, IntLit):
        return Value.int(node.value)
    if isinstance(node, FloatLit):
        return Value.float(node.value)
    if isinstance(node, StringLit):
        return Value.string(node.value)
    if isinstance(node, CharLit):
        return Value.char(node.value)
    if isinstance(node, BoolLit):
        return Value.bool(node.value)
    if isinstance(node, VariableRef):
        return ctx.variables.lookup(node.name).value
    raise UnhandledNode(f'not an operand: {node!r}')


def negate(value: Value) -> Value:
    if value.type is ValueType.INT:
        return Value.int(-value.data)
    if value.type is ValueType.FLOAT:
        return Value.float(-value.data)
    raise OperandTypeError(f'unary - expects a numeric operand, got {value.type}')


def _int_divide(a: int, b: int) -> int:
    # truncate toward zero
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def apply_operator(symbol: str, left: Value, right: Value) -> Value:
    """Apply one arithmetic operator to two values."""
    if symbol not in ARITHMETIC_OPERATORS:
        raise UnknownOperator(f"unrecognized operator '{symbol}'")
    if not (left.is_numeric and right.is_numeric):
        raise OperandTypeError(f'unsupported {symbol} for {left.type} and {right.type}')
    if symbol == '/' and right.data == 0:
        raise DivisionByZero('division by zero')
    a, b = left.data, right.data
    if left.type is ValueType.INT and right.type is ValueType.INT:
        if symbol == '+':
            return Value.int(a + b)
        if symbol == '-':
            return Value.int(a - b)
        if symbol == '*':
            return Value.int(a * b)
        return Value.int(_int_divide(a, b))
    # any float operand promotes the operation to float
    a, b = float(a), float(b)
    if symbol == '+':
        return Value.float(a + b)
    if symbol == '-':
        return Value.float(a - b)
    if symbol == '*':
        return Value.float(a * b)
    return Value.float(a / b)


def _combine(accumulator: Optional[Value], pending: Optional[str], operand: Value) -> Value:
    if accumulator is None:
        return operand
    if pending is None:
        raise UnhandledNode(f'expected an operator before {operand!r}')
    return apply_operator(pending, accumulator, operand)


def _fold(nodes: List[Node], index: int, ctx: ExecutionContext, nested: bool) -> Tuple[Value, int]:
    accumulator: Optional[Value] = None
    pending: Optional[str] = None
    negative = False
    while index < len(nodes):
        node = nodes[index]
        if isinstance(node, RightParen):
            if not nested:
                raise UnhandledNode("unmatched ')' in expression")
            if accumulator is None:
                raise JistSyntaxError('empty parentheses in expression')
            if pending is not None:
                raise JistSyntaxError(f"missing operand after '{pending}'")
            return accumulator, index + 1
        if isinstance(node, LeftParen) or isinstance(node, OPERAND_NODES):
            if isinstance(node, LeftParen):
                operand, index = _fold(nodes, index + 1, ctx, nested=True)
            else:
                operand = operand_value(node, ctx)
                index += 1
            if negative:
                operand = negate(operand)
            accumulator = _combine(accumulator, pending, operand)
            pending = None
            negative = False
            continue
        if isinstance(node, Operator):
            if accumulator is not None and pending is None:
                pending = node.symbol
            elif node.symbol == '-' and not negative:
                negative = True
            else:
                raise UnhandledNode(f"operator '{node.symbol}' has no left operand")
            index += 1
            continue
        raise UnhandledNode(f'unhandled node in expression: {node!r}')
    if nested:
        raise JistSyntaxError("missing ')' in expression")
    if accumulator is None:
        raise JistSyntaxError('empty expression')
    if pending is not None:
        raise JistSyntaxError(f"missing operand after '{pending}'")
    return accumulator, index


def evaluate_expression(nodes: List[Node], ctx: ExecutionContext) -> Value:
    """Reduce a node sequence to a single value.

    Leading declaration nodes (name, type tag and '=') are skipped, so the
    full node list of a declaration can be passed in directly.
    """
    start = 0
    while start < len(nodes) and isinstance(nodes[start], DECLARATION_NODES):
        start += 1
    value, _ = _fold(nodes, start, ctx, nested=False)
    if ctx.debug_level >= 3:
        ctx.debug(f"evaluate {len(nodes) - start} nodes -> {value!r}")
    return value
