"""Boolean evaluation of guard conditions.

A condition is split on `||`, then `&&`, then an optional leading `!`,
and finally on a single comparison whose two sides are arithmetic
expressions. A part wrapped entirely in parentheses is treated as a
nested condition.
"""

from __future__ import annotations

from typing import List

from .ast import Node, LeftParen, RightParen, Operator
from .environment import ExecutionContext
from .errors import JistSyntaxError, OperandTypeError
from .evaluator import evaluate_expression
from .types import Value, ValueType

COMPARISON_OPERATORS = ('==', '!=', '<', '>', '<=', '>=')


def _split(nodes: List[Node], symbol: str) -> List[List[Node]]:
    """Split nodes on a top-level operator, ignoring parenthesised groups."""
    parts: List[List[Node]] = [[]]
    depth = 0
    for node in nodes:
        if isinstance(node, LeftParen):
            depth += 1
        elif isinstance(node, RightParen):
            depth -= 1
        elif depth == 0 and isinstance(node, Operator) and node.symbol == symbol:
            parts.append([])
            continue
        parts[-1].append(node)
    return parts


def _wrapped(nodes: List[Node]) -> bool:
    """Return True if the first '(' closes at the last node."""
    if len(nodes) < 2 or not isinstance(nodes[0], LeftParen) or not isinstance(nodes[-1], RightParen):
        return False
    depth = 0
    for i, node in enumerate(nodes):
        if isinstance(node, LeftParen):
            depth += 1
        elif isinstance(node, RightParen):
            depth -= 1
            if depth == 0:
                return i == len(nodes) - 1
    return False


def _has_logic(nodes: List[Node]) -> bool:
    return any(isinstance(n, Operator) and n.symbol in ('&&', '||', '!') + COMPARISON_OPERATORS
               for n in nodes)


def compare(symbol: str, left: Value, right: Value) -> bool:
    if symbol == '==':
        return left == right
    if symbol == '!=':
        return left != right
    if not (left.is_numeric and right.is_numeric):
        raise OperandTypeError(f'comparison {symbol} not supported for {left.type} and {right.type}')
    a, b = left.data, right.data
    if symbol == '<':
        return a < b
    if symbol == '>':
        return a > b
    if symbol == '<=':
        return a <= b
    return a >= b


def truthy(value: Value) -> bool:
    if value.type is ValueType.BOOL:
        return value.data
    if value.is_numeric:
        return value.data != 0
    raise OperandTypeError(f'a condition cannot be a {value.type} value')


def _evaluate_comparison(nodes: List[Node], ctx: ExecutionContext) -> bool:
    if not nodes:
        raise JistSyntaxError('empty condition')
    if isinstance(nodes[0], Operator) and nodes[0].symbol == '!':
        return not _evaluate_comparison(nodes[1:], ctx)
    if _wrapped(nodes) and _has_logic(nodes[1:-1]):
        return evaluate_condition(nodes[1:-1], ctx)
    depth = 0
    for i, node in enumerate(nodes):
        if isinstance(node, LeftParen):
            depth += 1
        elif isinstance(node, RightParen):
            depth -= 1
        elif depth == 0 and isinstance(node, Operator) and node.symbol in COMPARISON_OPERATORS:
            left = evaluate_expression(nodes[:i], ctx)
            right = evaluate_expression(nodes[i + 1:], ctx)
            return compare(node.symbol, left, right)
    return truthy(evaluate_expression(nodes, ctx))


def evaluate_condition(nodes: List[Node], ctx: ExecutionContext) -> bool:
    """Evaluate a classified guard condition to a single boolean."""
    for alternative in _split(nodes, '||'):
        if all(_evaluate_comparison(part, ctx) for part in _split(alternative, '&&')):
            return True
    return False
