from __future__ import annotations

from typing import List, Optional

from ..ast import (
    Node, VariableDecl, VariableTypeTag, AssignmentOperator, VariableRef, LeftParen,
    Operator, OPERAND_NODES,
)
from ..environment import ExecutionContext, Variable
from ..errors import IncompleteDeclaration, JistSyntaxError, UnhandledNode, UnknownType
from ..evaluator import evaluate_expression
from ..types import Value, ValueType, default_value, widen_type


def coerce_value(name: str, declared: ValueType, value: Value, ctx: ExecutionContext) -> Value:
    """Fit a computed value to a variable's declared type.

    Never fails: an Int stored into a Float slot is widened, any other
    mismatch is reported as a warning and replaced by the declared type's
    default value.
    """
    if declared is ValueType.NULL:
        ctx.warn(f"Value type mismatch for '{name}'. Null type cannot have a value.")
        return Value.null()
    if value.type is declared:
        return value
    if declared is ValueType.FLOAT and value.type is ValueType.INT:
        return Value.float(value.data)
    ctx.warn(f"Value type mismatch for '{name}'. Setting default {declared} value.")
    return default_value(declared)


def _starts_expression(node: Node) -> bool:
    if isinstance(node, (LeftParen,) + OPERAND_NODES):
        return True
    return isinstance(node, Operator) and node.symbol == '-'


def compile_declaration(nodes: List[Node], ctx: ExecutionContext) -> Variable:
    """Compile `let NAME: TYPE = expr` and append the variable to the table."""
    name: Optional[str] = None
    declared: Optional[ValueType] = None
    has_assignment = False
    value: Optional[Value] = None

    for index, node in enumerate(nodes):
        if isinstance(node, VariableDecl):
            name = node.name
        elif isinstance(node, VariableTypeTag):
            if node.type is None:
                raise UnknownType(f"unrecognized type '{node.raw_type}'")
            declared = node.type
        elif isinstance(node, AssignmentOperator):
            has_assignment = True
        elif has_assignment and _starts_expression(node):
            value = evaluate_expression(nodes[index:], ctx)
            break
        else:
            raise UnhandledNode(f'unhandled node while parsing variable: {node!r}')

    if name is None or declared is None or not has_assignment:
        raise IncompleteDeclaration('missing variable components')
    if value is None:
        raise IncompleteDeclaration(f"no value assigned to '{name}'")

    declared = widen_type(declared)
    variable = Variable(name, declared, coerce_value(name, declared, value, ctx))
    ctx.variables.append(variable)
    if ctx.debug_level >= 2:
        ctx.debug(f"declare {variable.name}: {variable.declared_type} = {variable.value!r}")
    return variable


def compile_assignment(nodes: List[Node], ctx: ExecutionContext) -> Variable:
    """Compile `NAME = expr`, updating the latest variable with that name."""
    if len(nodes) < 3 or not isinstance(nodes[0], VariableRef) or not isinstance(nodes[1], AssignmentOperator):
        raise JistSyntaxError('malformed assignment')
    variable = ctx.variables.lookup(nodes[0].name)
    value = evaluate_expression(nodes[2:], ctx)
    variable.value = coerce_value(variable.name, variable.declared_type, value, ctx)
    if ctx.debug_level >= 2:
        ctx.debug(f"assign {variable.name} = {variable.value!r}")
    return variable
