"""Statement routing.

The leading node of a statement decides which compiler handles it. A
statement no compiler accepts makes routing return False, which stops the
enclosing block, loop body or program.
"""

from __future__ import annotations

import sys
from typing import List

from .ast import (
    Statement, VariableDecl, VariableRef, AssignmentOperator, If, While, For,
    FunctionDecl, FunctionCall, NoneNode,
)
from .compilers.control import compile_for_loop, compile_if, compile_while_loop
from .compilers.function import call_function, define_function
from .compilers.variable import compile_assignment, compile_declaration
from .environment import ExecutionContext


def route_statement(statement: Statement, ctx: ExecutionContext) -> bool:
    head = statement.head
    if ctx.debug_level >= 1:
        ctx.debug(f"route {type(head).__name__} ({len(statement.nodes)} nodes)")
    if isinstance(head, VariableDecl):
        compile_declaration(statement.nodes, ctx)
        return True
    if isinstance(head, VariableRef) and len(statement.nodes) > 1 \
            and isinstance(statement.nodes[1], AssignmentOperator):
        compile_assignment(statement.nodes, ctx)
        return True
    if isinstance(head, If):
        return compile_if(statement, ctx)
    if isinstance(head, While):
        return compile_while_loop(statement, ctx)
    if isinstance(head, For):
        return compile_for_loop(statement, ctx)
    if isinstance(head, FunctionDecl):
        return define_function(statement, ctx)
    if isinstance(head, FunctionCall):
        return call_function(statement, ctx)
    if isinstance(head, NoneNode):
        return True
    print(f"Syntax Error: no statement can start with {head!r}", file=sys.stderr)
    ctx.debug(f"routing failed for {head!r}")
    return False


def route_block(statements: List[Statement], ctx: ExecutionContext) -> bool:
    """Route statements in order, stopping at the first failure."""
    for statement in statements:
        if not route_statement(statement, ctx):
            return False
    return True
