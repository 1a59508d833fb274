"""Conditionals and loops.

Guards are kept as raw text on their header node. Every evaluation
tokenizes and classifies that text again, so a `while` guard always sees
the variable table as the loop body left it.
"""

from __future__ import annotations

from ..ast import If, While, For, Statement
from ..classifier import classify_all
from ..conditional import evaluate_condition
from ..environment import ExecutionContext
from ..errors import LoopLimitExceeded, UnhandledNode
from ..lexer import tokenize


def evaluate_guard(condition: str, ctx: ExecutionContext) -> bool:
    """Tokenize, classify and evaluate a guard once."""
    nodes = classify_all(tokenize(condition))
    result = evaluate_condition(nodes, ctx)
    if ctx.debug_level >= 3:
        ctx.debug(f"guard ({condition}) -> {result}")
    return result


def _check_header(statement: Statement, kind: type):
    if not isinstance(statement.head, kind):
        raise UnhandledNode(f'expected a {kind.__name__} header, got {statement.head!r}')
    if len(statement.nodes) > 1:
        raise UnhandledNode(f'unexpected node after {kind.__name__} header: {statement.nodes[1]!r}')


def compile_if(statement: Statement, ctx: ExecutionContext) -> bool:
    from ..router import route_block

    _check_header(statement, If)
    if evaluate_guard(statement.head.condition, ctx):
        return route_block(statement.body, ctx)
    return route_block(statement.orelse, ctx)


def compile_for_loop(statement: Statement, ctx: ExecutionContext) -> bool:
    """Evaluate a `for` guard exactly once.

    `for` does not iterate: its body runs at most once, when the guard
    holds.
    """
    from ..router import route_block

    _check_header(statement, For)
    if evaluate_guard(statement.head.condition, ctx):
        return route_block(statement.body, ctx)
    return True


def compile_while_loop(statement: Statement, ctx: ExecutionContext) -> bool:
    """Run a `while` body for as long as its guard holds.

    Returns False as soon as a body statement fails; the remaining body
    statements of that iteration are not executed.
    """
    from ..router import route_block

    _check_header(statement, While)
    condition = statement.head.condition
    previous = ctx.in_loop
    iterations = 0
    try:
        while evaluate_guard(condition, ctx):
            ctx.in_loop = True
            iterations += 1
            if ctx.max_iterations is not None and iterations > ctx.max_iterations:
                raise LoopLimitExceeded(f'while ({condition}) exceeded {ctx.max_iterations} iterations')
            if ctx.debug_level >= 3:
                ctx.debug(f"while ({condition}) iteration {iterations}")
            if not route_block(statement.body, ctx):
                ctx.debug(f"while ({condition}) body failed, leaving loop")
                return False
    finally:
        ctx.in_loop = previous
    return True
