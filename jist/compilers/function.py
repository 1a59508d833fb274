"""Function declarations and calls.

Functions take no parameters; a declaration stores its braced body and a
call routes that body statement by statement. Builtins are looked up
before user functions.
"""

from __future__ import annotations

from typing import List

from ..ast import (
    Node, FunctionDecl, FunctionCall, LeftParen, RightParen, ArgumentSeparator, Statement,
)
from ..builtin_function import BuiltinFunction
from ..environment import MAX_CALL_DEPTH, ExecutionContext
from ..errors import CallDepthExceeded, JistSyntaxError, NameResolutionError
from ..evaluator import evaluate_expression
from ..types import Value, to_string


def load_builtins(ctx: ExecutionContext):
    def std_print(args: List[Value], ctx: ExecutionContext):
        print(' '.join(to_string(a) for a in args))

    def std_dump(args: List[Value], ctx: ExecutionContext):
        ctx.variables.dump()

    ctx.builtins['print'] = BuiltinFunction('print', None, std_print)
    ctx.builtins['dump'] = BuiltinFunction('dump', 0, std_dump)


def _split_arguments(nodes: List[Node]) -> List[List[Node]]:
    """Split the nodes between a call's parentheses into argument lists."""
    args: List[List[Node]] = []
    current: List[Node] = []
    depth = 0
    for node in nodes:
        if isinstance(node, LeftParen):
            depth += 1
        elif isinstance(node, RightParen):
            depth -= 1
        elif isinstance(node, ArgumentSeparator) and depth == 0:
            if not current:
                raise JistSyntaxError('empty argument in call')
            args.append(current)
            current = []
            continue
        current.append(node)
    if current:
        args.append(current)
    elif args:
        raise JistSyntaxError('trailing argument separator in call')
    return args


def _call_arguments(nodes: List[Node]) -> List[List[Node]]:
    """Return the argument node lists of `NAME ( ... )`."""
    if len(nodes) < 3 or not isinstance(nodes[1], LeftParen) or not isinstance(nodes[-1], RightParen):
        raise JistSyntaxError(f"malformed call to '{nodes[0].name}'")
    depth = 0
    for i, node in enumerate(nodes[1:], start=1):
        if isinstance(node, LeftParen):
            depth += 1
        elif isinstance(node, RightParen):
            depth -= 1
            if depth == 0 and i != len(nodes) - 1:
                raise JistSyntaxError(f"unexpected node after call to '{nodes[0].name}': {nodes[i + 1]!r}")
    if depth != 0:
        raise JistSyntaxError(f"unbalanced parentheses in call to '{nodes[0].name}'")
    return _split_arguments(nodes[2:-1])


def define_function(statement: Statement, ctx: ExecutionContext) -> bool:
    head = statement.head
    if not isinstance(head, FunctionDecl):
        raise JistSyntaxError(f'expected a function declaration, got {head!r}')
    rest = statement.nodes[1:]
    if rest and not (len(rest) == 2 and isinstance(rest[0], LeftParen) and isinstance(rest[1], RightParen)):
        raise JistSyntaxError(f"function '{head.name}' cannot take parameters")
    ctx.functions[head.name] = statement.body
    if ctx.debug_level >= 2:
        ctx.debug(f"define function {head.name}")
    return True


def call_function(statement: Statement, ctx: ExecutionContext) -> bool:
    from ..router import route_block

    head = statement.head
    if not isinstance(head, FunctionCall):
        raise JistSyntaxError(f'expected a function call, got {head!r}')
    arg_nodes = _call_arguments(statement.nodes)

    builtin = ctx.builtins.get(head.name)
    if builtin is not None:
        builtin([evaluate_expression(arg, ctx) for arg in arg_nodes], ctx)
        return True

    if head.name not in ctx.functions:
        raise NameResolutionError(f'undefined function {head.name}')
    if arg_nodes:
        raise JistSyntaxError(f"function '{head.name}' takes no arguments")
    if ctx.debug_level >= 2:
        ctx.debug(f"call function {head.name}")
    if ctx.call_depth >= MAX_CALL_DEPTH:
        raise CallDepthExceeded(f"calls to '{head.name}' nested deeper than {MAX_CALL_DEPTH}")
    ctx.call_depth += 1
    try:
        return route_block(ctx.functions[head.name], ctx)
    finally:
        ctx.call_depth -= 1
