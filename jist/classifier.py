"""Token to node classification.

`classify` maps every token kind to exactly one node type. Literal text is
parsed here, and declared type names are resolved once into a `ValueType`
so that later stages never compare type strings.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from .ast import (
    Node, IntLit, FloatLit, StringLit, CharLit, BoolLit,
    Operator, AssignmentOperator, LeftParen, RightParen, LeftBrace, RightBrace,
    LeftBracket, RightBracket, ArgumentSeparator, SemiColon,
    VariableDecl, VariableTypeTag, FunctionDecl, FunctionCall, VariableRef,
    If, While, For, Else, NoneNode,
)
from .errors import MalformedLiteral, UnrecognizedToken
from .tokens import Token, TokenKind
from .types import INT_MAX, INT_MIN, parse_type_name


def _int_node(token: Token) -> Node:
    try:
        value = int(token.text)
    except ValueError:
        raise MalformedLiteral(f'cannot parse Int from {token.text!r}')
    if not INT_MIN <= value <= INT_MAX:
        raise MalformedLiteral(f'Int literal {token.text} does not fit in 32 bits')
    return IntLit(value)


def _float_node(token: Token) -> Node:
    try:
        return FloatLit(float(token.text))
    except ValueError:
        raise MalformedLiteral(f'cannot parse Float from {token.text!r}')


def _bool_node(token: Token) -> Node:
    if token.text == 'true':
        return BoolLit(True)
    if token.text == 'false':
        return BoolLit(False)
    raise MalformedLiteral(f'cannot parse Bool from {token.text!r}')


def _char_node(token: Token) -> Node:
    if len(token.text) != 1:
        raise MalformedLiteral(f'Char literal must hold one character, got {token.text!r}')
    return CharLit(token.text)


CLASSIFIERS: Dict[TokenKind, Callable[[Token], Node]] = {
    TokenKind.INT: _int_node,
    TokenKind.FLOAT: _float_node,
    TokenKind.STRING: lambda t: StringLit(t.text),
    TokenKind.CHAR: _char_node,
    TokenKind.BOOL: _bool_node,
    TokenKind.OPERATOR: lambda t: Operator(t.text),
    TokenKind.ASSIGNMENT_OPERATOR: lambda t: AssignmentOperator(t.text),
    TokenKind.LEFT_PAREN: lambda t: LeftParen(),
    TokenKind.RIGHT_PAREN: lambda t: RightParen(),
    TokenKind.LEFT_BRACE: lambda t: LeftBrace(),
    TokenKind.RIGHT_BRACE: lambda t: RightBrace(),
    TokenKind.LEFT_BRACKET: lambda t: LeftBracket(),
    TokenKind.RIGHT_BRACKET: lambda t: RightBracket(),
    TokenKind.ARGUMENT_SEPARATOR: lambda t: ArgumentSeparator(),
    TokenKind.SEMICOLON: lambda t: SemiColon(),
    TokenKind.VARIABLE: lambda t: VariableDecl(t.text),
    TokenKind.VARIABLE_TYPE: lambda t: VariableTypeTag(t.text, parse_type_name(t.text)),
    TokenKind.FUNCTION: lambda t: FunctionDecl(t.text),
    TokenKind.FUNCTION_CALL: lambda t: FunctionCall(t.text),
    TokenKind.VARIABLE_CALL: lambda t: VariableRef(t.text),
    TokenKind.IF: lambda t: If(t.text),
    TokenKind.WHILE: lambda t: While(t.text),
    TokenKind.FOR: lambda t: For(t.text),
    TokenKind.ELSE: lambda t: Else(),
    TokenKind.NONE: lambda t: NoneNode(),
}


def classify(token: Token) -> Node:
    """Classify a single token into its node."""
    handler = CLASSIFIERS.get(token.kind)
    if handler is None:
        raise UnrecognizedToken(f'no node for token kind {token.kind}')
    return handler(token)


def classify_all(tokens: Iterable[Token]) -> List[Node]:
    return [classify(token) for token in tokens]
