import pytest

from jist.ast import (
    IntLit, FloatLit, StringLit, CharLit, BoolLit, Operator, VariableDecl,
    VariableTypeTag, VariableRef, While, NoneNode,
)
from jist.classifier import CLASSIFIERS, classify, classify_all
from jist.errors import MalformedLiteral, UnrecognizedToken
from jist.lexer import tokenize
from jist.tokens import Token, TokenKind
from jist.types import ValueType


def test_every_token_kind_has_a_node():
    for kind in TokenKind:
        assert kind in CLASSIFIERS


def test_literals_are_parsed():
    assert classify(Token(TokenKind.INT, '42')) == IntLit(42)
    assert classify(Token(TokenKind.FLOAT, '2.5')) == FloatLit(2.5)
    assert classify(Token(TokenKind.STRING, 'hi')) == StringLit('hi')
    assert classify(Token(TokenKind.CHAR, 'c')) == CharLit('c')
    assert classify(Token(TokenKind.BOOL, 'false')) == BoolLit(False)
    assert classify(Token(TokenKind.NONE, '')) == NoneNode()


def test_type_tags_are_resolved_once():
    assert classify(Token(TokenKind.VARIABLE_TYPE, 'int')) == VariableTypeTag('int', ValueType.INT)
    assert classify(Token(TokenKind.VARIABLE_TYPE, 'string')).type is ValueType.STR
    assert classify(Token(TokenKind.VARIABLE_TYPE, 'decimal')).type is None


def test_classify_statement():
    assert classify_all(tokenize('let x: float = y * 2')) == [
        VariableDecl('x'),
        VariableTypeTag('float', ValueType.FLOAT),
        classify(Token(TokenKind.ASSIGNMENT_OPERATOR, '=')),
        VariableRef('y'),
        Operator('*'),
        IntLit(2),
    ]
    assert classify_all(tokenize('while (x > 1)')) == [While('x > 1')]


@pytest.mark.parametrize('token', [
    Token(TokenKind.INT, 'abc'),
    Token(TokenKind.INT, '3000000000'),
    Token(TokenKind.FLOAT, '1.2.3'),
    Token(TokenKind.BOOL, 'yes'),
    Token(TokenKind.CHAR, 'ab'),
])
def test_malformed_literals(token):
    with pytest.raises(MalformedLiteral):
        classify(token)


def test_unknown_kind_is_an_error():
    with pytest.raises(UnrecognizedToken):
        classify(Token('Collection', 'xs'))
