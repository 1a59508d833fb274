"""Lexer for the jist language.

Lexing happens in two stages:

1. **Terminal recognition**: a Lark lexer configured with the terminal
   definitions below splits the text into numbers, strings, identifiers,
   operators and punctuation. Whitespace and `//` comments are dropped.

2. **Folding**: keyword sequences are folded into the token kinds the
   classifier understands. `let NAME` becomes a single `VARIABLE` token,
   `: TYPE` a `VARIABLE_TYPE` token, and a guarded construct such as
   `while (count > 0)` becomes one `WHILE` token carrying the raw
   condition text, which the control-flow compiler re-tokenizes every
   time the guard is evaluated.

`tokenize` keeps no state between calls, so guards can be lexed again
independently of the statement they came from.
"""

from __future__ import annotations

import ast as py_ast
from typing import List, Tuple

from lark import Lark
from lark import Token as LarkToken
from lark.exceptions import UnexpectedCharacters

from .errors import LexerError
from .tokens import Token, TokenKind


JIST_TOKEN_GRAMMAR = r"""
    start: _lexeme*

    _lexeme: FLOAT | INT | STRING | CHAR | NAME
           | COMPARE | OPERATOR | EQUALS | COLON | COMMA | SEMICOLON
           | LPAR | RPAR | LBRACE | RBRACE | LSQB | RSQB

    FLOAT.3: /\d+\.\d+/
    INT.2: /\d+/
    STRING: /"(\\.|[^"\\\n])*"/
    CHAR: /'(\\.|[^'\\\n])'/
    NAME: /[A-Za-z_][A-Za-z0-9_]*/

    COMPARE.3: "==" | "!=" | "<=" | ">=" | "&&" | "||"
    OPERATOR: "+" | "-" | "*" | "/" | "%" | "<" | ">" | "!"
    EQUALS: "="
    COLON: ":"
    COMMA: ","
    SEMICOLON: ";"
    LPAR: "("
    RPAR: ")"
    LBRACE: "{"
    RBRACE: "}"
    LSQB: "["
    RSQB: "]"

    COMMENT.4: /\/\/[^\n]*/

    %import common.WS
    %ignore WS
    %ignore COMMENT
"""


JIST_LEXER = Lark(
    JIST_TOKEN_GRAMMAR,
    parser='lalr',
    lexer='basic',
)


# Terminals that map one-to-one onto a token kind.
SIMPLE_KINDS = {
    'FLOAT': TokenKind.FLOAT,
    'INT': TokenKind.INT,
    'COMPARE': TokenKind.OPERATOR,
    'OPERATOR': TokenKind.OPERATOR,
    'EQUALS': TokenKind.ASSIGNMENT_OPERATOR,
    'COMMA': TokenKind.ARGUMENT_SEPARATOR,
    'SEMICOLON': TokenKind.SEMICOLON,
    'LPAR': TokenKind.LEFT_PAREN,
    'RPAR': TokenKind.RIGHT_PAREN,
    'LBRACE': TokenKind.LEFT_BRACE,
    'RBRACE': TokenKind.RIGHT_BRACE,
    'LSQB': TokenKind.LEFT_BRACKET,
    'RSQB': TokenKind.RIGHT_BRACKET,
}

GUARD_KEYWORDS = {
    'if': TokenKind.IF,
    'while': TokenKind.WHILE,
    'for': TokenKind.FOR,
}

BOOL_WORDS = ('true', 'false')


def _make(kind: TokenKind, text: str, origin: LarkToken) -> Token:
    return Token(kind, text, origin.line, origin.column)


def _where(tok: LarkToken) -> str:
    return f"{tok.line}:{tok.column}"


def _read_guard(text: str, raw: List[LarkToken], i: int) -> Tuple[str, int]:
    """Return the text between the parentheses following raw[i].

    The second element of the result is the index just past the closing
    parenthesis.
    """
    keyword = raw[i]
    if i + 1 >= len(raw) or raw[i + 1].type != 'LPAR':
        raise LexerError(f"expected '(' after '{keyword.value}' at {_where(keyword)}")
    opening = raw[i + 1]
    depth = 0
    j = i + 1
    while j < len(raw):
        tok = raw[j]
        if tok.type == 'LPAR':
            depth += 1
        elif tok.type == 'RPAR':
            depth -= 1
            if depth == 0:
                condition = text[opening.end_pos:tok.start_pos].strip()
                if not condition:
                    raise LexerError(f"empty condition after '{keyword.value}' at {_where(keyword)}")
                return condition, j + 1
        j += 1
    raise LexerError(f"unterminated condition after '{keyword.value}' at {_where(keyword)}")


def _unescape(tok: LarkToken) -> str:
    # The terminal patterns only admit well-formed Python string literals
    try:
        return py_ast.literal_eval(tok.value)
    except (SyntaxError, ValueError):
        raise LexerError(f"invalid escape in literal {tok.value} at {_where(tok)}")


def tokenize(text: str) -> List[Token]:
    """Convert jist source text into a list of tokens."""
    try:
        raw = list(JIST_LEXER.lex(text))
    except UnexpectedCharacters as e:
        raise LexerError(f"unexpected character {e.char!r} at {e.line}:{e.column}")

    tokens: List[Token] = []
    i = 0
    while i < len(raw):
        tok = raw[i]
        nxt = raw[i + 1] if i + 1 < len(raw) else None
        if tok.type == 'NAME':
            word = tok.value
            if word in ('let', 'fn'):
                if nxt is None or nxt.type != 'NAME':
                    raise LexerError(f"expected a name after '{word}' at {_where(tok)}")
                kind = TokenKind.VARIABLE if word == 'let' else TokenKind.FUNCTION
                tokens.append(_make(kind, nxt.value, tok))
                i += 2
                continue
            if word in GUARD_KEYWORDS:
                condition, i = _read_guard(text, raw, i)
                tokens.append(_make(GUARD_KEYWORDS[word], condition, tok))
                continue
            if word == 'else':
                tokens.append(_make(TokenKind.ELSE, word, tok))
            elif word in BOOL_WORDS:
                tokens.append(_make(TokenKind.BOOL, word, tok))
            elif nxt is not None and nxt.type == 'LPAR':
                tokens.append(_make(TokenKind.FUNCTION_CALL, word, tok))
            else:
                tokens.append(_make(TokenKind.VARIABLE_CALL, word, tok))
            i += 1
            continue
        if tok.type == 'COLON':
            if nxt is None or nxt.type != 'NAME':
                raise LexerError(f"expected a type name after ':' at {_where(tok)}")
            tokens.append(_make(TokenKind.VARIABLE_TYPE, nxt.value, tok))
            i += 2
            continue
        if tok.type == 'STRING':
            tokens.append(_make(TokenKind.STRING, _unescape(tok), tok))
        elif tok.type == 'CHAR':
            tokens.append(_make(TokenKind.CHAR, _unescape(tok), tok))
        else:
            tokens.append(_make(SIMPLE_KINDS[tok.type], tok.value, tok))
        i += 1
    return tokens
