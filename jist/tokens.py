"""Token kinds produced by the jist lexer.

More kinds can be added as needed; every kind must also be given a node in
`jist.classifier`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    INT = 'Int'                                 # 42
    FLOAT = 'Float'                             # 1.102
    STRING = 'String'                           # "text"
    CHAR = 'Char'                               # 'c'
    BOOL = 'Bool'                               # true / false
    OPERATOR = 'Operator'                       # + - * / and comparisons
    ASSIGNMENT_OPERATOR = 'AssignmentOperator'  # =
    LEFT_PAREN = 'LeftParenthesis'
    RIGHT_PAREN = 'RightParenthesis'
    LEFT_BRACE = 'LeftCurly'
    RIGHT_BRACE = 'RightCurly'
    LEFT_BRACKET = 'LeftBracket'
    RIGHT_BRACKET = 'RightBracket'
    ARGUMENT_SEPARATOR = 'ArgumentSeparator'    # ,
    SEMICOLON = 'SemiColon'
    VARIABLE = 'Variable'                       # let NAME
    VARIABLE_TYPE = 'VarTypeAssignment'         # : TYPE
    FUNCTION = 'Function'                       # fn NAME
    FUNCTION_CALL = 'FunctionCall'              # NAME(
    VARIABLE_CALL = 'VariableCall'              # NAME
    IF = 'If'                                   # if (condition)
    WHILE = 'While'                             # while (condition)
    FOR = 'For'                                 # for (condition)
    ELSE = 'Else'
    NONE = 'None'                               # no token could be produced

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    line: int = 1
    column: int = 1
