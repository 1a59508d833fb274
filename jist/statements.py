"""Grouping of classified nodes into statements.

Simple statements end at `;`. A control header (`if`, `while`, `for`) or a
function declaration followed by `{` owns every statement up to the
matching `}`. A header ended by `;` instead owns every statement that
follows it in the enclosing block.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .ast import (
    Node, Statement, SemiColon, LeftBrace, RightBrace, Else, If, FunctionDecl, CONTROL_NODES,
)
from .errors import JistSyntaxError

HEADER_NODES = CONTROL_NODES + (FunctionDecl,)


class StatementBuilder:
    def __init__(self, nodes: List[Node]):
        self.nodes = nodes
        self.pos = 0

    def peek(self) -> Optional[Node]:
        if self.pos < len(self.nodes):
            return self.nodes[self.pos]
        return None

    def build(self) -> List[Statement]:
        return self.parse_block(top=True)

    def parse_block(self, top: bool) -> List[Statement]:
        statements: List[Statement] = []
        while True:
            node = self.peek()
            if node is None:
                if not top:
                    raise JistSyntaxError("unterminated block, missing '}'")
                return statements
            if isinstance(node, RightBrace):
                if top:
                    raise JistSyntaxError("unmatched '}'")
                self.pos += 1
                return statements
            if isinstance(node, Else):
                raise JistSyntaxError("'else' without a matching 'if'")
            statement, positional = self.parse_statement()
            statements.append(statement)
            if positional:
                statement.body = self.parse_block(top)
                return statements

    def parse_statement(self) -> Tuple[Statement, bool]:
        """Parse one statement.

        The flag in the result is True for a header ended by `;`, whose body
        is the rest of the enclosing block.
        """
        head = self.peek()
        is_header = isinstance(head, HEADER_NODES)
        nodes: List[Node] = []
        while True:
            node = self.peek()
            if node is None:
                raise JistSyntaxError(f"missing ';' after {nodes[-1]!r}")
            if isinstance(node, SemiColon):
                self.pos += 1
                if not nodes:
                    raise JistSyntaxError('expression must be more than semicolon')
                return Statement(nodes), is_header
            if is_header and isinstance(node, LeftBrace):
                self.pos += 1
                statement = Statement(nodes, body=self.parse_block(top=False))
                if isinstance(head, If):
                    self.parse_else(statement)
                return statement, False
            if isinstance(node, (LeftBrace, RightBrace, Else)):
                raise JistSyntaxError(f"unexpected {type(node).__name__} inside a statement, missing ';'?")
            nodes.append(node)
            self.pos += 1

    def parse_else(self, statement: Statement):
        if not isinstance(self.peek(), Else):
            return
        self.pos += 1
        node = self.peek()
        if isinstance(node, If):
            inner, positional = self.parse_statement()
            if positional:
                raise JistSyntaxError("'else if' needs a braced body")
            statement.orelse = [inner]
        elif isinstance(node, LeftBrace):
            self.pos += 1
            statement.orelse = self.parse_block(top=False)
        else:
            raise JistSyntaxError("expected '{' after 'else'")


def build_statements(nodes: List[Node]) -> List[Statement]:
    return StatementBuilder(nodes).build()
