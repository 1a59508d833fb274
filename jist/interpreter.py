"""Interpreter for the jist language.

This module ties the pipeline together: the lexer turns source text into
tokens, the classifier turns tokens into nodes, the statement builder
groups nodes into statements, and the router hands every statement to
the compiler for its leading node. All compilers share one
`ExecutionContext`, owned by the `Interpreter`.
"""

from __future__ import annotations

import pathlib
from typing import List, Optional, TextIO

from .ast import Statement
from .classifier import classify_all
from .compilers.function import load_builtins
from .environment import ExecutionContext
from .errors import JistError
from .lexer import tokenize
from .router import route_statement
from .statements import build_statements

SOURCE_EXTENSION = '.jist'


def parse_program(source: str) -> List[Statement]:
    """Tokenize, classify and group jist source into statements."""
    return build_statements(classify_all(tokenize(source)))


class Interpreter:
    """Runs statements against a single execution context."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt',
                 max_iterations: Optional[int] = None):
        self.debug_level = debug_level
        self.completed: Optional[bool] = None
        self.debug_fp = open(debug_file, 'w') if debug_level > 0 else None
        self.context = ExecutionContext(debug_level=debug_level, debug_fp=self.debug_fp,
                                        max_iterations=max_iterations)
        self.load_standard_module()

    @property
    def variables(self):
        return self.context.variables

    def debug(self, msg: str):
        self.context.debug(msg)

    def load_standard_module(self):
        load_builtins(self.context)

    # Public API
    def run(self, statements: List[Statement]) -> bool:
        """Route every statement in order.

        Returns False as soon as one statement fails to route; the result is
        also kept on `completed`. Fatal errors propagate as `JistError`. The
        debug trace covers the first run only.
        """
        try:
            for index, statement in enumerate(statements):
                if not route_statement(statement, self.context):
                    self.debug(f"statement {index + 1} failed, halting")
                    self.completed = False
                    return False
            self.completed = True
            return True
        finally:
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None
                self.context.debug_fp = None
                self.debug_level = self.context.debug_level = 0

    def run_source(self, source: str) -> bool:
        return self.run(parse_program(source))

    def dump_variables(self, out: Optional[TextIO] = None):
        self.context.variables.dump(out)


def check_file_extension(file_path: str):
    if pathlib.Path(file_path).suffix != SOURCE_EXTENSION:
        raise JistError(f'File path not valid: Does not have extension {SOURCE_EXTENSION}')


def run_program(source: str, debug_level: int = 0, max_iterations: Optional[int] = None) -> Interpreter:
    """Convenience function to compile and run a jist program from source string.

    `completed` on the returned interpreter is False when execution halted.
    """
    interpreter = Interpreter(debug_level=debug_level, max_iterations=max_iterations)
    interpreter.run(parse_program(source))
    return interpreter


def compile_module(file_path: str, debug_level: int = 0, max_iterations: Optional[int] = None) -> Interpreter:
    """Compile and execute a jist file, returning the interpreter instance."""
    check_file_extension(file_path)
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    interpreter = Interpreter(debug_level=debug_level, max_iterations=max_iterations)
    interpreter.run(parse_program(source))
    return interpreter
