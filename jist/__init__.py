# jist language package
# This package provides the statement-execution core of the jist scripting language.
from .errors import JistError
from .interpreter import run_program, compile_module, parse_program, Interpreter

__all__ = [
    'run_program',
    'compile_module',
    'parse_program',
    'Interpreter',
    'JistError',
]
