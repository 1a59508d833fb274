from pathlib import Path

import pytest

from jist.errors import DivisionByZero
from jist.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_7_division_by_zero_is_fatal(capsys):
    with open(EXAMPLES / 'program_7.jist', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    with pytest.raises(DivisionByZero):
        interp.run(statements)
    assert capsys.readouterr().out == ''
    # only the statement before the failing one left a variable behind
    assert [v.name for v in interp.variables] == ['ok']
