from pathlib import Path

from jist.interpreter import parse_program, Interpreter
from jist.types import Value

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_countdown(capsys):
    with open(EXAMPLES / 'program_3.jist', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    assert interp.run(statements)
    out_lines = capsys.readouterr().out.strip().split('\n')
    assert out_lines == ['3.0', '2.0', '1.0', 'runs: 3.0']
    assert interp.variables.lookup('count').value == Value.float(0.0)
    assert not interp.context.in_loop
