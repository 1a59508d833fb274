from pathlib import Path

from jist.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_9_scalar_types_and_compound_guard(capsys):
    with open(EXAMPLES / 'program_9.jist', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.run(statements)
    out = capsys.readouterr().out.strip()
    assert out == 'j jist 5.0 true'
