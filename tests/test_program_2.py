from pathlib import Path

from jist.interpreter import parse_program, Interpreter

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_left_to_right_fold(capsys):
    with open(EXAMPLES / 'program_2.jist', 'r', encoding='utf-8') as f:
        source = f.read()
    statements = parse_program(source)
    interp = Interpreter()
    interp.run(statements)
    out = capsys.readouterr().out.strip()
    # 1 + 2 * 3 is (1 + 2) * 3; declared ints are stored as floats
    assert out == '9.0 20.0 10.0'
