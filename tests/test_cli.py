import json

import pytest

from jist.__main__ import main

COUNTDOWN = """
let count: int = 2;
while (count > 0) {
    count = count - 1;
}
"""


def write(tmp_path, name, source):
    path = tmp_path / name
    path.write_text(source, encoding='utf-8')
    return str(path)


def test_run_prints_variable_stack(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main([write(tmp_path, 'count.jist', COUNTDOWN)])
    out = capsys.readouterr().out
    assert 'Variable stack:' in out
    assert 'Variable Name: count\nVariable Type: float\nVariable Value: 0.0' in out
    assert not (tmp_path / 'debug.txt').exists()


def test_no_dump(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(['--no-dump', write(tmp_path, 'count.jist', COUNTDOWN)])
    assert capsys.readouterr().out == ''


def test_wrong_extension(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([write(tmp_path, 'count.txt', COUNTDOWN)])
    assert exc.value.code == 1
    assert 'extension' in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / 'absent.jist')])
    assert exc.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_runtime_error_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main([write(tmp_path, 'div.jist', 'let x: int = 1 / 0;')])
    assert exc.value.code == 1
    assert 'Runtime error' in capsys.readouterr().err


def test_failed_statement_halts(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main([write(tmp_path, 'halt.jist', 'let x: int = 1; 2;')])
    assert exc.value.code == 1
    assert 'Execution halted' in capsys.readouterr().err


def test_emit_and_run_nodes(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    program = write(tmp_path, 'count.jist', COUNTDOWN)
    main(['--emit-nodes', program])
    emitted = capsys.readouterr().out.strip()
    assert emitted == program + '.nodes.json'
    with open(emitted, encoding='utf-8') as f:
        assert json.load(f)['type'] == 'Program'
    main(['--nodes', emitted])
    assert 'Variable Value: 0.0' in capsys.readouterr().out


def test_verbose_writes_debug_trace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main(['-vvv', '--no-dump', write(tmp_path, 'count.jist', COUNTDOWN)])
    trace = (tmp_path / 'debug.txt').read_text(encoding='utf-8')
    assert 'guard' in trace
    assert 'route' in trace


def test_iteration_cap_flag(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    forever = 'let x: int = 1; while (x > 0) { x = x + 1; }'
    with pytest.raises(SystemExit):
        main(['--max-iterations', '3', write(tmp_path, 'loop.jist', forever)])
    assert 'Runtime error' in capsys.readouterr().err


def test_runaway_recursion_reports_runtime_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main([write(tmp_path, 'rec.jist', 'fn f() { f(); } f();')])
    assert exc.value.code == 1
    assert 'Runtime error: CallDepthExceeded' in capsys.readouterr().err


def test_nodes_file_with_bad_payload(tmp_path, capsys):
    nodes = tmp_path / 'bad.nodes.json'
    statement = {"type": "Statement", "nodes": [
        {"type": "VariableDecl", "name": "x"},
        {"type": "VariableTypeTag", "raw_type": "int"},
        {"type": "AssignmentOperator", "symbol": "="},
        {"type": "IntLit", "value": "abc"},
    ]}
    nodes.write_text(json.dumps({"type": "Program", "body": [statement]}), encoding='utf-8')
    with pytest.raises(SystemExit) as exc:
        main(['--nodes', str(nodes)])
    assert exc.value.code == 1
    assert 'invalid nodes file' in capsys.readouterr().err
