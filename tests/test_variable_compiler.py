import pytest

from jist.classifier import classify_all
from jist.compilers.variable import coerce_value, compile_assignment, compile_declaration
from jist.environment import ExecutionContext
from jist.errors import (
    DivisionByZero, IncompleteDeclaration, NameResolutionError, UnhandledNode, UnknownType,
)
from jist.lexer import tokenize
from jist.types import Value, ValueType


def nodes(text):
    return classify_all(tokenize(text))


def test_int_declaration_is_widened_to_float():
    ctx = ExecutionContext()
    variable = compile_declaration(nodes('let x: int = 2 + 3'), ctx)
    assert variable.name == 'x'
    assert variable.declared_type is ValueType.FLOAT
    assert variable.value == Value.float(5.0)
    assert list(ctx.variables) == [variable]
    assert ctx.warnings == []


def test_mismatched_value_is_replaced_by_default(capsys):
    ctx = ExecutionContext()
    variable = compile_declaration(nodes('let name: int = "text"'), ctx)
    assert variable.declared_type is ValueType.FLOAT
    assert variable.value == Value.float(0.0)
    assert len(ctx.warnings) == 1
    assert "Warning: Value type mismatch for 'name'" in capsys.readouterr().err


@pytest.mark.parametrize('text, expected', [
    ('let s: string = "hi"', Value.string('hi')),
    ("let c: char = 'z'", Value.char('z')),
    ('let b: bool = true', Value.bool(True)),
    ('let f: float = 1.5', Value.float(1.5)),
    ('let b: bool = 1', Value.bool(False)),
    ('let s: string = 3', Value.string('')),
    ("let c: char = 1.5", Value.char('\0')),
])
def test_declared_types(text, expected):
    assert compile_declaration(nodes(text), ExecutionContext()).value == expected


def test_redeclaration_appends():
    ctx = ExecutionContext()
    compile_declaration(nodes('let x: int = 1'), ctx)
    assert len(ctx.variables) == 1
    compile_declaration(nodes('let x: int = 2'), ctx)
    assert len(ctx.variables) == 2
    assert [v.value for v in ctx.variables] == [Value.float(1.0), Value.float(2.0)]
    assert ctx.variables.lookup('x').value == Value.float(2.0)


def test_unknown_type():
    with pytest.raises(UnknownType):
        compile_declaration(nodes('let x: decimal = 1'), ExecutionContext())


@pytest.mark.parametrize('text', ['let x: int', 'let x = 1', ': int = 1', 'let x: int ='])
def test_incomplete_declaration(text):
    with pytest.raises(IncompleteDeclaration):
        compile_declaration(nodes(text), ExecutionContext())


def test_unexpected_node_before_assignment():
    with pytest.raises(UnhandledNode):
        compile_declaration(nodes('let x: int 5 = 1'), ExecutionContext())


def test_failed_declaration_leaves_table_untouched():
    ctx = ExecutionContext()
    with pytest.raises(DivisionByZero):
        compile_declaration(nodes('let x: int = 4 / 0'), ctx)
    assert len(ctx.variables) == 0


def test_assignment_updates_latest_entry_in_place():
    ctx = ExecutionContext()
    compile_declaration(nodes('let x: int = 1'), ctx)
    compile_declaration(nodes('let x: int = 10'), ctx)
    compile_assignment(nodes('x = x + 1'), ctx)
    assert len(ctx.variables) == 2
    assert [v.value for v in ctx.variables] == [Value.float(1.0), Value.float(11.0)]


def test_assignment_coerces_against_declared_type():
    ctx = ExecutionContext()
    compile_declaration(nodes('let s: string = "a"'), ctx)
    compile_assignment(nodes('s = 3'), ctx)
    assert ctx.variables.lookup('s').value == Value.string('')
    assert len(ctx.warnings) == 1


def test_assignment_to_unknown_name():
    with pytest.raises(NameResolutionError):
        compile_assignment(nodes('y = 1'), ExecutionContext())


def test_null_declared_type_always_warns():
    ctx = ExecutionContext()
    assert coerce_value('n', ValueType.NULL, Value.int(1), ctx) == Value.null()
    assert len(ctx.warnings) == 1
