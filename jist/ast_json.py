"""JSON serialization/deserialization for classified jist statements.

This module converts between statements (with their nodes) and plain
Python dict/list structures suitable for JSON encoding, so a classified
program can be written out with `--emit-nodes` and executed later with
`--nodes`.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, List, get_type_hints

from . import ast as nodes
from .ast import CharLit, IntLit, Node, Statement, VariableTypeTag
from .types import INT_MAX, INT_MIN, parse_type_name

NODE_TYPES: Dict[str, type] = {
    cls.__name__: cls
    for cls in vars(nodes).values()
    if isinstance(cls, type) and issubclass(cls, Node) and cls is not Node
}


def node_to_obj(node: Node) -> Dict[str, Any]:
    if isinstance(node, VariableTypeTag):
        # the parsed type is derived from raw_type when loading
        return {"type": "VariableTypeTag", "raw_type": node.raw_type}
    obj: Dict[str, Any] = {"type": type(node).__name__}
    for f in fields(node):
        obj[f.name] = getattr(node, f.name)
    return obj


def _load_field(node_type: str, name: str, hint: type, value: Any) -> Any:
    # JSON has no separate float type for whole numbers
    if hint is float and type(value) is int:
        value = float(value)
    if type(value) is not hint:
        raise ValueError(f"{node_type}.{name} must be {hint.__name__}, got {value!r}")
    return value


def node_from_obj(obj: Dict[str, Any]) -> Node:
    if not isinstance(obj, dict):
        raise TypeError("Invalid node object")
    t = obj.get("type")
    if t == "VariableTypeTag":
        raw_type = _load_field(t, "raw_type", str, obj["raw_type"])
        return VariableTypeTag(raw_type, parse_type_name(raw_type))
    cls = NODE_TYPES.get(t)
    if cls is None:
        raise ValueError(f"Unknown node type: {t}")
    hints = get_type_hints(cls)
    node = cls(**{f.name: _load_field(t, f.name, hints[f.name], obj[f.name]) for f in fields(cls)})
    if isinstance(node, IntLit) and not INT_MIN <= node.value <= INT_MAX:
        raise ValueError(f"IntLit value {node.value} does not fit in 32 bits")
    if isinstance(node, CharLit) and len(node.value) != 1:
        raise ValueError(f"CharLit must hold one character, got {node.value!r}")
    return node


def statement_to_obj(statement: Statement) -> Dict[str, Any]:
    return {
        "type": "Statement",
        "nodes": [node_to_obj(n) for n in statement.nodes],
        "body": [statement_to_obj(s) for s in statement.body],
        "orelse": [statement_to_obj(s) for s in statement.orelse],
    }


def statement_from_obj(obj: Dict[str, Any]) -> Statement:
    if not isinstance(obj, dict) or obj.get("type") != "Statement":
        raise TypeError("Invalid statement object")
    return Statement(
        nodes=[node_from_obj(n) for n in obj["nodes"]],
        body=[statement_from_obj(s) for s in obj.get("body", [])],
        orelse=[statement_from_obj(s) for s in obj.get("orelse", [])],
    )


def program_to_obj(statements: List[Statement]) -> Dict[str, Any]:
    return {"type": "Program", "body": [statement_to_obj(s) for s in statements]}


def program_from_obj(obj: Dict[str, Any]) -> List[Statement]:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise TypeError("Invalid program object")
    return [statement_from_obj(s) for s in obj["body"]]
