"""CLI entry point for the jist interpreter.

Usage:
    python -m jist [-v|-vv|-vvv] [--max-iterations N] [--no-dump] <program_file>
    python -m jist [-v...] --emit-nodes <program_file>
    python -m jist [-v...] --nodes <nodes_json_file>

Options:
  -v                Increase debug verbosity (can be repeated)
  --max-iterations  Stop with an error when a while loop runs more often
  --no-dump         Do not print the variable table at the end of the run
  --emit-nodes      Classify the given .jist file and emit its statements as JSON
  --nodes           Execute statements previously emitted as JSON

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. After a successful run the variable table
is printed, one field per line.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List

from .ast import Statement
from .ast_json import program_from_obj, program_to_obj
from .errors import JistError
from .interpreter import Interpreter, check_file_extension, parse_program


def _read_program(path: str) -> str:
    program_file = Path(path)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    try:
        check_file_extension(path)
    except JistError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def _execute(statements: List[Statement], args: argparse.Namespace) -> None:
    interpreter = Interpreter(debug_level=args.v, max_iterations=args.max_iterations)
    try:
        ok = interpreter.run(statements)
    except JistError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    if not ok:
        print("Execution halted", file=sys.stderr)
        sys.exit(1)
    if not args.no_dump:
        print("\nVariable stack:")
        interpreter.dump_variables()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='jist', description="jist language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--max-iterations', type=int, default=None, metavar='N',
                        help='fail when a while loop iterates more than N times')
    parser.add_argument('--no-dump', action='store_true', help='do not print the variable table')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-nodes', metavar='JIST_FILE', help='emit classified statements as JSON for the given .jist file')
    group.add_argument('--nodes', metavar='NODES_JSON_FILE', help='execute statements from a JSON file')
    parser.add_argument('program', nargs='?', help='jist program file (.jist) to execute')
    args = parser.parse_args(argv)

    # Emit nodes mode
    if args.emit_nodes:
        source = _read_program(args.emit_nodes)
        try:
            statements = parse_program(source)
        except JistError as e:
            print(f"Runtime error: {e}", file=sys.stderr)
            sys.exit(1)
        out_path = Path(args.emit_nodes + '.nodes.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(program_to_obj(statements), out, ensure_ascii=False, indent=2)
        print(str(out_path))
        return

    # Execute from nodes JSON
    if args.nodes:
        nodes_path = Path(args.nodes)
        if not nodes_path.exists():
            print(f"Error: file {nodes_path} not found", file=sys.stderr)
            sys.exit(1)
        with open(nodes_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        try:
            statements = program_from_obj(data)
        except (TypeError, ValueError, KeyError) as e:
            print(f"Error: invalid nodes file: {e}", file=sys.stderr)
            sys.exit(1)
        _execute(statements, args)
        return

    # Default: execute source file
    if not args.program:
        parser.error('missing program file; or use --emit-nodes/--nodes')
    source = _read_program(args.program)
    try:
        statements = parse_program(source)
    except JistError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)
    _execute(statements, args)


if __name__ == '__main__':
    main()
