from __future__ import annotations

import ast
import sys
from pathlib import Path

from tools.guards._files import comments, iter_python_files, parse, report

FORBIDDEN_IMPORTS = {"Any", "cast"}


def check_path(path: Path) -> list[str]:
    text, tree = parse(path)
    errors: list[str] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom) and node.module == "typing":
            errors.extend(
                f"{path}:{node.lineno} forbidden typing import '{alias.name}'"
                for alias in node.names
                if alias.name in FORBIDDEN_IMPORTS
            )
        elif (
            isinstance(node, ast.Attribute)
            and isinstance(node.value, ast.Name)
            and node.value.id == "typing"
            and node.attr in FORBIDDEN_IMPORTS
        ):
            errors.append(f"{path}:{node.lineno} forbidden use of typing.{node.attr}")
        elif (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Name)
            and node.func.id == "cast"
        ):
            errors.append(f"{path}:{node.lineno} forbidden use of cast()")
        elif isinstance(node, ast.Name) and node.id == "Any":
            errors.append(f"{path}:{node.lineno} forbidden type 'Any'")

    errors.extend(
        f"{path}:{tok.start[0]} forbidden 'type: ignore'"
        for tok in comments(text)
        if "type: ignore" in tok.string
    )
    return errors


def run(roots: list[str]) -> int:
    return report([err for p in iter_python_files(roots) for err in check_path(p)])


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
