from __future__ import annotations

import ast
import sys
from pathlib import Path

from tools.guards._files import iter_python_files, parse, report


def check_path(path: Path) -> list[str]:
    _, tree = parse(path)
    return [
        f"{path}:{n.lineno} use logger; 'print' is forbidden"
        for n in ast.walk(tree)
        if isinstance(n, ast.Call)
        and isinstance(n.func, ast.Name)
        and n.func.id == "print"
    ]


def run(roots: list[str]) -> int:
    return report([err for p in iter_python_files(roots) for err in check_path(p)])


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
