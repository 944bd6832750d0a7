"""Require a ``# SAFETY:`` justification at every unchecked construction.

A call to ``from_guts_unchecked`` passes when a ``# SAFETY:`` comment sits on
the same line or in the run of comment-only lines directly above it.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

from tools.guards._files import comments, iter_python_files, parse, report

UNCHECKED = "from_guts_unchecked"
MARKER = "SAFETY:"


def _is_unchecked_call(node: ast.AST) -> bool:
    if not isinstance(node, ast.Call):
        return False
    func = node.func
    if isinstance(func, ast.Attribute):
        return func.attr == UNCHECKED
    return isinstance(func, ast.Name) and func.id == UNCHECKED


def _justified(line: int, marked: set[int], comment_only: set[int]) -> bool:
    if line in marked:
        return True
    above = line - 1
    while above in comment_only:
        if above in marked:
            return True
        above -= 1
    return False


def check_path(path: Path) -> list[str]:
    text, tree = parse(path)
    marked: set[int] = set()
    comment_only: set[int] = set()
    for tok in comments(text):
        row = tok.start[0]
        if MARKER in tok.string:
            marked.add(row)
        if not tok.line[: tok.start[1]].strip():
            comment_only.add(row)
    return [
        f"{path}:{node.lineno} {UNCHECKED} without a '# {MARKER}' comment"
        for node in ast.walk(tree)
        if _is_unchecked_call(node)
        and not _justified(node.lineno, marked, comment_only)
    ]


def run(roots: list[str]) -> int:
    return report([err for p in iter_python_files(roots) for err in check_path(p)])


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
