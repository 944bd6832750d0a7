from __future__ import annotations

import ast
import sys
import tokenize
from collections.abc import Iterable, Sequence
from io import StringIO
from pathlib import Path


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if base.is_file() and base.suffix == ".py":
            yield base
        elif base.is_dir():
            yield from sorted(base.rglob("*.py"))


def parse(path: Path) -> tuple[str, ast.Module]:
    try:
        text = path.read_text(encoding="utf-8")
        tree = ast.parse(text, filename=str(path))
    except Exception as exc:  # pragma: no cover - guard must not crash silently
        sys.stderr.write(f"{path}: PARSE_ERROR {exc}\n")
        raise
    return text, tree


def comments(text: str) -> list[tokenize.TokenInfo]:
    reader = StringIO(text).readline
    return [
        tok for tok in tokenize.generate_tokens(reader) if tok.type == tokenize.COMMENT
    ]


def report(errors: Sequence[str]) -> int:
    if errors:
        sys.stderr.write("\n".join(errors) + "\n")
        return 1
    return 0
