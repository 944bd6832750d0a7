from __future__ import annotations

from pathlib import Path

import pytest

from tools.guard import run_guards
from tools.guards import (
    exceptions_guard,
    logging_guard,
    typing_guard,
    unchecked_guard,
)

REPO = Path(__file__).resolve().parents[1]


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "sample.py"
    path.write_text(text, encoding="utf-8")
    return path


def test_unchecked_guard_flags_unjustified_call(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path, "x = Counter.from_guts_unchecked(-1)\n")

    rc = unchecked_guard.run([str(tmp_path)])
    captured = capsys.readouterr()

    assert rc == 1
    assert "sample.py:1 from_guts_unchecked without" in captured.err


@pytest.mark.parametrize(
    "source",
    [
        "x = Counter.from_guts_unchecked(3)  # SAFETY: 3 is non-negative\n",
        "# SAFETY: 3 is non-negative\nx = Counter.from_guts_unchecked(3)\n",
        "# SAFETY: literals below are\n# all non-negative\nx = from_guts_unchecked(3)\n",
    ],
)
def test_unchecked_guard_accepts_safety_comment(tmp_path: Path, source: str) -> None:
    _write(tmp_path, source)
    assert unchecked_guard.run([str(tmp_path)]) == 0


def test_unchecked_guard_ignores_comment_separated_by_code(tmp_path: Path) -> None:
    _write(tmp_path, "# SAFETY: stale\ny = 1\nx = Counter.from_guts_unchecked(3)\n")
    assert unchecked_guard.run([str(tmp_path)]) == 1


def test_unchecked_guard_ignores_definitions(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "class C:\n"
        "    @classmethod\n"
        "    def from_guts_unchecked(cls, guts):\n"
        "        return cls()\n",
    )
    assert unchecked_guard.run([str(tmp_path)]) == 0


def test_typing_guard_flags_any_cast_and_ignores(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(
        tmp_path,
        "from typing import Any, cast\n"
        "x: Any = cast(int, 1)  # type: ignore\n",
    )

    rc = typing_guard.run([str(tmp_path)])
    err = capsys.readouterr().err

    assert rc == 1
    assert "forbidden typing import 'Any'" in err
    assert "forbidden use of cast()" in err
    assert "forbidden 'type: ignore'" in err


def test_exceptions_guard_flags_swallowed_exceptions(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(
        tmp_path,
        "try:\n    pass\nexcept:\n    pass\n",
    )

    rc = exceptions_guard.run([str(tmp_path)])
    err = capsys.readouterr().err

    assert rc == 1
    assert "bare 'except' is forbidden" in err
    assert "except without re-raise is forbidden" in err


def test_exceptions_guard_allows_reraise(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "try:\n    pass\nexcept ValueError as exc:\n    raise RuntimeError() from exc\n",
    )
    assert exceptions_guard.run([str(tmp_path)]) == 0


def test_logging_guard_flags_print(tmp_path: Path) -> None:
    _write(tmp_path, "print('hello')\n")
    assert logging_guard.run([str(tmp_path)]) == 1


def test_guards_accept_single_file_roots_and_skip_missing(tmp_path: Path) -> None:
    path = _write(tmp_path, "x = 1\n")
    assert run_guards([str(path), str(tmp_path / "missing")]) == 0


def test_repository_passes_all_guards() -> None:
    roots = [str(REPO / name) for name in ("guts", "tests", "tools")]
    assert run_guards(roots) == 0
