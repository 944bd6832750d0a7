from __future__ import annotations

from dataclasses import dataclass
from typing import Self

import pytest

from guts import (
    FromGuts,
    FromGutsUnchecked,
    Infallible,
    IntoGuts,
    InvariantViolation,
    SharedAccess,
    TryFromGuts,
)


class NegativeCount(InvariantViolation):
    pass


class Counter(IntoGuts[int], TryFromGuts[int], FromGutsUnchecked[int]):
    """Counter whose count is never negative."""

    __slots__ = ("_count",)

    Error = NegativeCount

    def __init__(self) -> None:
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @classmethod
    def try_from_guts(cls, guts: int) -> Self:
        if guts < 0:
            raise NegativeCount(f"count must be non-negative, got {guts}", guts=guts)
        # SAFETY: checked non-negative above.
        return cls.from_guts_unchecked(guts)

    @classmethod
    def from_guts_unchecked(cls, guts: int) -> Self:
        counter = cls()
        counter._count = guts
        return counter

    def _take_guts(self) -> int:
        return self._count


@dataclass(frozen=True)
class Meters(FromGuts[float], IntoGuts[float], SharedAccess[float]):
    value: float

    @classmethod
    def from_guts(cls, guts: float) -> Self:
        return cls(guts)

    def _get_guts(self) -> float:
        return self.value

    def _take_guts(self) -> float:
        return self.value


def test_try_from_guts_accepts_valid_guts_and_extracts_them() -> None:
    counter = Counter.try_from_guts(5)
    assert counter.count == 5
    assert counter.into_guts() == 5


def test_try_from_guts_rejects_negative_with_its_error_type() -> None:
    with pytest.raises(NegativeCount, match="non-negative") as info:
        Counter.try_from_guts(-1)
    assert info.value.guts == -1
    assert isinstance(info.value, InvariantViolation)


def test_from_guts_unchecked_skips_the_invariant() -> None:
    # SAFETY: deliberately invalid; the value is only inspected, never used.
    counter = Counter.from_guts_unchecked(-1)
    assert counter.count == -1


def test_round_trip_through_owned_extraction_and_from_guts() -> None:
    original = Meters(3.5)
    rebuilt = Meters.from_guts(Meters(3.5).into_guts())
    assert rebuilt == original


@pytest.mark.parametrize("guts", [0.0, -2.25, 1e9])
def test_derived_unchecked_matches_from_guts(guts: float) -> None:
    # SAFETY: Meters accepts every float.
    assert Meters.from_guts_unchecked(guts) == Meters.from_guts(guts)


def test_derived_try_from_guts_never_fails() -> None:
    assert Meters.Error is Infallible
    assert Meters.try_from_guts(-7.0) == Meters(-7.0)


def test_except_clause_on_derived_error_never_matches() -> None:
    with pytest.raises(ZeroDivisionError):
        with pytest.raises(Meters.Error):
            raise ZeroDivisionError


def test_from_guts_subclass_cannot_override_derived_constructors() -> None:
    with pytest.raises(TypeError, match="try_from_guts"):

        class _Override(FromGuts[int]):
            @classmethod
            def from_guts(cls, guts: int) -> Self:
                return cls()

            @classmethod
            def try_from_guts(cls, guts: int) -> Self:
                return cls()

    with pytest.raises(TypeError, match="from_guts_unchecked"):

        class _OverrideUnchecked(FromGuts[int]):
            @classmethod
            def from_guts(cls, guts: int) -> Self:
                return cls()

            @classmethod
            def from_guts_unchecked(cls, guts: int) -> Self:
                return cls()


def test_from_guts_subclass_cannot_declare_an_error() -> None:
    with pytest.raises(TypeError, match="Infallible"):

        class _Fallible(FromGuts[int]):
            Error = InvariantViolation

            @classmethod
            def from_guts(cls, guts: int) -> Self:
                return cls()


def test_try_from_guts_error_must_be_an_exception_class() -> None:
    namespace = {"Error": str, "try_from_guts": classmethod(lambda cls, guts: cls())}
    with pytest.raises(TypeError, match="exception class"):
        type("_BadError", (TryFromGuts,), namespace)


def test_capabilities_without_an_implementation_are_abstract() -> None:
    partial = type("_Partial", (IntoGuts,), {})
    with pytest.raises(TypeError, match="abstract"):
        partial()
