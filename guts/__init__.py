"""Traits-style protocol for constructing and destructuring guarded types.

A guarded type hides its internal representation (its *guts*) behind
invariants. The capability classes exported here let a guarded type opt into
each conversion separately. The safe ones are read-only access, exclusive
access, extraction, and infallible or fallible construction. The one
unchecked escape hatch is ``from_guts_unchecked``.
"""

from __future__ import annotations

from guts.access import ExclusiveAccess, GutsSlot, SharedAccess
from guts.association import Guts
from guts.construction import FromGuts, FromGutsUnchecked, TryFromGuts
from guts.errors import (
    BorrowError,
    ConsumedError,
    GutsError,
    Infallible,
    InvariantViolation,
)
from guts.extraction import IntoGuts

__all__ = [
    "BorrowError",
    "ConsumedError",
    "ExclusiveAccess",
    "FromGuts",
    "FromGutsUnchecked",
    "Guts",
    "GutsError",
    "GutsSlot",
    "Infallible",
    "IntoGuts",
    "InvariantViolation",
    "SharedAccess",
    "TryFromGuts",
]
