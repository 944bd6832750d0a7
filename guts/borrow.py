"""Runtime bookkeeping for the single-writer-or-many-readers discipline.

Every guarded value is in one of three states. It is *free* by default. It is
*exclusive* while a ``guts_mut`` window is open, and *consumed* once
``into_guts`` has moved its guts out. The state lives in the value's
``_guts_borrow`` attribute, kept in its ``__dict__`` or in a slot the type
declares. It is written with ``object.__setattr__`` so frozen dataclasses can
be guarded types too. Values with nowhere to keep the state are not tracked.

With ``GUTS_BORROW_CHECKS`` off, the state is neither read nor written.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Final, TypeVar

from guts.config import get_settings
from guts.errors import BorrowError, ConsumedError
from guts.logging import get_logger

T = TypeVar("T")

FREE: Final = 0
EXCLUSIVE: Final = 1
CONSUMED: Final = 2

_SLOT: Final = "_guts_borrow"

_logger = get_logger(__name__)


def state_of(value: object) -> int:
    state: int = getattr(value, _SLOT, FREE)
    return state


def tracked(value: object) -> bool:
    """Whether ``value`` has room for its borrow state."""
    if hasattr(value, "__dict__"):
        return True
    for klass in type(value).__mro__:
        slots = vars(klass).get("__slots__", ())
        if _SLOT in ((slots,) if isinstance(slots, str) else slots):
            return True
    return False


def _set_state(value: object, state: int) -> None:
    if tracked(value):
        object.__setattr__(value, _SLOT, state)


def _check(value: object, operation: str) -> None:
    state = state_of(value)
    if state == CONSUMED:
        raise ConsumedError(type(value).__name__, operation)
    if state == EXCLUSIVE:
        raise BorrowError(
            type(value).__name__, operation, "a guts_mut window is still open"
        )


def ensure_shared(value: object, operation: str) -> None:
    """Raise unless ``value`` may be read right now."""
    if get_settings().borrow_checks:
        _check(value, operation)


@contextmanager
def exclusive(value: object, operation: str) -> Iterator[None]:
    """Hold the only borrow of ``value`` for the body of the ``with`` block."""
    if not get_settings().borrow_checks:
        yield
        return
    _check(value, operation)
    _set_state(value, EXCLUSIVE)
    try:
        yield
    finally:
        _set_state(value, FREE)


def consume(value: object, take: Callable[[], T]) -> T:
    """Move the guts out of ``value`` with ``take`` and mark it consumed.

    If ``take`` raises, ``value`` stays live.
    """
    checks = get_settings().borrow_checks
    if checks:
        _check(value, "into_guts")
    guts = take()
    if checks:
        _set_state(value, CONSUMED)
    _logger.debug(
        "guts extracted",
        extra={"guarded_type": type(value).__name__, "operation": "into_guts"},
    )
    return guts
