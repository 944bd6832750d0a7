from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Generic

from guts import borrow
from guts.association import Guts
from guts.types import GutsT


class GutsSlot(Generic[GutsT]):
    """Mutable handle over a value's guts for the length of a ``guts_mut`` window.

    Mutate ``value`` in place or rebind it; either way the guarded value sees
    the result once the window closes.
    """

    __slots__ = ("value",)

    value: GutsT

    def __init__(self, value: GutsT) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"GutsSlot({self.value!r})"


class SharedAccess(Guts[GutsT]):
    """Read-only access to a value's guts."""

    __slots__ = ()

    def guts(self) -> GutsT:
        """Return the guts without consuming or mutating the value.

        Mutable guts are handed out as they are and must be treated as
        read-only; use ``guts_mut`` to change them.

        Raises:
            BorrowError: A ``guts_mut`` window on this value is open.
            ConsumedError: The value was consumed by ``into_guts``.
        """
        borrow.ensure_shared(self, "guts")
        return self._get_guts()

    @abstractmethod
    def _get_guts(self) -> GutsT:
        """Return the guts; aliasing has already been checked."""


class ExclusiveAccess(SharedAccess[GutsT]):
    """Mutable access to a value's guts.

    Invariants are not re-validated when the window closes. Only offer this
    capability on types whose invariants survive arbitrary edits to the guts,
    or which re-check them lazily.
    """

    __slots__ = ()

    @contextmanager
    def guts_mut(self) -> Iterator[GutsSlot[GutsT]]:
        """Open an exclusive window over the guts.

        Inside the window the value admits no other access: ``guts``, a nested
        ``guts_mut`` and ``into_guts`` all raise ``BorrowError``. The slot's
        value is stored back when the window closes, also on error.
        """
        with borrow.exclusive(self, "guts_mut"):
            slot = GutsSlot(self._get_guts())
            try:
                yield slot
            finally:
                self._set_guts(slot.value)

    @abstractmethod
    def _set_guts(self, guts: GutsT) -> None:
        """Replace the guts with ``guts``."""
