from __future__ import annotations

from abc import abstractmethod

from guts import borrow
from guts.association import Guts
from guts.types import GutsT


class IntoGuts(Guts[GutsT]):
    """Safely destructuring values into their guts."""

    __slots__ = ()

    def into_guts(self) -> GutsT:
        """Destructure the value into its guts, ending its lifetime.

        Ownership of the guts passes to the caller. Any later operation on the
        value raises ``ConsumedError``.
        """
        return borrow.consume(self, self._take_guts)

    @abstractmethod
    def _take_guts(self) -> GutsT:
        """Give up the guts; the value is not used again afterwards."""
