from __future__ import annotations

from abc import ABC
from typing import ClassVar, Generic

from guts.types import GutsT

_BORROW_ATTR = "_guts_borrow"


class Guts(ABC, Generic[GutsT]):
    """Associates a guarded type with the type of its guts.

    The generic parameter is the association: ``class Meters(Guts[float])``
    declares that ``Meters`` is guarded and its guts are ``float``. Every other
    capability is a subclass of ``Guts`` and inherits the same parameter, so a
    type that mixes several of them names its guts type once per base, and
    all of those names must agree.

    ``guts_type`` repeats the association at runtime for integrations that
    need a concrete type (see ``guts.validation``). It is declared by hand
    and left as ``None`` when nothing needs it.

    ``guts.borrow`` keeps its per-value state in the ``_guts_borrow``
    attribute of the instance ``__dict__``. Guarded types without a
    ``__dict__`` add ``"_guts_borrow"`` to their own ``__slots__`` to get
    borrow checking; without it their accesses are not tracked. The state is
    never copied or pickled: copies start out free.
    """

    __slots__ = ()

    guts_type: ClassVar[type | None] = None

    def __getstate__(self) -> object:
        state = super().__getstate__()
        if isinstance(state, dict):
            return _without_borrow(state)
        if isinstance(state, tuple) and len(state) == 2:
            attrs, slots = state
            return (
                _without_borrow(attrs) if isinstance(attrs, dict) else attrs,
                _without_borrow(slots) if isinstance(slots, dict) else slots,
            )
        return state


def _without_borrow(attrs: dict[str, object]) -> dict[str, object]:
    return {name: value for name, value in attrs.items() if name != _BORROW_ATTR}
