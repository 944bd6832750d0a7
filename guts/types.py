from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, Self, TypeVar, runtime_checkable

GutsT = TypeVar("GutsT")
GutsT_co = TypeVar("GutsT_co", covariant=True)
GutsT_contra = TypeVar("GutsT_contra", contravariant=True)


class SlotProtocol(Protocol[GutsT]):
    """Mutable handle over guts, as yielded by ``guts_mut``."""

    value: GutsT


@runtime_checkable
class SupportsGuts(Protocol[GutsT_co]):
    """Structural interface for shared access to guts."""

    def guts(self) -> GutsT_co: ...


@runtime_checkable
class SupportsGutsMut(Protocol[GutsT]):
    """Structural interface for exclusive access to guts."""

    def guts(self) -> GutsT: ...

    def guts_mut(self) -> AbstractContextManager[SlotProtocol[GutsT]]: ...


@runtime_checkable
class SupportsIntoGuts(Protocol[GutsT_co]):
    """Structural interface for owned extraction of guts."""

    def into_guts(self) -> GutsT_co: ...


@runtime_checkable
class SupportsFromGuts(Protocol[GutsT_contra]):
    """Structural interface for infallible construction from guts."""

    @classmethod
    def from_guts(cls, guts: GutsT_contra) -> Self: ...


@runtime_checkable
class SupportsTryFromGuts(Protocol[GutsT_contra]):
    """Structural interface for fallible construction from guts."""

    @classmethod
    def try_from_guts(cls, guts: GutsT_contra) -> Self: ...


@runtime_checkable
class SupportsFromGutsUnchecked(Protocol[GutsT_contra]):
    """Structural interface for unchecked construction from guts."""

    @classmethod
    def from_guts_unchecked(cls, guts: GutsT_contra) -> Self: ...
