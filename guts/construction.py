from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, Final, Self

from guts.association import Guts
from guts.errors import Infallible, InvariantViolation
from guts.types import GutsT

# Implemented by FromGuts for all of its subclasses.
_DERIVED: Final = ("try_from_guts", "from_guts_unchecked")


class FromGutsUnchecked(Guts[GutsT]):
    """Constructing values from their guts without checking invariants."""

    __slots__ = ()

    @classmethod
    @abstractmethod
    def from_guts_unchecked(cls, guts: GutsT) -> Self:
        """Construct a value from its guts without checking invariants.

        Safety:
            The caller guarantees that ``guts`` satisfy every invariant of
            ``cls``, or that ``cls`` documents the resulting state as
            tolerated. Otherwise the value's behavior is unspecified: all of
            its operations are free to assume the invariants hold. Call sites
            state their justification in a ``# SAFETY:`` comment.
        """


class TryFromGuts(Guts[GutsT]):
    """Constructing values from their guts, with possible failure.

    ``Error`` names the exception raised for rejected guts. It defaults to
    ``InvariantViolation``, and subclasses usually narrow it to their own
    subclass of it.
    """

    __slots__ = ()

    Error: ClassVar[type[Exception]] = InvariantViolation

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        error = cls.Error
        if not (isinstance(error, type) and issubclass(error, Exception)):
            raise TypeError(
                f"{cls.__name__}.Error must be an exception class, got {error!r}"
            )

    @classmethod
    @abstractmethod
    def try_from_guts(cls, guts: GutsT) -> Self:
        """Construct a value from its guts, or fail.

        Raises:
            Error: ``guts`` violate an invariant of ``cls``. No value is
                produced.
        """


class FromGuts(TryFromGuts[GutsT], FromGutsUnchecked[GutsT]):
    """Safely constructing values from their guts.

    Subclass only when every value of the guts type is valid. Fallible and
    unchecked construction then come for free. ``try_from_guts`` never raises
    (its ``Error`` is ``Infallible``), and ``from_guts_unchecked`` is exactly
    ``from_guts``. Neither may be overridden.
    """

    __slots__ = ()

    Error: ClassVar[type[Exception]] = Infallible

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        for name in _DERIVED:
            owner = next(klass for klass in cls.__mro__ if name in vars(klass))
            if owner is not FromGuts:
                raise TypeError(
                    f"{cls.__name__} cannot implement {name}: "
                    f"it is derived from from_guts"
                )
        if cls.Error is not Infallible:
            raise TypeError(
                f"{cls.__name__}.Error must stay Infallible: from_guts cannot fail"
            )

    @classmethod
    @abstractmethod
    def from_guts(cls, guts: GutsT) -> Self:
        """Construct a value from its guts."""

    @classmethod
    def try_from_guts(cls, guts: GutsT) -> Self:
        return cls.from_guts(guts)

    @classmethod
    def from_guts_unchecked(cls, guts: GutsT) -> Self:
        # Sound for any guts: from_guts accepts all of them.
        return cls.from_guts(guts)
