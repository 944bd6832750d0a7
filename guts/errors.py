from __future__ import annotations

from typing import final


class GutsError(Exception):
    """Base class for every error raised by the guts protocol."""


class InvariantViolation(GutsError):
    """Guts rejected by fallible construction.

    Guarded types subclass this to carry their own diagnostics. The rejected
    guts may be handed back through ``guts``; whether they are is up to the
    implementation.
    """

    def __init__(self, message: str, *, guts: object = None) -> None:
        super().__init__(message)
        self.guts = guts


@final
class Infallible(GutsError):
    """Error type of construction that cannot fail.

    It has no values: instantiating it raises ``TypeError``, and so does
    subclassing it. An ``except Infallible`` clause never matches anything.
    """

    def __init_subclass__(cls, **kwargs: object) -> None:
        raise TypeError("Infallible has no values and cannot be subclassed")

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError(
            f"{type(self).__name__} has no values and cannot be instantiated"
        )


class BorrowError(GutsError):
    """Access that conflicts with an open exclusive window on the same value."""

    def __init__(self, guarded_type: str, operation: str, reason: str) -> None:
        super().__init__(f"{guarded_type}.{operation}: {reason}")
        self.guarded_type = guarded_type
        self.operation = operation


class ConsumedError(BorrowError):
    """Operation on a value whose guts were already extracted."""

    def __init__(self, guarded_type: str, operation: str) -> None:
        super().__init__(guarded_type, operation, "value was consumed by into_guts")
