"""pydantic field support for guarded types.

A guarded type that mixes in ``PydanticGuts`` and declares ``guts_type`` can
be used as a field of a pydantic model. Field input is validated as the guts
type first and then passed through ``try_from_guts``. Already-guarded
instances pass through untouched in Python mode. When the type also has
shared access, dumping a model emits the field's guts.
"""

from __future__ import annotations

from typing import Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from guts.access import SharedAccess
from guts.construction import TryFromGuts
from guts.logging import get_logger
from guts.types import GutsT

_logger = get_logger(__name__)


def _dump_guts(value: SharedAccess[GutsT]) -> GutsT:
    return value.guts()


class PydanticGuts(TryFromGuts[GutsT]):
    """Mixin making a fallibly constructible guarded type a pydantic field."""

    __slots__ = ()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: object, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        if cls.guts_type is None:
            raise TypeError(
                f"{cls.__name__} must declare guts_type to be used as a pydantic field"
            )
        from_guts = core_schema.no_info_after_validator_function(
            cls._validate_guts, handler.generate_schema(cls.guts_type)
        )
        serialization: core_schema.SerSchema | None = None
        if issubclass(cls, SharedAccess):
            serialization = core_schema.plain_serializer_function_ser_schema(
                _dump_guts
            )
        return core_schema.json_or_python_schema(
            json_schema=from_guts,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_guts]
            ),
            serialization=serialization,
        )

    @classmethod
    def _validate_guts(cls, guts: GutsT) -> Self:
        try:
            return cls.try_from_guts(guts)
        except cls.Error as exc:
            _logger.debug(
                "guts rejected during validation",
                extra={"guarded_type": cls.__name__, "operation": "try_from_guts"},
            )
            # pydantic reports ValueError raised by validators as ValidationError
            raise ValueError(str(exc)) from exc
