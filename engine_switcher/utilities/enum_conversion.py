"""Name-based conversion between two enumerations.

Members are matched by ``name`` ignoring case, never by value, so two enums
describing the same concept in different packages can be bridged without
either importing the other.
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from engine_switcher.core.errors import EnumConversionError, InvalidArgumentError
from engine_switcher.core.types import DestEnum, EnumMapping, SourceEnum


def convert_enum(
    value: SourceEnum,
    dest_type: type[DestEnum],
    *,
    mapping: EnumMapping | None = None,
) -> DestEnum:
    """Convert ``value`` to the member of ``dest_type`` with the same name.

    Destination members are scanned in declaration order and the first whose
    name matches case-insensitively wins. When ``mapping`` is given it is used
    instead of the name scan. Raises :class:`EnumConversionError` when no
    counterpart exists.
    """

    _require_member(value)
    _require_enum_type(dest_type)

    if mapping is not None:
        try:
            return mapping[value]
        except KeyError:
            raise EnumConversionError(value, type(value), dest_type) from None

    wanted = (value.name or "").casefold()
    for member in declared_members(dest_type):
        if member.name.casefold() == wanted:
            return member
    raise EnumConversionError(value, type(value), dest_type)


def build_enum_mapping(
    source_type: type[SourceEnum],
    dest_type: type[DestEnum],
) -> dict[SourceEnum, DestEnum]:
    """Precompute the name-based conversion table for every source member.

    The table can be passed back to :func:`convert_enum` as ``mapping``.
    """

    _require_enum_type(source_type, "source_type")
    _require_enum_type(dest_type)
    return {member: convert_enum(member, dest_type) for member in declared_members(source_type)}


def declared_members(enum_type: type[Enum]) -> list[Enum]:
    """Return every named member in declaration order, aliases excluded.

    Unlike iterating the class, this keeps named composite ``Flag`` members.
    """

    return [member for name, member in enum_type.__members__.items() if member.name == name]


def _require_member(value: Any) -> None:
    if value is None:
        raise InvalidArgumentError.null("value")
    if not isinstance(value, Enum):
        raise InvalidArgumentError.wrong_kind("value", "an Enum member", value)


def _require_enum_type(tp: Any, argument_name: str = "dest_type") -> None:
    if tp is None:
        raise InvalidArgumentError.null(argument_name)
    if not (isinstance(tp, type) and issubclass(tp, Enum)):
        raise InvalidArgumentError.wrong_kind(argument_name, "an Enum subclass", tp)


__all__ = ["build_enum_mapping", "convert_enum", "declared_members"]
