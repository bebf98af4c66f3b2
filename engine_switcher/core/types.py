"""Shared type aliases for readability and contract enforcement.

Resource scopes, file paths and enum conversion tables travel between the
utility, config and bootstrap packages; the aliases below keep those
signatures readable.
"""
from __future__ import annotations

import os
from enum import Enum
from types import ModuleType
from typing import Any, Mapping, TypeAlias, TypeVar

StrPath: TypeAlias = str | os.PathLike[str]
ResourceScope: TypeAlias = ModuleType | str | type

SourceEnum = TypeVar("SourceEnum", bound=Enum)
DestEnum = TypeVar("DestEnum", bound=Enum)

EnumMapping: TypeAlias = Mapping[Any, Any]
