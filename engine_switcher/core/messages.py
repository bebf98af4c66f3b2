"""Message templates used by the error hierarchy.

Kept in one place so wording stays consistent between error types and tests
can match on stable fragments.
"""
from __future__ import annotations

from typing import Final

ARGUMENT_IS_NULL: Final = "The parameter '{name}' must not be None."
ARGUMENT_IS_EMPTY: Final = "The parameter '{name}' must not be empty."
ARGUMENT_HAS_WRONG_KIND: Final = "The parameter '{name}' must be {expected}, got {actual}."

RESOURCE_NOT_FOUND: Final = "Resource '{name}' was not found."
RESOURCE_NOT_FOUND_IN: Final = "Resource '{name}' was not found in package '{anchor}'."
RESOURCE_NAME_OUTSIDE_PACKAGE: Final = "Resource name '{name}' must be a relative path inside its package."

FILE_NOT_EXIST: Final = "File '{path}' does not exist."

ENUM_CONVERSION_FAILED: Final = "Failed to convert value '{value}' of type '{source}' to type '{dest}'."

CONFIG_ROOT_NOT_MAPPING: Final = "YAML root must be a mapping in {source}"
CONFIG_INVALID: Final = "Invalid configuration in {source}: {error}"
