"""Error hierarchy shared by the utility subsystems.

Every exception derives from :class:`CoreError` and from the builtin that
best describes the failure, so callers can catch either the project-specific
type or the standard one. Errors carry the offending argument, resource,
path or enum types as attributes for diagnostics.
"""
from __future__ import annotations

import errno
import os
from typing import Any

from . import messages


class CoreError(Exception):
    """Base class for all custom exceptions in the package."""


class ConfigurationError(CoreError, ValueError):
    """Raised when configuration files are missing sections or invalid."""


class InvalidArgumentError(CoreError, ValueError):
    """Raised when a required argument is None, empty or of the wrong kind."""

    def __init__(self, argument_name: str, message: str | None = None) -> None:
        self.argument_name = argument_name
        super().__init__(message or messages.ARGUMENT_IS_EMPTY.format(name=argument_name))

    def __reduce__(self):
        return (type(self), (self.argument_name, str(self)))

    @classmethod
    def null(cls, argument_name: str) -> "InvalidArgumentError":
        return cls(argument_name, messages.ARGUMENT_IS_NULL.format(name=argument_name))

    @classmethod
    def wrong_kind(cls, argument_name: str, expected: str, actual: Any) -> "InvalidArgumentError":
        return cls(
            argument_name,
            messages.ARGUMENT_HAS_WRONG_KIND.format(
                name=argument_name,
                expected=expected,
                actual=type(actual).__name__,
            ),
        )


class ResourceNotFoundError(CoreError, LookupError):
    """Raised when no bundled resource exists for the resolved name."""

    def __init__(self, resource_name: str, anchor: str | None = None) -> None:
        self.resource_name = resource_name
        self.anchor = anchor
        if anchor:
            message = messages.RESOURCE_NOT_FOUND_IN.format(name=resource_name, anchor=anchor)
        else:
            message = messages.RESOURCE_NOT_FOUND.format(name=resource_name)
        super().__init__(message)

    def __reduce__(self):
        return (type(self), (self.resource_name, self.anchor))


class TextFileNotFoundError(CoreError, FileNotFoundError):
    """Raised when a text file does not exist at read time."""

    def __init__(self, path: str | os.PathLike[str] | None) -> None:
        self.path = path
        super().__init__(errno.ENOENT, messages.FILE_NOT_EXIST.format(path=path), path)

    def __str__(self) -> str:
        return self.strerror

    def __reduce__(self):
        return (type(self), (self.path,))


class EnumConversionError(CoreError, TypeError):
    """Raised when an enum member has no same-named counterpart in the target."""

    def __init__(self, value: Any, source_type: type, dest_type: type) -> None:
        self.value = value
        self.source_type = source_type
        self.dest_type = dest_type
        name = getattr(value, "name", value)
        super().__init__(
            messages.ENUM_CONVERSION_FAILED.format(
                value=name,
                source=_qualified_name(source_type),
                dest=_qualified_name(dest_type),
            )
        )

    def __reduce__(self):
        return (type(self), (self.value, self.source_type, self.dest_type))


def _qualified_name(tp: type) -> str:
    return f"{tp.__module__}.{tp.__qualname__}"


__all__ = [
    "ConfigurationError",
    "CoreError",
    "EnumConversionError",
    "InvalidArgumentError",
    "ResourceNotFoundError",
    "TextFileNotFoundError",
]
