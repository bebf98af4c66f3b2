"""Core primitives shared across all subsystems.

This package aggregates the error hierarchy, message templates and common
type aliases. Higher level packages import from here to avoid circular
dependencies.
"""

from . import errors, messages, types

__all__ = ["errors", "messages", "types"]
