"""Operating-system and process-bitness detection.

Both checks read process-wide facts that cannot change while the
interpreter runs, but nothing here is cached: tests monkeypatch
``sys.platform`` and :func:`pointer_size` to exercise the other branches.
"""
from __future__ import annotations

import struct
import sys
from dataclasses import dataclass

WINDOWS_PLATFORM_IDS: frozenset[str] = frozenset({"win32", "cygwin"})


@dataclass(frozen=True, slots=True)
class HostEnvironment:
    """Point-in-time summary of the hosting platform."""

    platform_id: str
    is_windows: bool
    is_process_64bit: bool
    pointer_size: int

    def to_dict(self) -> dict[str, object]:
        return {
            "platform_id": self.platform_id,
            "is_windows": self.is_windows,
            "is_process_64bit": self.is_process_64bit,
            "pointer_size": self.pointer_size,
        }


def is_windows_platform(platform_id: str) -> bool:
    """Return True when ``platform_id`` names a Windows-family platform."""

    return platform_id in WINDOWS_PLATFORM_IDS


def is_windows() -> bool:
    """Determine whether the current operating system is Windows."""

    return is_windows_platform(sys.platform)


def pointer_size() -> int:
    """Return the native pointer width of this interpreter in bytes."""

    return struct.calcsize("P")


def is_process_64bit() -> bool:
    """Determine whether the current process is a 64-bit process.

    A 32-bit interpreter on a 64-bit OS reports False.
    """

    return pointer_size() == 8


def describe_host() -> HostEnvironment:
    """Check the platform and bitness once and bundle the answers."""

    return HostEnvironment(
        platform_id=sys.platform,
        is_windows=is_windows(),
        is_process_64bit=is_process_64bit(),
        pointer_size=pointer_size(),
    )


__all__ = [
    "HostEnvironment",
    "WINDOWS_PLATFORM_IDS",
    "describe_host",
    "is_process_64bit",
    "is_windows",
    "is_windows_platform",
    "pointer_size",
]
