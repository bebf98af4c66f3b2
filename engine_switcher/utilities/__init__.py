"""Stateless platform, resource, text-file and enum helpers."""

from .enum_conversion import build_enum_mapping, convert_enum, declared_members
from .host import (
    HostEnvironment,
    describe_host,
    is_process_64bit,
    is_windows,
    is_windows_platform,
    pointer_size,
)
from .resources import read_embedded_resource_as_text, resolve_anchor_package
from .text_files import DEFAULT_TEXT_ENCODING, decode_text, read_file_as_text

__all__ = [
    "DEFAULT_TEXT_ENCODING",
    "HostEnvironment",
    "build_enum_mapping",
    "convert_enum",
    "declared_members",
    "decode_text",
    "describe_host",
    "is_process_64bit",
    "is_windows",
    "is_windows_platform",
    "pointer_size",
    "read_embedded_resource_as_text",
    "read_file_as_text",
    "resolve_anchor_package",
]
