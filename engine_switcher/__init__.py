"""Utility layer of the JavaScript engine switcher.

Subpackages: ``core`` (errors, messages, type aliases), ``utilities``
(platform, resource, text-file and enum helpers), ``config`` and
``telemetry``. The most used helpers are re-exported here.
"""

from .utilities import (
    build_enum_mapping,
    convert_enum,
    is_process_64bit,
    is_windows,
    read_embedded_resource_as_text,
    read_file_as_text,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "build_enum_mapping",
    "convert_enum",
    "is_process_64bit",
    "is_windows",
    "read_embedded_resource_as_text",
    "read_file_as_text",
]
