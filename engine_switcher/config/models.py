"""Typed configuration models for the utility layer.

The config subsystem relies on pydantic to validate YAML documents and to
hand strongly-typed, immutable objects to the rest of the package. Defaults
for every field live in the bundled ``defaults.yml``; the field defaults
below only matter when a model is built directly in code.
"""
from __future__ import annotations

import codecs
import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from engine_switcher.core.types import StrPath
from engine_switcher.utilities.text_files import DEFAULT_TEXT_ENCODING, read_file_as_text


class TextConfig(BaseModel):
    """Encoding used for loose text files when the caller does not pass one."""

    default_encoding: str = Field(DEFAULT_TEXT_ENCODING, min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("default_encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding: {value}") from exc
        return value

    def read_file(self, path: StrPath, encoding: str | None = None) -> str:
        """Read a text file, falling back to :attr:`default_encoding`."""

        return read_file_as_text(path, encoding or self.default_encoding)


class TelemetryConfig(BaseModel):
    """Logging switches consumed by :func:`configure_logging`."""

    log_level: str = Field("INFO")
    log_dir: str = Field("data/logs")
    logger_name: str = Field("engine_switcher", min_length=1)

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return normalized


class SwitcherConfig(BaseModel):
    """Top-level config composed of the text and telemetry sections."""

    text: TextConfig = Field(default_factory=TextConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    model_config = ConfigDict(frozen=True)


__all__ = ["SwitcherConfig", "TelemetryConfig", "TextConfig"]
