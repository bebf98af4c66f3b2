"""YAML loaders for the config subsystem.

Defaults ship inside the package as ``defaults.yml`` and are read through
the embedded-resource helper. A user file is overlaid on top of them
section by section, then the merged mapping is validated by
:class:`SwitcherConfig`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml
from pydantic import ValidationError

from engine_switcher.core import messages
from engine_switcher.core.errors import ConfigurationError
from engine_switcher.utilities.resources import read_embedded_resource_as_text

from .models import SwitcherConfig, TextConfig

logger = logging.getLogger("engine_switcher.config")

DEFAULTS_RESOURCE = "defaults.yml"


def _parse_yaml(text: str, source: str) -> Mapping[str, Any]:
    """Parse a YAML document and return a mapping (empty dict if blank)."""

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(messages.CONFIG_INVALID.format(source=source, error=exc)) from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(messages.CONFIG_ROOT_NOT_MAPPING.format(source=source))
    return data


def load_default_settings() -> Mapping[str, Any]:
    """Return the raw mapping stored in the bundled ``defaults.yml``."""

    text = read_embedded_resource_as_text(DEFAULTS_RESOURCE, SwitcherConfig)
    return _parse_yaml(text, f"<bundled {DEFAULTS_RESOURCE}>")


def merge_sections(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Overlay ``override`` on ``base``; nested mappings are merged key by key."""

    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_sections(current, value)
        else:
            merged[key] = value
    return merged


def load_config(path: Path | str | None = None, *, encoding: str | None = None) -> SwitcherConfig:
    """Load the bundled defaults and overlay an optional user YAML file.

    The user file is decoded with ``encoding`` when given, else with the
    bundled ``text.default_encoding``. A missing ``path`` raises
    :class:`TextFileNotFoundError`; malformed YAML or values rejected by the
    models raise :class:`ConfigurationError`.
    """

    data = load_default_settings()
    source = f"<bundled {DEFAULTS_RESOURCE}>"
    if path is not None:
        source = str(path)
        text_settings = TextConfig.model_validate(data.get("text") or {})
        user_data = _parse_yaml(text_settings.read_file(path, encoding), source)
        data = merge_sections(data, user_data)
    try:
        config = SwitcherConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(messages.CONFIG_INVALID.format(source=source, error=exc)) from exc
    logger.debug("Configuration loaded", extra={"config_source": source})
    return config


__all__ = ["DEFAULTS_RESOURCE", "load_config", "load_default_settings", "merge_sections"]
