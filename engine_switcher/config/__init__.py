"""Configuration loading and validation package."""

from .loader import DEFAULTS_RESOURCE, load_config, load_default_settings, merge_sections
from .models import SwitcherConfig, TelemetryConfig, TextConfig

__all__ = [
    "DEFAULTS_RESOURCE",
    "SwitcherConfig",
    "TelemetryConfig",
    "TextConfig",
    "load_config",
    "load_default_settings",
    "merge_sections",
]
