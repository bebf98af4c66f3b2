"""One-call startup for hosts embedding the utility layer.

Loads the configuration, wires JSON logging from its telemetry section and
records which platform the process is running on.
"""
from __future__ import annotations

from pathlib import Path

from engine_switcher.config.loader import load_config
from engine_switcher.config.models import SwitcherConfig
from engine_switcher.telemetry import configure_from_settings
from engine_switcher.utilities.host import describe_host


def initialize(config_path: Path | str | None = None, *, encoding: str | None = None) -> SwitcherConfig:
    """Load config, configure logging and log the host summary.

    ``encoding`` is forwarded to :func:`load_config` for the user file. The
    returned config's ``text`` section reads further files with the
    configured default encoding.
    """

    config = load_config(config_path, encoding=encoding)
    logger = configure_from_settings(config.telemetry)
    host = describe_host()
    logger.info(
        "Host environment detected",
        extra={**host.to_dict(), "default_encoding": config.text.default_encoding},
    )
    return config


__all__ = ["initialize"]
