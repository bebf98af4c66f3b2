from __future__ import annotations

import importlib
import logging
import sys
import uuid
from pathlib import Path
from textwrap import dedent
from typing import Callable, Iterator, Mapping

import pytest


@pytest.fixture
def resource_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[..., str]]:
    """Build throwaway importable packages under ``tmp_path``.

    Returns the dotted package name; ``files`` values may be text (written as
    UTF-8) or raw bytes, ``modules`` maps submodule names to source code.
    """

    created: list[str] = []
    monkeypatch.syspath_prepend(str(tmp_path))

    def _factory(
        files: Mapping[str, str | bytes] | None = None,
        *,
        modules: Mapping[str, str] | None = None,
    ) -> str:
        name = f"respkg_{uuid.uuid4().hex[:10]}"
        root = tmp_path / name
        root.mkdir()
        (root / "__init__.py").write_text("", encoding="utf-8")
        for relative, content in (files or {}).items():
            target = root.joinpath(*relative.split("/"))
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                content = content.encode("utf-8")
            target.write_bytes(content)
        for module_name, source in (modules or {}).items():
            (root / f"{module_name}.py").write_text(dedent(source), encoding="utf-8")
        importlib.invalidate_caches()
        created.append(name)
        return name

    yield _factory

    for name in created:
        for key in [k for k in sys.modules if k == name or k.startswith(f"{name}.")]:
            sys.modules.pop(key, None)


@pytest.fixture
def isolated_logger_name() -> Iterator[str]:
    name = f"engine_switcher_test_{uuid.uuid4().hex[:8]}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(filename: str, content: str) -> Path:
        path = tmp_path / filename
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write
