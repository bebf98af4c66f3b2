"""Read text resources bundled inside importable packages.

A scope names the package that owns the resource:

* a package module, or a plain module (its parent package is used),
* a dotted package name, imported on demand,
* a marker class (the package of the module that declares it).

``resource_name`` is always a ``/``-separated path relative to that package,
looked up through :mod:`importlib.resources`, so the lookup works the same
for source checkouts, wheels and zip imports.
"""
from __future__ import annotations

import importlib
import sys
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import PureWindowsPath
from types import ModuleType

from engine_switcher.core import messages
from engine_switcher.core.errors import InvalidArgumentError, ResourceNotFoundError
from engine_switcher.core.types import ResourceScope

from .text_files import decode_text


def read_embedded_resource_as_text(resource_name: str, scope: ResourceScope) -> str:
    """Return the content of a bundled resource decoded as UTF-8.

    A leading byte order mark is honored and dropped; undecodable bytes
    become U+FFFD. Raises :class:`InvalidArgumentError` for a missing or blank
    name, a name reaching outside the package or an unusable scope, and
    :class:`ResourceNotFoundError` when the package has no such file.
    """

    _require_resource_name(resource_name)
    parts = _resource_parts(resource_name)
    try:
        anchor = resolve_anchor_package(scope)
    except ImportError as exc:
        raise ResourceNotFoundError(resource_name, exc.name) from exc
    resource = _locate(anchor, resource_name, parts)
    if not resource.is_file():
        raise ResourceNotFoundError(resource_name, anchor)
    try:
        with resource.open("rb") as stream:
            payload = stream.read()
    except FileNotFoundError as exc:
        raise ResourceNotFoundError(resource_name, anchor) from exc
    return decode_text(payload)


def resolve_anchor_package(scope: ResourceScope) -> str:
    """Return the dotted name of the package a scope points at.

    Package names are imported on demand; an unknown name raises
    :class:`ImportError`.
    """

    if scope is None:
        raise InvalidArgumentError.null("scope")
    if isinstance(scope, ModuleType):
        return _package_of(scope)
    if isinstance(scope, str):
        if not scope.strip():
            raise InvalidArgumentError("scope")
        return _package_of(importlib.import_module(scope))
    if isinstance(scope, type):
        module = sys.modules.get(scope.__module__) or importlib.import_module(scope.__module__)
        return _package_of(module)
    raise InvalidArgumentError.wrong_kind("scope", "a module, package name or class", scope)


def _require_resource_name(resource_name: str) -> None:
    if resource_name is None:
        raise InvalidArgumentError.null("resource_name")
    if not isinstance(resource_name, str):
        raise InvalidArgumentError.wrong_kind("resource_name", "a string", resource_name)
    if not resource_name.strip():
        raise InvalidArgumentError("resource_name")


def _resource_parts(resource_name: str) -> list[str]:
    """Split a resource name into path segments that stay inside the package."""

    normalized = resource_name.replace("\\", "/")
    parts = [part for part in normalized.split("/") if part not in ("", ".")]
    if normalized.startswith("/") or PureWindowsPath(resource_name).drive or ".." in parts or not parts:
        raise InvalidArgumentError(
            "resource_name",
            messages.RESOURCE_NAME_OUTSIDE_PACKAGE.format(name=resource_name),
        )
    return parts


def _package_of(module: ModuleType) -> str:
    if hasattr(module, "__path__"):
        return module.__name__
    package = module.__package__ or module.__name__.rpartition(".")[0]
    if not package:
        raise InvalidArgumentError.wrong_kind("scope", "a module that belongs to a package", module)
    return package


def _locate(anchor: str, resource_name: str, parts: list[str]) -> Traversable:
    try:
        resource = resources.files(anchor)
    except ModuleNotFoundError as exc:
        raise ResourceNotFoundError(resource_name, anchor) from exc
    for part in parts:
        resource = resource.joinpath(part)
    return resource


__all__ = ["read_embedded_resource_as_text", "resolve_anchor_package"]
