from __future__ import annotations

import errno
import pickle
from enum import Enum

import pytest

from engine_switcher.core.errors import (
    ConfigurationError,
    CoreError,
    EnumConversionError,
    InvalidArgumentError,
    ResourceNotFoundError,
    TextFileNotFoundError,
)


class Color(Enum):
    RED = 1


class Shade(Enum):
    DARK = 1


@pytest.mark.parametrize(
    ("error", "builtin"),
    [
        (InvalidArgumentError("name"), ValueError),
        (ResourceNotFoundError("a.txt"), LookupError),
        (TextFileNotFoundError("/tmp/missing.txt"), FileNotFoundError),
        (EnumConversionError(Color.RED, Color, Shade), TypeError),
        (ConfigurationError("bad"), ValueError),
    ],
)
def test_errors_should_derive_from_core_error_and_builtin(error: CoreError, builtin: type) -> None:
    assert isinstance(error, CoreError)
    assert isinstance(error, builtin)


def test_invalid_argument_should_name_argument() -> None:
    empty = InvalidArgumentError("resource_name")
    null = InvalidArgumentError.null("scope")
    wrong = InvalidArgumentError.wrong_kind("scope", "a module", 42)

    assert empty.argument_name == "resource_name"
    assert "'resource_name' must not be empty" in str(empty)
    assert null.argument_name == "scope"
    assert "must not be None" in str(null)
    assert "got int" in str(wrong)


def test_resource_not_found_should_carry_name_and_anchor() -> None:
    error = ResourceNotFoundError("Does.Not.Exist", "engine_switcher.config")
    assert error.resource_name == "Does.Not.Exist"
    assert error.anchor == "engine_switcher.config"
    assert str(error) == "Resource 'Does.Not.Exist' was not found in package 'engine_switcher.config'."
    assert str(ResourceNotFoundError("x.txt")) == "Resource 'x.txt' was not found."


def test_text_file_not_found_should_behave_like_os_error() -> None:
    error = TextFileNotFoundError("/nonexistent/path")
    assert error.path == "/nonexistent/path"
    assert error.filename == "/nonexistent/path"
    assert error.errno == errno.ENOENT
    assert str(error) == "File '/nonexistent/path' does not exist."


def test_enum_conversion_error_should_name_value_and_types() -> None:
    error = EnumConversionError(Color.RED, Color, Shade)
    message = str(error)
    assert "'RED'" in message
    assert f"{__name__}.Color" in message
    assert f"{__name__}.Shade" in message
    assert error.value is Color.RED
    assert error.source_type is Color
    assert error.dest_type is Shade


@pytest.mark.parametrize(
    "error",
    [
        InvalidArgumentError.null("scope"),
        ResourceNotFoundError("Does.Not.Exist", "engine_switcher.config"),
        TextFileNotFoundError("/nonexistent/path"),
        EnumConversionError(Color.RED, Color, Shade),
    ],
)
def test_errors_should_survive_pickling(error: CoreError) -> None:
    restored = pickle.loads(pickle.dumps(error))

    assert type(restored) is type(error)
    assert str(restored) == str(error)
    assert restored.__dict__ == error.__dict__
