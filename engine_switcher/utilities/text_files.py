"""Whole-file text reads with a configurable encoding."""
from __future__ import annotations

import codecs
import os

from engine_switcher.core.errors import InvalidArgumentError, TextFileNotFoundError
from engine_switcher.core.types import StrPath

DEFAULT_TEXT_ENCODING = "utf-8"

# UTF-32 LE must be tried before UTF-16 LE, they share the FF FE prefix.
_BYTE_ORDER_MARKS: tuple[tuple[bytes, str], ...] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def decode_text(payload: bytes, encoding: str = DEFAULT_TEXT_ENCODING) -> str:
    """Decode raw bytes to text.

    A leading UTF-8, UTF-16 or UTF-32 byte order mark selects the codec and
    is dropped; otherwise ``encoding`` is used. Undecodable bytes become
    U+FFFD instead of raising.
    """

    for bom, bom_encoding in _BYTE_ORDER_MARKS:
        if payload.startswith(bom):
            return payload[len(bom):].decode(bom_encoding, errors="replace")
    return payload.decode(encoding, errors="replace")


def read_file_as_text(path: StrPath | None, encoding: str | None = None) -> str:
    """Return the full text content of the file at ``path``.

    ``encoding`` defaults to UTF-8 and is overridden by a byte order mark.
    Line endings are returned untouched. Raises :class:`TextFileNotFoundError`
    when no regular file exists at ``path``.
    """

    if path is None:
        raise TextFileNotFoundError(path)
    if not isinstance(path, (str, os.PathLike)):
        raise InvalidArgumentError.wrong_kind("path", "a str or os.PathLike", path)
    if not os.path.isfile(path):
        raise TextFileNotFoundError(path)
    with open(path, "rb") as fp:
        payload = fp.read()
    return decode_text(payload, encoding or DEFAULT_TEXT_ENCODING)


__all__ = ["DEFAULT_TEXT_ENCODING", "decode_text", "read_file_as_text"]
