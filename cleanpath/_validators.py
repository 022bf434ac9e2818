"""Shared validation helpers."""

from __future__ import annotations

import typing as t

from .errors import UnsupportedPathTypeError

PathSource: t.TypeAlias = str | bytes | bytearray | memoryview


def coerce_path(path: object) -> PathSource:
    """Return *path* in a form the engine can index item by item.

    Text and ``bytes``/``bytearray`` pass through untouched. Memoryviews must
    be one-dimensional and contiguous; any item format is reinterpreted as
    unsigned bytes so indexing yields ``int`` like ``bytes`` does.
    """
    if isinstance(path, str | bytes | bytearray):
        return path

    if isinstance(path, memoryview):
        if path.ndim != 1:
            raise UnsupportedPathTypeError(path, "memoryview must be 1-dimensional")
        if not path.c_contiguous:
            raise UnsupportedPathTypeError(path, "memoryview must be contiguous")
        return path if path.format == "B" else path.cast("B")

    raise UnsupportedPathTypeError(path)
