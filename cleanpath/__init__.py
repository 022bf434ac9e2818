"""Lexical URL path cleaning producing stable canonical routing keys.

``clean_path("/a//b/../c/")`` returns ``"/a/c/"`` without touching the
filesystem, decoding escapes, or allocating when the input is already clean.
"""

from __future__ import annotations

from ._buffer import DEFAULT_TIERS, BufferTier, select_capacity
from .engine import SEPARATOR, clean_path, clean_path_result, is_clean, normalize
from .errors import CleanPathError, UnsupportedPathTypeError
from .result import Borrowed, CleanedPath, Owned

__all__ = [
    "DEFAULT_TIERS",
    "SEPARATOR",
    "Borrowed",
    "BufferTier",
    "CleanPathError",
    "CleanedPath",
    "Owned",
    "UnsupportedPathTypeError",
    "clean_path",
    "clean_path_result",
    "is_clean",
    "normalize",
    "select_capacity",
]
