"""Lexical cleaning of URL paths into their canonical absolute form.

:func:`clean_path` is the URL flavour of :func:`posixpath.normpath`. It makes
a single left-to-right pass over the input and applies these rules until no
further processing can be done:

1. Replace multiple separators with a single one.
2. Eliminate each ``.`` segment (the current directory).
3. Eliminate each inner ``..`` segment along with the non-``..`` segment
   that precedes it.
4. Eliminate ``..`` segments that begin a rooted path, so ``/..`` becomes
   ``/``.

The result always starts with exactly one ``/``. A trailing separator is
kept when the input had one, and a trailing ``.`` segment also produces one.
An empty input, or one that cleans down to nothing, yields ``/``.

Nothing is decoded or validated: ``%2F`` stays literal, and bytes that are
not valid UTF-8 pass through untouched.
"""

from __future__ import annotations

import dataclasses as dc
import typing as t

from ._buffer import DEFAULT_TIERS, ScratchBuffer, select_capacity
from ._validators import coerce_path
from .result import Owned

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from ._buffer import BufferTier
    from .result import CleanedPath

SEPARATOR: t.Final[str] = "/"


@dc.dataclass(frozen=True, slots=True)
class _Alphabet:
    """Items recognised by the scanner for one input kind."""

    separator: str | int
    dot: str | int
    root: str | bytes


_TEXT: t.Final = _Alphabet(separator=SEPARATOR, dot=".", root=SEPARATOR)
_BYTES: t.Final = _Alphabet(
    separator=ord(SEPARATOR), dot=ord("."), root=SEPARATOR.encode()
)


def _backtrack(buf: ScratchBuffer, w: int, separator: str | int) -> int:
    """Return *w* moved back past the last segment written to *buf*."""
    if w <= 1:
        # ``..`` at the root is absorbed.
        return w
    w -= 1
    while w > 1 and buf.at(w) != separator:
        w -= 1
    return w


def clean_path_result(
    path: str | bytes | bytearray | memoryview,
    *,
    tiers: t.Sequence[BufferTier] = DEFAULT_TIERS,
) -> CleanedPath:
    """
    Clean *path* and report whether the result borrows from the input.

    Parameters
    ----------
    path : str | bytes | bytearray | memoryview
        The raw URL path. Text is scanned per character and yields ``str``;
        bytes-like input is scanned per byte and yields ``bytes``.
    tiers : Sequence[BufferTier], optional
        Scratch capacity tiers. Affects allocation only, never the result.

    Returns
    -------
    CleanedPath
        :class:`~cleanpath.result.Borrowed` when the canonical form is a
        prefix of *path*, otherwise :class:`~cleanpath.result.Owned`.

    Raises
    ------
    UnsupportedPathTypeError
        If *path* is neither text nor a flat bytes-like object.
    """
    source = coerce_path(path)
    alphabet = _TEXT if isinstance(source, str) else _BYTES
    n = len(source)
    if n == 0:
        return Owned(alphabet.root)

    sep = alphabet.separator
    dot = alphabet.dot
    buf = ScratchBuffer(source, select_capacity(n, tiers))

    # r indexes the next input item to read; w the next output slot to write.
    r = 1
    w = 1
    if source[0] != sep:
        r = 0
        buf.seed_root(sep)

    trailing = n > 1 and source[n - 1] == sep

    while r < n:
        item = source[r]
        if item == sep:
            # empty segment; a trailing separator is re-added at the end
            r += 1
        elif item == dot and r + 1 == n:
            trailing = True
            r += 1
        elif item == dot and source[r + 1] == sep:
            r += 2
        elif (
            item == dot
            and source[r + 1] == dot
            and (r + 2 == n or source[r + 2] == sep)
        ):
            r += 3
            w = _backtrack(buf, w, sep)
        else:
            if w > 1:
                buf.put(w, sep)
                w += 1
            while r < n and source[r] != sep:
                buf.put(w, source[r])
                w += 1
                r += 1

    if trailing and w > 1:
        buf.put(w, sep)
        w += 1

    return buf.freeze(w)


@t.overload
def clean_path(
    path: str, *, tiers: t.Sequence[BufferTier] = ...
) -> str: ...


@t.overload
def clean_path(
    path: bytes | bytearray | memoryview, *, tiers: t.Sequence[BufferTier] = ...
) -> bytes: ...


def clean_path(
    path: str | bytes | bytearray | memoryview,
    *,
    tiers: t.Sequence[BufferTier] = DEFAULT_TIERS,
) -> str | bytes:
    """Return the canonical absolute form of the URL path *path*."""
    return clean_path_result(path, tiers=tiers).value


normalize = clean_path


def is_clean(path: str | bytes | bytearray | memoryview) -> bool:
    """Return ``True`` when cleaning *path* would leave it unchanged.

    Routers use this to decide whether a request should be redirected to
    the canonical location.
    """
    source = coerce_path(path)
    result = clean_path_result(source)
    if result.is_borrowed:
        return len(result) == len(source)
    original = source if isinstance(source, str | bytes) else bytes(source)
    return result.value == original


__all__ = [
    "SEPARATOR",
    "clean_path",
    "clean_path_result",
    "is_clean",
    "normalize",
]
