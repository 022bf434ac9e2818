"""Exception hierarchy raised by cleanpath."""

from __future__ import annotations


class CleanPathError(Exception):
    """Base class for cleanpath errors."""


class UnsupportedPathTypeError(CleanPathError, TypeError):
    """
    Raised when a path is neither text nor a flat bytes-like object.

    Parameters
    ----------
    value : object
        The rejected input.
    reason : str | None
        Optional detail appended to the message.

    Attributes
    ----------
    value : object
        The rejected input.
    """

    def __init__(self, value: object, reason: str | None = None) -> None:
        msg = f"path must be str or bytes-like, not {type(value).__name__}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.value = value


__all__ = ["CleanPathError", "UnsupportedPathTypeError"]
