"""Result variants distinguishing borrowed views from freshly built paths.

Cleaning an already canonical ``str`` or ``bytes`` path never allocates: the
result is a :class:`Borrowed` prefix of the caller's input. As soon as the
output has to differ from the input, or the input is a mutable buffer, the
result becomes :class:`Owned`.
"""

from __future__ import annotations

import abc
import dataclasses as dc


class CleanedPath(abc.ABC):
    """Common behaviour shared by both result variants."""

    __slots__ = ()

    @property
    @abc.abstractmethod
    def value(self) -> str | bytes:
        """Return the cleaned path as ``str`` or ``bytes``."""

    @property
    @abc.abstractmethod
    def is_borrowed(self) -> bool:
        """Return ``True`` when the result still refers to the input."""

    @abc.abstractmethod
    def view(self) -> memoryview:
        """Return a read-only memoryview over a byte result."""

    @property
    def is_text(self) -> bool:
        """Return ``True`` when the cleaned path is a ``str``."""
        return isinstance(self.value, str)

    def __len__(self) -> int:
        """Return the length of the cleaned path."""
        return len(self.value)

    def __bytes__(self) -> bytes:
        """Return a byte result as ``bytes``."""
        value = self.value
        if isinstance(value, str):
            msg = "text paths have no bytes form; encode the value instead"
            raise TypeError(msg)
        return value

    def __eq__(self, other: object) -> bool:
        """Compare by cleaned value against results, ``str`` or ``bytes``."""
        if isinstance(other, CleanedPath):
            return self.value == other.value
        if isinstance(other, str | bytes):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        """Hash the cleaned value so results work as mapping keys."""
        return hash(self.value)


def _memory_view(data: str | bytes, length: int) -> memoryview:
    """Return a read-only view of the first *length* bytes of *data*."""
    if isinstance(data, str):
        msg = "text paths cannot be viewed as memory"
        raise TypeError(msg)
    return memoryview(data)[:length].toreadonly()


@dc.dataclass(frozen=True, slots=True, eq=False)
class Borrowed(CleanedPath):
    """Cleaned path equal to the first ``length`` items of ``source``."""

    source: str | bytes
    length: int

    @property
    def value(self) -> str | bytes:
        """Return ``source[:length]``."""
        return self.source[: self.length]

    @property
    def is_borrowed(self) -> bool:
        """Borrowed results always refer to the input."""
        return True

    def view(self) -> memoryview:
        """Return a zero-copy view of the borrowed prefix."""
        return _memory_view(self.source, self.length)

    def __len__(self) -> int:
        """Return the borrowed length without slicing the source."""
        return self.length


@dc.dataclass(frozen=True, slots=True, eq=False)
class Owned(CleanedPath):
    """Cleaned path built independently of the input."""

    data: str | bytes

    @property
    def value(self) -> str | bytes:
        """Return the owned data."""
        return self.data

    @property
    def is_borrowed(self) -> bool:
        """Owned results never refer to the input."""
        return False

    def view(self) -> memoryview:
        """Return a view over the owned bytes."""
        return _memory_view(self.data, len(self.data))


__all__ = ["Borrowed", "CleanedPath", "Owned"]
