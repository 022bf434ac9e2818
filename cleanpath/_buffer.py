"""Scratch buffer sizing and lazy materialization for the cleaning engine."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as t

from .result import Borrowed, Owned

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from ._validators import PathSource
    from .result import CleanedPath

_logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class BufferTier:
    """
    Pre-sized scratch capacity for inputs shorter than ``limit``.

    Attributes
    ----------
    limit : int
        Exclusive upper bound on the input length served by this tier
        (must be >= 1).
    capacity : int
        Number of slots pre-allocated when the buffer materializes
        (must be >= limit, leaving room for a synthesized root separator).

    Raises
    ------
    ValueError
        If limit < 1 or capacity < limit.
    """

    limit: int
    capacity: int

    def __post_init__(self) -> None:
        """Validate tier bounds."""
        if self.limit < 1:
            msg = "limit must be >= 1"
            raise ValueError(msg)
        if self.capacity < self.limit:
            msg = "capacity must be >= limit"
            raise ValueError(msg)


DEFAULT_TIERS: t.Final[tuple[BufferTier, ...]] = (
    BufferTier(limit=64, capacity=64),
    BufferTier(limit=256, capacity=256),
    BufferTier(limit=1024, capacity=1024),
)


def select_capacity(
    length: int, tiers: t.Sequence[BufferTier] = DEFAULT_TIERS
) -> int:
    """Return the scratch capacity for an input of *length* items.

    The first tier whose limit exceeds *length* wins, so *tiers* should be
    ordered by ascending limit. Inputs beyond every tier get exactly
    ``length + 1`` slots.
    """
    if length < 0:
        msg = "length must be >= 0"
        raise ValueError(msg)
    return next(
        (tier.capacity for tier in tiers if length < tier.limit),
        length + 1,
    )


class ScratchBuffer:
    """Copy-on-write output store over an input path.

    Until the first write that differs from the input, the output is only a
    prefix of ``source`` and no storage exists. :meth:`materialize` copies
    that prefix into a buffer of ``capacity`` slots, after which every write
    lands in the buffer.
    """

    __slots__ = ("_capacity", "_data", "_source")

    def __init__(self, source: PathSource, capacity: int) -> None:
        self._source = source
        self._capacity = capacity
        self._data: bytearray | list[str] | None = None

    @property
    def materialized(self) -> bool:
        """Return ``True`` once the output diverged from the input."""
        return self._data is not None

    def materialize(self, w: int) -> None:
        """Allocate storage and copy the first *w* input items into it."""
        if isinstance(self._source, str):
            data: bytearray | list[str] = [""] * self._capacity
        else:
            data = bytearray(self._capacity)
        data[:w] = self._source[:w]
        self._data = data
        _logger.debug(
            "Materialized scratch buffer at offset %d (capacity %d)",
            w,
            self._capacity,
        )

    def seed_root(self, separator: str | int) -> None:
        """Materialize from empty with a synthesized root separator."""
        self.materialize(0)
        self._data[0] = separator  # type: ignore[index]

    def put(self, w: int, item: str | int) -> None:
        """Write *item* at output offset *w*, materializing on divergence."""
        if self._data is None:
            if w < len(self._source) and self._source[w] == item:
                return
            self.materialize(w)
        self._data[w] = item  # type: ignore[index]

    def at(self, i: int) -> str | int:
        """Return the already-produced output item at offset *i*."""
        if self._data is None:
            return self._source[i]
        return self._data[i]

    def freeze(self, w: int) -> CleanedPath:
        """Return the first *w* output items as a result variant."""
        if self._data is None:
            if isinstance(self._source, str | bytes):
                return Borrowed(self._source, w)
            # results must not follow later writes to a mutable source
            return Owned(bytes(self._source[:w]))
        if isinstance(self._data, list):
            return Owned("".join(self._data[:w]))
        return Owned(bytes(self._data[:w]))
