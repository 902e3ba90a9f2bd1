"""Batch operations on ordered sequences addressed by zero-based positions.

Positions are always resolved against the sequence as it was before the
operation. Positions outside ``range(len(items))`` are dropped.
"""
import logging
from collections.abc import Iterable, Sequence
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def valid_offsets(items: Sequence, positions: Iterable[int]) -> set[int]:
    requested = set(positions)
    valid = {p for p in requested if 0 <= p < len(items)}
    if len(valid) != len(requested):
        logger.debug("Ignoring out-of-range positions %s (size=%d)", sorted(requested - valid), len(items))
    return valid


def remove_at_offsets(items: Sequence[T], positions: Iterable[int]) -> list[T]:
    """Return ``items`` without the elements at ``positions``."""
    drop = valid_offsets(items, positions)
    return [item for i, item in enumerate(items) if i not in drop]


def move_at_offsets(items: Sequence[T], positions: Iterable[int], to: int) -> list[T]:
    """Return ``items`` with the elements at ``positions`` moved before index ``to``.

    ``to`` addresses the original sequence, so moving ``[0]`` to ``2`` in
    ``[A, B, C]`` gives ``[B, A, C]``. The moved elements keep their relative
    order. ``to`` is clamped to ``0..len(items)``.
    """
    moving = valid_offsets(items, positions)
    to = max(0, min(to, len(items)))
    head = [item for i, item in enumerate(items[:to]) if i not in moving]
    tail = [item for i, item in enumerate(items) if i >= to and i not in moving]
    moved = [items[i] for i in sorted(moving)]
    return head + moved + tail
