"""Identifier generation for in-memory collections."""

from __future__ import annotations

from typing import Iterable


def next_id(ids: Iterable[int]) -> int:
    """Return max(ids) + 1, or 1 for an empty collection.

    No counter is kept: the value is recomputed from the ids present, so
    externally seeded records are taken into account.
    """
    return max(ids, default=0) + 1
