"""Frozen sets that refuse duplicate entries."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from hardwaredb.errors import DuplicateEntryError


def unique_set[T: Hashable](entries: Iterable[T]) -> frozenset[T]:
    """Build a frozenset, failing on the first repeated entry.

    Used wherever a fixed enumeration of tags must be distinct, e.g.
    the codenames of a brand. A silent set literal would hide typos.
    """
    seen: set[T] = set()
    for entry in entries:
        if entry in seen:
            raise DuplicateEntryError(entry)
        seen.add(entry)
    return frozenset(seen)
