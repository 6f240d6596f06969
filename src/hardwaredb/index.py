"""Integrity-checked indexes over immutable record lists.

- ``PrimaryIndex``: key → record, keys unique.
- ``ForeignIndex``: like ``PrimaryIndex``, and every key must exist in
  another (authoritative) index.
- ``ForeignMultiIndex``: foreign key → (primary key → record); foreign
  keys must resolve and primary keys are unique per group.

Indexes hold references to the caller's records, never copies, and are
read-only once built. Builds scan records in input order and stop at
the first violation; no partial index is ever returned.
"""

from __future__ import annotations

from collections.abc import (
    Callable,
    Container,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
)
from types import MappingProxyType
from typing import Any, Protocol

from hardwaredb.errors import (
    BrokenForeignKeyError,
    DuplicateKeyError,
    DuplicatePrimaryKeyError,
)


_ABSENT: Any = object()


class HasPrimaryKey[PK: Hashable](Protocol):
    @property
    def primary_key(self) -> PK: ...


def _primary_key_of(record: HasPrimaryKey[Any]) -> Any:
    return record.primary_key


class _UniqueIndex[K: Hashable, T](Mapping[K, T]):
    """Read-only mapping from a unique key to its record."""

    def __init__(self, entries: dict[K, T]) -> None:
        self._entries = entries

    def __getitem__(self, key: K) -> T:
        return self._entries[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"


class PrimaryIndex[K: Hashable, T](_UniqueIndex[K, T]):
    @classmethod
    def build(
        cls, records: Iterable[T], key: Callable[[T], K]
    ) -> PrimaryIndex[K, T]:
        """Index ``records`` by ``key``.

        Raises ``DuplicateKeyError`` on the first repeated key.
        """
        entries: dict[K, T] = {}
        for record in records:
            _insert_unique(entries, key(record), record, DuplicateKeyError)
        return cls(entries)


class ForeignIndex[K: Hashable, T](_UniqueIndex[K, T]):
    """Unique index whose keys are foreign keys into another index."""

    @classmethod
    def build(
        cls,
        records: Iterable[T],
        key: Callable[[T], K],
        *,
        foreign: Container[K],
        relation: str,
    ) -> ForeignIndex[K, T]:
        """Index ``records`` by ``key``, checking referential integrity.

        For each record the foreign key is checked against ``foreign``
        (``BrokenForeignKeyError``) before uniqueness
        (``DuplicateKeyError``).
        """
        entries: dict[K, T] = {}
        for record in records:
            k = key(record)
            if k not in foreign:
                raise BrokenForeignKeyError(k, relation)
            _insert_unique(entries, k, record, DuplicateKeyError)
        return cls(entries)


class ForeignMultiIndex[K: Hashable, PK: Hashable, T](
    Mapping[K, Mapping[PK, T]]
):
    """Records grouped by a foreign key, keyed by primary key per group.

    Foreign keys without any record have no group; finding those is up
    to the caller.
    """

    def __init__(self, groups: dict[K, dict[PK, T]]) -> None:
        self._groups: dict[K, Mapping[PK, T]] = {
            k: MappingProxyType(group) for k, group in groups.items()
        }

    @classmethod
    def build(
        cls,
        records: Iterable[T],
        foreign_key: Callable[[T], K],
        primary_key: Callable[[T], PK] | None = None,
        *,
        foreign: Container[K],
        relation: str,
    ) -> ForeignMultiIndex[K, PK, T]:
        """Group ``records`` by ``foreign_key``.

        ``primary_key`` defaults to the records' own ``primary_key``
        property. Raises ``BrokenForeignKeyError`` when a foreign key
        is not in ``foreign`` and ``DuplicatePrimaryKeyError`` when a
        primary key repeats within its group.
        """
        pk_of = primary_key if primary_key is not None else _primary_key_of
        groups: dict[K, dict[PK, T]] = {}
        for record in records:
            k = foreign_key(record)
            if k not in foreign:
                raise BrokenForeignKeyError(k, relation)
            group = groups.setdefault(k, {})
            _insert_unique(
                group, pk_of(record), record, DuplicatePrimaryKeyError
            )
        return cls(groups)

    def __getitem__(self, key: K) -> Mapping[PK, T]:
        return self._groups[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, key: object) -> bool:
        return key in self._groups

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} groups)"


def _insert_unique[KK, T](
    entries: dict[KK, T],
    key: KK,
    record: T,
    error: type[DuplicateKeyError] | type[DuplicatePrimaryKeyError],
) -> None:
    old = entries.get(key, _ABSENT)
    if old is not _ABSENT:
        raise error(key, record, old)
    entries[key] = record
