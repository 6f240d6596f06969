"""Tests for PrimaryIndex and ForeignIndex."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from hardwaredb.errors import BrokenForeignKeyError, DuplicateKeyError
from hardwaredb.index import ForeignIndex, PrimaryIndex


@dataclass(frozen=True)
class _Item:
    name: str
    ref: str = ""


def _by_name(item: _Item) -> str:
    return item.name


def _by_ref(item: _Item) -> str:
    return item.ref


class TestPrimaryIndex:
    def test_get_returns_the_source_record(self) -> None:
        items = [_Item("a"), _Item("b"), _Item("c")]
        index = PrimaryIndex.build(items, key=_by_name)
        for item in items:
            assert index.get(item.name) is item

    def test_contains_and_len(self) -> None:
        index = PrimaryIndex.build([_Item("a"), _Item("b")], key=_by_name)
        assert "a" in index
        assert "z" not in index
        assert len(index) == 2
        assert sorted(index) == ["a", "b"]

    def test_get_unknown_key(self) -> None:
        index = PrimaryIndex.build([_Item("a")], key=_by_name)
        assert index.get("z") is None

    def test_empty(self) -> None:
        assert len(PrimaryIndex.build([], key=_by_name)) == 0

    def test_duplicate_key_names_both_records(self) -> None:
        first = _Item("a", ref="first")
        second = _Item("a", ref="second")
        with pytest.raises(DuplicateKeyError) as exc_info:
            PrimaryIndex.build([first, _Item("b"), second], key=_by_name)
        err = exc_info.value
        assert err.key == "a"
        assert err.new_record is second
        assert err.old_record is first
        assert "'a'" in str(err)

    def test_duplicate_stops_scanning(self) -> None:
        seen: list[str] = []

        def key(item: _Item) -> str:
            seen.append(item.name)
            return item.name

        with pytest.raises(DuplicateKeyError):
            PrimaryIndex.build(
                [_Item("a"), _Item("a"), _Item("never")], key=key
            )
        assert "never" not in seen

    def test_is_read_only(self) -> None:
        index = PrimaryIndex.build([_Item("a")], key=_by_name)
        with pytest.raises(TypeError):
            index["b"] = _Item("b")  # type: ignore[index]


class TestForeignIndex:
    def test_builds_when_all_keys_resolve(self) -> None:
        foreign = PrimaryIndex.build([_Item("x"), _Item("y")], key=_by_name)
        items = [_Item("1", ref="x"), _Item("2", ref="y")]
        index = ForeignIndex.build(
            items, key=_by_ref, foreign=foreign, relation="Item.ref -> X"
        )
        assert index.get("x") is items[0]
        assert index.get("y") is items[1]

    def test_broken_foreign_key(self) -> None:
        foreign = PrimaryIndex.build([_Item("x")], key=_by_name)
        with pytest.raises(BrokenForeignKeyError) as exc_info:
            ForeignIndex.build(
                [_Item("1", ref="x"), _Item("2", ref="gone")],
                key=_by_ref,
                foreign=foreign,
                relation="Item.ref -> X",
            )
        assert exc_info.value.key == "gone"
        assert exc_info.value.relation == "Item.ref -> X"
        assert "Item.ref -> X" in str(exc_info.value)

    def test_duplicate_foreign_key(self) -> None:
        foreign = PrimaryIndex.build([_Item("x")], key=_by_name)
        with pytest.raises(DuplicateKeyError):
            ForeignIndex.build(
                [_Item("1", ref="x"), _Item("2", ref="x")],
                key=_by_ref,
                foreign=foreign,
                relation="Item.ref -> X",
            )

    def test_foreign_checked_before_uniqueness(self) -> None:
        """Each record has its foreign key resolved before the uniqueness check."""
        foreign: set[str] = {"x"}
        calls: list[str] = []

        class _Tracking(set[str]):
            def __contains__(self, key: object) -> bool:
                calls.append(str(key))
                return super().__contains__(key)

        tracking = _Tracking(foreign)
        items = [_Item("1", ref="x"), _Item("2", ref="x")]
        with pytest.raises(DuplicateKeyError):
            ForeignIndex.build(
                items, key=_by_ref, foreign=tracking, relation="r"
            )
        assert calls == ["x", "x"]

    def test_accepts_plain_containers(self) -> None:
        index = ForeignIndex.build(
            [_Item("1", ref="x")],
            key=_by_ref,
            foreign=frozenset({"x"}),
            relation="r",
        )
        assert "x" in index
