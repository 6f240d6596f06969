"""Tests for the four-state uncertain value."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from hardwaredb.config import Settings
from hardwaredb.errors import (
    MissingValueError,
    NotApplicableError,
    UnusableValueError,
)
from hardwaredb.values.uncertain import (
    MISSING,
    NOT_APPLICABLE,
    Missing,
    NotApplicable,
    Present,
    PresentWithDoubt,
    ReadPolicy,
    lift,
)

_LOGGER = "hardwaredb.values.uncertain"


class _Aborted(Exception):
    pass


def _raising_abort(message: str) -> None:
    raise _Aborted(message)


class TestPresent:
    def test_returns_value(self) -> None:
        assert Present(5).value() == 5

    def test_no_side_effect(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger=_LOGGER):
            Present(5).value()
        assert caplog.records == []

    def test_is_frozen(self) -> None:
        p = Present(5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.item = 6  # type: ignore[misc]


class TestPresentWithDoubt:
    def test_returns_value(self) -> None:
        assert PresentWithDoubt(5, "note").value() == 5

    def test_warns_on_every_read(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        doubted = PresentWithDoubt(5, "from a forum post")
        with caplog.at_level(logging.WARNING, logger=_LOGGER):
            doubted.value()
            doubted.value()
        warnings = [
            r for r in caplog.records if r.levelno == logging.WARNING
        ]
        assert len(warnings) == 2
        assert all("from a forum post" in r.getMessage() for r in warnings)


class TestUnusableStates:
    def test_missing_raises(self) -> None:
        with pytest.raises(MissingValueError, match="value missing"):
            MISSING.value()

    def test_not_applicable_raises(self) -> None:
        with pytest.raises(NotApplicableError, match="not applicable"):
            NOT_APPLICABLE.value()

    def test_error_kinds_are_distinct(self) -> None:
        assert not issubclass(MissingValueError, NotApplicableError)
        assert not issubclass(NotApplicableError, MissingValueError)
        assert issubclass(MissingValueError, UnusableValueError)

    def test_instances_compare_equal(self) -> None:
        assert Missing() == MISSING
        assert NotApplicable() == NOT_APPLICABLE
        assert MISSING != NOT_APPLICABLE

    def test_is_usable(self) -> None:
        assert Present(1).is_usable
        assert PresentWithDoubt(1, "n").is_usable
        assert not MISSING.is_usable
        assert not NOT_APPLICABLE.is_usable


class TestReadPolicy:
    def test_default_policy_raises(self) -> None:
        with pytest.raises(MissingValueError):
            MISSING.value(ReadPolicy())

    def test_abort_policy_aborts_instead_of_raising(self) -> None:
        policy = ReadPolicy(abort_on_unusable=True, abort=_raising_abort)
        with pytest.raises(_Aborted, match="value missing"):
            MISSING.value(policy)
        with pytest.raises(_Aborted, match="not applicable"):
            NOT_APPLICABLE.value(policy)

    def test_abort_logs_critical(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        policy = ReadPolicy(abort_on_unusable=True, abort=_raising_abort)
        with caplog.at_level(logging.CRITICAL, logger=_LOGGER):
            with pytest.raises(_Aborted):
                MISSING.value(policy)
        assert "Aborting on unusable value" in caplog.text

    def test_abort_that_returns_still_raises(self) -> None:
        calls: list[str] = []
        policy = ReadPolicy(abort_on_unusable=True, abort=calls.append)
        with pytest.raises(MissingValueError):
            MISSING.value(policy)
        assert calls == ["value missing"]

    def test_abort_policy_leaves_present_alone(self) -> None:
        policy = ReadPolicy(abort_on_unusable=True, abort=_raising_abort)
        assert Present(3).value(policy) == 3

    def test_from_settings(self) -> None:
        assert ReadPolicy.from_settings(
            Settings(debug_value=True)
        ).abort_on_unusable
        assert not ReadPolicy.from_settings(
            Settings(debug_value=False)
        ).abort_on_unusable


class TestLift:
    def test_bare_value_becomes_present(self) -> None:
        assert lift(5) == Present(5)

    def test_uncertain_values_pass_through(self) -> None:
        doubted = PresentWithDoubt(5, "n")
        assert lift(doubted) is doubted
        assert lift(MISSING) is MISSING
        assert lift(NOT_APPLICABLE) is NOT_APPLICABLE

    def test_falsy_values_are_present(self) -> None:
        assert lift(0) == Present(0)
        assert lift(None) == Present(None)
