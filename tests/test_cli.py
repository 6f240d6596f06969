"""Tests for CLI argument parsing and the rank command."""

from __future__ import annotations

import json

import pytest

import hardwaredb.services.ranking_service as ranking_service
from hardwaredb import __version__
from hardwaredb.cli import _build_parser, main
from hardwaredb.errors import IncomparableError, MissingValueError


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep main() from configuring the root logger during tests."""
    monkeypatch.setattr("hardwaredb.cli.setup_logging", lambda level: None)


class TestArgParser:
    def test_version_flag(self) -> None:
        args = _build_parser().parse_args(["--version"])
        assert args.version is True

    def test_rank_defaults(self) -> None:
        args = _build_parser().parse_args(["rank"])
        assert args.command == "rank"
        assert args.limit == 0
        assert args.json is False
        assert args.debug_values is False
        assert args.verbose is False

    def test_rank_with_options(self) -> None:
        args = _build_parser().parse_args(
            ["rank", "-n", "3", "--json", "--debug-values", "-v"]
        )
        assert args.limit == 3
        assert args.json is True
        assert args.debug_values is True
        assert args.verbose is True

    def test_no_command_prints_help(self) -> None:
        args = _build_parser().parse_args([])
        assert args.command is None


class TestMain:
    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--version"])
        assert capsys.readouterr().out.strip() == f"hardwaredb {__version__}"

    def test_help_without_command(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main([])
        assert "usage: hardwaredb" in capsys.readouterr().out

    def test_rank_json_limit(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["rank", "--json", "--limit", "3"])
        payload = json.loads(capsys.readouterr().out)
        offers = payload["offers"]
        assert [o["rank"] for o in offers] == [1, 2, 3]
        values = [o["value"] for o in offers]
        assert values == sorted(values, reverse=True)

    def test_rank_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["rank"])
        lines = capsys.readouterr().out.splitlines()
        assert "perf/CHF" in lines[0]
        assert len(lines) == 1 + 14
        assert any("[tray]" in line for line in lines[1:])

    def test_recoverable_error_exits_1(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        def _fail(*args, **kwargs):
            raise MissingValueError()

        monkeypatch.setattr(ranking_service, "rank_offers", _fail)
        with pytest.raises(SystemExit) as exc_info:
            main(["rank"])
        assert exc_info.value.code == 1
        assert "Error: value missing" in capsys.readouterr().err

    def test_fatal_error_propagates(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def _fail(*args, **kwargs):
            raise IncomparableError(1.0, float("nan"))

        monkeypatch.setattr(ranking_service, "rank_offers", _fail)
        with pytest.raises(IncomparableError):
            main(["rank"])
