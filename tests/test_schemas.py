"""Tests for the JSON output models."""

from __future__ import annotations

import dataclasses

import pytest
from pydantic import ValidationError

from hardwaredb.schemas import RankedOfferOut, RankingOut
from hardwaredb.services.ranking_service import RankedOffer
from tests.conftest import make_listing


def _offer(**listing_changes) -> RankedOffer:
    listing = make_listing("AMD EPYC™ 7352", "https://shop.example/e", 753)
    listing = dataclasses.replace(listing, **listing_changes)
    return RankedOffer(listing=listing, performance=150.0, value=0.2)


class TestRankedOfferOut:
    def test_from_offer(self) -> None:
        out = RankedOfferOut.from_offer(1, _offer(is_tray_version=True))
        assert out.rank == 1
        assert out.article_name == "AMD EPYC 7352"
        assert out.shop == "Digitec"
        assert out.price_chf == 753
        assert out.is_tray_version is True
        assert out.is_used is False
        assert out.value == pytest.approx(0.2)

    def test_rank_starts_at_one(self) -> None:
        with pytest.raises(ValidationError):
            RankedOfferOut.from_offer(0, _offer())


class TestRankingOut:
    def test_json_round_trip(self) -> None:
        ranking = RankingOut(offers=[RankedOfferOut.from_offer(1, _offer())])
        restored = RankingOut.model_validate_json(ranking.model_dump_json())
        assert restored == ranking
