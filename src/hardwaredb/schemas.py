"""Pydantic output models for ``hardwaredb rank --json``."""

from __future__ import annotations

from pydantic import BaseModel, Field

from hardwaredb.services.ranking_service import RankedOffer


class RankedOfferOut(BaseModel):
    rank: int = Field(ge=1)
    article_name: str
    shop: str
    price_chf: int
    url: str
    is_tray_version: bool
    is_used: bool
    performance: float
    value: float  # performance per CHF

    @classmethod
    def from_offer(cls, rank: int, offer: RankedOffer) -> RankedOfferOut:
        listing = offer.listing
        return cls(
            rank=rank,
            article_name=str(listing.article_name),
            shop=str(listing.shop),
            price_chf=listing.price.chf,
            url=listing.url,
            is_tray_version=listing.is_tray_version,
            is_used=listing.is_used,
            performance=offer.performance,
            value=offer.value,
        )


class RankingOut(BaseModel):
    offers: list[RankedOfferOut]
