"""Shared test fixtures: small catalogs and a clean environment."""

import os

# Settings read the process environment; tests must not inherit a
# developer's debug toggle or log level.
os.environ.pop("DEBUG_VALUE", None)
os.environ.pop("LOG_LEVEL", None)

import pytest

from hardwaredb.catalog.models import CPU, GHz, Listing, Price
from hardwaredb.constants import Shop
from hardwaredb.values.dates import Date
from hardwaredb.values.names import NormalizedName
from hardwaredb.values.uncertain import Present


def make_cpu(
    name: str,
    *,
    cores: int = 16,
    threads: int = 32,
    base_clock: float = 3.0,
    launch: str = "1/1/1970",
) -> CPU:
    """A CPU with exactly the facts the score needs."""
    return CPU(
        name=NormalizedName.of(name),
        url=f"https://vendor.example/{name.replace(' ', '-').lower()}",
        cores=Present(cores),
        threads=Present(threads),
        base_clock=Present(GHz(base_clock)),
        launch_date=Present(Date.parse(launch)),
    )


def make_listing(article: str, url: str, chf: int) -> Listing:
    return Listing(
        article_name=NormalizedName.of(article),
        url=url,
        shop=Shop.DIGITEC,
        price=Price(chf),
    )


@pytest.fixture
def small_catalog() -> tuple[list[CPU], list[Listing]]:
    """Two sold CPUs, one unsold; three listings."""
    cpus = [
        make_cpu("Fast™ 1", cores=32, threads=64),
        make_cpu("Slow 2", cores=8, threads=16),
        make_cpu("Unsold 3"),
    ]
    listings = [
        make_listing("Fast 1", "https://shop.example/fast-a", 1000),
        make_listing("Fast 1", "https://shop.example/fast-b", 500),
        make_listing("Slow 2", "https://shop.example/slow", 400),
    ]
    return cpus, listings
