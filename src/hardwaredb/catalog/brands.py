"""Per-brand background facts (release year, codenames, sockets)."""

from __future__ import annotations

from dataclasses import dataclass

from hardwaredb.constants import Architecture, Brand, CPUSocket, Usage
from hardwaredb.index import PrimaryIndex
from hardwaredb.values.uncertain import MISSING, UncertainValue, lift
from hardwaredb.values.unique_set import unique_set


@dataclass(frozen=True)
class BrandInfo:
    brand: Brand
    first_release_year: int
    usage: Usage
    codenames: frozenset[str]
    sockets: frozenset[CPUSocket]
    microarchitectures: frozenset[Architecture]
    # Speed of one core relative to an EPYC 7702 core at equal clock.
    epyc_speed: UncertainValue[float] = MISSING


_BRANDS = (
    BrandInfo(
        brand=Brand.EPYC_7001,
        first_release_year=2017,
        usage=Usage.SERVER_OR_EMBEDDED,
        codenames=unique_set(["Naples"]),
        sockets=unique_set([CPUSocket.SP3]),
        microarchitectures=unique_set([Architecture.ZEN1]),
    ),
    BrandInfo(
        brand=Brand.EPYC_7002,
        first_release_year=2019,
        usage=Usage.SERVER_OR_EMBEDDED,
        codenames=unique_set(["Rome"]),
        sockets=unique_set([CPUSocket.SP3]),
        microarchitectures=unique_set([Architecture.ZEN2]),
        epyc_speed=lift(1.0),
    ),
    BrandInfo(
        brand=Brand.EPYC_7003,
        first_release_year=2021,
        usage=Usage.SERVER,
        codenames=unique_set(["Milan", "Milan-X"]),
        sockets=unique_set([CPUSocket.SP3]),
        microarchitectures=unique_set([Architecture.ZEN3]),
        epyc_speed=lift(1.2),
    ),
    BrandInfo(
        brand=Brand.EPYC_8004,
        first_release_year=2023,
        usage=Usage.SERVER,
        codenames=unique_set(["Siena"]),
        sockets=unique_set([CPUSocket.SP6]),
        microarchitectures=unique_set([Architecture.ZEN4C]),
    ),
    BrandInfo(
        brand=Brand.EPYC_9004,
        first_release_year=2022,
        usage=Usage.SERVER_OR_EMBEDDED,
        codenames=unique_set(["Genoa", "Genoa-X", "Bergamo"]),
        sockets=unique_set([CPUSocket.SP5]),
        microarchitectures=unique_set([Architecture.ZEN4]),
    ),
    BrandInfo(
        brand=Brand.EPYC_9005,
        first_release_year=2025,
        usage=Usage.SERVER,
        codenames=unique_set(["Turin"]),
        sockets=unique_set([CPUSocket.SP5]),
        microarchitectures=unique_set([Architecture.ZEN5]),
    ),
)

BRAND_INFO: PrimaryIndex[Brand, BrandInfo] = PrimaryIndex.build(
    _BRANDS, key=lambda info: info.brand
)


def brand_info(brand: Brand) -> BrandInfo | None:
    """Background facts for ``brand``, if catalogued."""
    return BRAND_INFO.get(brand)
