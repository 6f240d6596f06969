"""Catalog records: CPUs and the listings that sell them.

Every fact a vendor page may or may not state is an ``UncertainValue``;
unset fields default to ``MISSING`` so data entry only spells out what
is known.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

from hardwaredb.constants import (
    Architecture,
    Brand,
    CoolerType,
    CPUSocket,
    GraphicsModel,
    MarketSegment,
    MemorySubtype,
    MemoryType,
    Shop,
    Usage,
)
from hardwaredb.values.dates import Date
from hardwaredb.values.names import NormalizedName
from hardwaredb.values.uncertain import MISSING, UncertainValue

# ─── Units ───────────────────────────────────────────────────────

Watt = NewType("Watt", int)
GHz = NewType("GHz", float)
MTPerSec = NewType("MTPerSec", int)  # memory transfers, mega per second


@dataclass(frozen=True)
class ByteSize:
    count: int

    @classmethod
    def kb(cls, n: int) -> ByteSize:
        return cls(n * 1024)

    @classmethod
    def mb(cls, n: int) -> ByteSize:
        return cls(n * 1024 * 1024)

    def __str__(self) -> str:
        if self.count % (1024 * 1024) == 0:
            return f"{self.count // (1024 * 1024)} MB"
        return f"{self.count // 1024} KB"


@dataclass(frozen=True)
class Price:
    chf: int  # fractional part left out

    def __post_init__(self) -> None:
        if self.chf <= 0:
            raise ValueError(f"price must be positive, got {self.chf} CHF")


@dataclass(frozen=True)
class PCIe:
    version: float
    lanes: UncertainValue[int] = MISSING


@dataclass(frozen=True)
class ProductLine:
    """Brand plus intended usage ("AMD Ryzen™ 9 Desktop Processors")."""

    brand: Brand
    usage: UncertainValue[Usage] = MISSING


# ─── Records ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class CPU:
    name: NormalizedName
    url: str
    product_line: UncertainValue[ProductLine] = MISSING
    architecture: UncertainValue[Architecture] = MISSING
    market_segment: UncertainValue[MarketSegment] = MISSING
    desc: str = ""
    cores: UncertainValue[int] = MISSING
    threads: UncertainValue[int] = MISSING
    l1cache: UncertainValue[ByteSize] = MISSING
    l2cache: UncertainValue[ByteSize] = MISSING
    l3cache: UncertainValue[ByteSize] = MISSING
    tdp: UncertainValue[Watt] = MISSING
    base_clock: UncertainValue[GHz] = MISSING
    max_boost_clock: UncertainValue[GHz] = MISSING
    cooler: UncertainValue[CoolerType] = MISSING
    launch_date: UncertainValue[Date] = MISSING
    cpu_socket: UncertainValue[CPUSocket] = MISSING
    memory_channels: UncertainValue[int] = MISSING
    pcie: UncertainValue[PCIe] = MISSING
    memory_type: UncertainValue[MemoryType] = MISSING
    memory_subtype: UncertainValue[MemorySubtype] = MISSING
    memory_speed: UncertainValue[MTPerSec] = MISSING
    ecc_support: UncertainValue[bool] = MISSING
    graphics_model: UncertainValue[GraphicsModel] = MISSING

    @property
    def primary_key(self) -> NormalizedName:
        return self.name


@dataclass(frozen=True)
class Listing:
    """A shop offer for a catalog CPU."""

    article_name: NormalizedName  # foreign key → CPU.name
    url: str
    shop: Shop
    price: Price
    desc: str = ""  # shop's own title, for double-checking the match
    is_tray_version: bool = False
    is_used: bool = False
    delivered: str = ""

    @property
    def primary_key(self) -> str:
        return self.url
