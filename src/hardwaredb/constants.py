"""Shared constants: single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so vendor strings map straight
onto them (``CPUSocket("sWRX8")``) and JSON output works unchanged.
"""

from __future__ import annotations

from enum import StrEnum

# ── String Enums ─────────────────────────────────────────


class Shop(StrEnum):
    """Marketplaces listings are scraped from."""

    DIGITEC = "Digitec"
    BRACK = "Brack"


class CPUSocket(StrEnum):
    """CPU sockets, valued by the vendor's spelling."""

    # AMD
    AM4 = "AM4"
    AM5 = "AM5"
    SWRX8 = "sWRX8"
    SP3 = "SP3"
    SP5 = "SP5"  # LGA-6096
    SP6 = "SP6"
    STR5 = "sTR5"
    # Intel
    FCLGA3647 = "FCLGA3647"


class Architecture(StrEnum):
    """CPU microarchitectures."""

    ZEN1 = "Zen 1"
    ZEN2 = "Zen 2"
    ZEN3 = "Zen 3"
    ZEN4 = "Zen 4"
    ZEN4C = "Zen 4c"
    ZEN5 = "Zen 5"
    INFINITY = "AMD Infinity Architecture"


class MemoryType(StrEnum):
    DDR4 = "DDR4"
    DDR5 = "DDR5"


class MemorySubtype(StrEnum):
    UDIMM = "UDIMM"
    RDIMM = "RDIMM"


class CoolerType(StrEnum):
    LIQUID_RECOMMENDED = "Liquid cooler recommended for optimal performance"


class GraphicsModel(StrEnum):
    NONE = "Discrete Graphics Card Required"
    RADEON = "AMD Radeon Graphics"


class MarketSegment(StrEnum):
    ENTHUSIAST_DESKTOP = "Enthusiast Desktop"
    SERVER = "Server"


class Usage(StrEnum):
    """Intended usage of a product line."""

    MOBILE = "Mobile"
    DESKTOP = "Desktop"
    SERVER_OR_EMBEDDED = "Server or Embedded"
    SERVER = "Server"
    EMBEDDED = "Embedded"


class Brand(StrEnum):
    """Product families as marketed by the vendor."""

    RYZEN_9 = "AMD Ryzen 9"
    RYZEN_THREADRIPPER = "AMD Ryzen Threadripper"
    RYZEN_THREADRIPPER_PRO_5000WX = "AMD Ryzen Threadripper PRO 5000 WX-Series"
    EPYC_7001 = "AMD EPYC 7001 Series"
    EPYC_7002 = "AMD EPYC 7002 Series"
    EPYC_7003 = "AMD EPYC 7003 Series"
    EPYC_8004 = "AMD EPYC 8004 Series"
    EPYC_9004 = "AMD EPYC 9004 Series"
    EPYC_9005 = "AMD EPYC 9005 Series"


# ── Relations ────────────────────────────────────────────

LISTING_ARTICLE_RELATION = "Listing.article_name -> CPU.name"

# ── Display Names ────────────────────────────────────────

# Trademark and decoration marks vendors sprinkle into product names.
NAME_DECORATIONS = frozenset({"™", "®", "©"})

# ── Dates ────────────────────────────────────────────────

MIN_YEAR = 1900
MAX_YEAR = 2200

# Quarter → (month, day) of the date used to represent that quarter.
QUARTER_MID_DAYS: dict[str, tuple[int, int]] = {
    "Q1": (2, 15),
    "Q2": (5, 15),
    "Q3": (8, 15),
    "Q4": (11, 15),
}

TWO_DIGIT_YEAR_BASE = 2000
LONG_DATE_FORMAT = "%B %d, %Y"  # "August 7, 2019"

# ── Scoring ──────────────────────────────────────────────

# Weight of an SMT thread relative to a physical core.
SMT_THREAD_WEIGHT = 0.3
# Per-core speed is assumed to double every this many years.
SPEED_DOUBLING_YEARS = 5.0
SECONDS_PER_YEAR = 365.0 * 24.0 * 3600.0

# ── CLI ──────────────────────────────────────────────────

DEFAULT_RANK_LIMIT = 0  # 0 = show all
