"""Performance estimate used to rank offers."""

from __future__ import annotations

import math

from hardwaredb.catalog.models import CPU, Listing
from hardwaredb.constants import (
    SECONDS_PER_YEAR,
    SMT_THREAD_WEIGHT,
    SPEED_DOUBLING_YEARS,
)
from hardwaredb.errors import InvalidScoreError
from hardwaredb.values.uncertain import DEFAULT_READ_POLICY, ReadPolicy


def compilation_performance(
    cpu: CPU, policy: ReadPolicy = DEFAULT_READ_POLICY
) -> float:
    """Anticipated speed of rebuilding one C++ or Rust package.

    Higher is better, and the scale is the same across CPU families.
    Heavily parallel builds only get the base clock, so boost clocks
    are ignored. Per-core speed is assumed to double every
    ``SPEED_DOUBLING_YEARS`` after launch.

    Raises ``UnusableValueError`` when a needed fact is missing and
    ``InvalidScoreError`` if the result is not finite.
    """
    cores = cpu.cores.value(policy)
    threads = cpu.threads.value(policy)
    cores_and_threads = cores + (threads - cores) * SMT_THREAD_WEIGHT

    base_clock = cpu.base_clock.value(policy)

    launch_years = (
        cpu.launch_date.value(policy).unix_seconds() / SECONDS_PER_YEAR
    )
    generation_factor = 2.0 ** (launch_years / SPEED_DOUBLING_YEARS)

    return _finite(cpu, cores_and_threads * base_clock * generation_factor)


def value_ratio(listing: Listing, performance: float) -> float:
    """Performance per CHF of ``listing``."""
    return _finite(listing, performance / listing.price.chf)


def _finite(record: object, score: float) -> float:
    if not math.isfinite(score):
        raise InvalidScoreError(record, score)
    return score
