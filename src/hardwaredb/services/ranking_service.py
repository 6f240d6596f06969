"""Build the catalog indexes and rank shop offers by value for money."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from hardwaredb.catalog.models import CPU, Listing
from hardwaredb.constants import LISTING_ARTICLE_RELATION
from hardwaredb.index import ForeignMultiIndex, PrimaryIndex
from hardwaredb.ranking import collect_sorted, descending, on, strict_compare
from hardwaredb.services.scoring import compilation_performance, value_ratio
from hardwaredb.values.names import NormalizedName
from hardwaredb.values.uncertain import DEFAULT_READ_POLICY, ReadPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedOffer:
    """A listing with its CPU's performance and performance per CHF."""

    listing: Listing
    performance: float
    value: float


@dataclass(frozen=True)
class CatalogIndexes:
    cpus_by_name: PrimaryIndex[NormalizedName, CPU]
    listings_by_article: ForeignMultiIndex[NormalizedName, str, Listing]


def build_indexes(
    cpus: Iterable[CPU], listings: Iterable[Listing]
) -> CatalogIndexes:
    """Index CPUs by name and group listings by the CPU they sell.

    Raises ``DuplicateKeyError``, ``BrokenForeignKeyError`` or
    ``DuplicatePrimaryKeyError`` on integrity violations.
    """
    cpus_by_name = PrimaryIndex.build(cpus, key=lambda cpu: cpu.name)
    listings_by_article = ForeignMultiIndex.build(
        listings,
        foreign_key=lambda listing: listing.article_name,
        foreign=cpus_by_name,
        relation=LISTING_ARTICLE_RELATION,
    )
    logger.debug(
        "Indexed %d CPUs and listings for %d of them",
        len(cpus_by_name),
        len(listings_by_article),
    )
    return CatalogIndexes(cpus_by_name, listings_by_article)


def unsold_cpus(indexes: CatalogIndexes) -> list[CPU]:
    """CPUs without any listing, each logged as a warning."""
    unsold = [
        cpu
        for name, cpu in indexes.cpus_by_name.items()
        if name not in indexes.listings_by_article
    ]
    for cpu in unsold:
        logger.warning("CPU %r is not being sold", str(cpu.name))
    return unsold


def rank_offers(
    cpus: Sequence[CPU],
    listings: Sequence[Listing],
    policy: ReadPolicy = DEFAULT_READ_POLICY,
    *,
    best_first: bool = False,
) -> list[RankedOffer]:
    """Rank every listing by performance per CHF.

    Ascending by default (best value last). Any failure to score a
    listing aborts the whole ranking; there are no partial results.
    """
    indexes = build_indexes(cpus, listings)
    unsold_cpus(indexes)

    compare = on(lambda offer: offer.value, strict_compare)
    if best_first:
        compare = descending(compare)
    return collect_sorted(_score(listings, indexes, policy), compare)


def _score(
    listings: Iterable[Listing],
    indexes: CatalogIndexes,
    policy: ReadPolicy,
) -> Iterator[RankedOffer]:
    for listing in listings:
        # Resolves: build_indexes checked every article name.
        cpu = indexes.cpus_by_name[listing.article_name]
        performance = compilation_performance(cpu, policy)
        value = value_ratio(listing, performance)
        yield RankedOffer(listing, performance, value)
