"""CLI entry point: ``hardwaredb rank``."""

from __future__ import annotations

import argparse
import sys

from hardwaredb import __version__
from hardwaredb.config import Settings
from hardwaredb.constants import DEFAULT_RANK_LIMIT
from hardwaredb.errors import HardwareDBError, is_fatal
from hardwaredb.logging_config import setup_logging
from hardwaredb.services.ranking_service import RankedOffer
from hardwaredb.values.uncertain import ReadPolicy


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"hardwaredb {__version__}")
        return

    if args.command == "rank":
        _run_rank(args)
    else:
        parser.print_help()


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hardwaredb",
        description=(
            "Hardware catalog: ranks CPU offers by "
            "compile performance per franc."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    rank = sub.add_parser(
        "rank",
        help="Rank shop listings by value for money",
    )
    rank.add_argument(
        "--limit",
        "-n",
        type=int,
        default=DEFAULT_RANK_LIMIT,
        help="Show only the best N offers (default: all)",
    )
    rank.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of a table",
    )
    rank.add_argument(
        "--debug-values",
        action="store_true",
        help=(
            "Abort on the first missing or not-applicable value "
            "(same as DEBUG_VALUE=1)"
        ),
    )
    rank.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def _run_rank(args: argparse.Namespace) -> None:
    """Execute the rank command."""
    from hardwaredb.catalog import CPUS, LISTINGS
    from hardwaredb.services.ranking_service import rank_offers

    settings = Settings()
    setup_logging("DEBUG" if args.verbose else settings.log_level)

    policy = ReadPolicy.from_settings(settings)
    if args.debug_values:
        policy = ReadPolicy(abort_on_unusable=True)

    try:
        offers = rank_offers(CPUS, LISTINGS, policy, best_first=True)
    except HardwareDBError as exc:
        if is_fatal(exc):
            raise
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.limit > 0:
        offers = offers[: args.limit]

    if args.json:
        print(_render_json(offers))
    else:
        print(_render_table(offers))


def _render_json(offers: list[RankedOffer]) -> str:
    from hardwaredb.schemas import RankedOfferOut, RankingOut

    out = RankingOut(
        offers=[
            RankedOfferOut.from_offer(i, offer)
            for i, offer in enumerate(offers, 1)
        ]
    )
    return out.model_dump_json(indent=2)


def _render_table(offers: list[RankedOffer]) -> str:
    lines = [
        f"{'#':>3}  {'CHF':>5}  {'perf':>9}  {'perf/CHF':>9}  article"
    ]
    for i, offer in enumerate(offers, 1):
        listing = offer.listing
        flags = "".join(
            flag
            for flag, on in (
                (" [tray]", listing.is_tray_version),
                (" [used]", listing.is_used),
            )
            if on
        )
        lines.append(
            f"{i:>3}  {listing.price.chf:>5}  {offer.performance:>9.2f}  "
            f"{offer.value:>9.4f}  {listing.article_name}{flags}"
        )
    return "\n".join(lines)


if __name__ == "__main__":
    main()
