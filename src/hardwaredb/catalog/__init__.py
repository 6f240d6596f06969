"""Typed catalog records and the bundled catalog data."""

from hardwaredb.catalog.data import CPUS, LISTINGS
from hardwaredb.catalog.models import CPU, Listing, Price

__all__ = ["CPU", "CPUS", "LISTINGS", "Listing", "Price"]
