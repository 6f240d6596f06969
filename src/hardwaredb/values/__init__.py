"""Value types shared by catalog records: uncertain facts, dates, names."""

from hardwaredb.values.dates import Date, parse_date
from hardwaredb.values.names import NormalizedName
from hardwaredb.values.uncertain import (
    DEFAULT_READ_POLICY,
    MISSING,
    NOT_APPLICABLE,
    Missing,
    NotApplicable,
    Present,
    PresentWithDoubt,
    ReadPolicy,
    UncertainValue,
    lift,
)
from hardwaredb.values.unique_set import unique_set

__all__ = [
    "DEFAULT_READ_POLICY",
    "MISSING",
    "NOT_APPLICABLE",
    "Date",
    "Missing",
    "NormalizedName",
    "NotApplicable",
    "Present",
    "PresentWithDoubt",
    "ReadPolicy",
    "UncertainValue",
    "lift",
    "parse_date",
    "unique_set",
]
