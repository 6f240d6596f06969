"""Error taxonomy and classification.

Every failure the core can report is a ``HardwareDBError`` carrying
enough context (key, records, input text) to render a precise
diagnostic without re-deriving it. Errors are classified to enable:
- Recoverable handling at the CLI boundary (message + exit code)
- Fatal contract violations surfacing with their traceback
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorClass(Enum):
    RECOVERABLE = "recoverable"  # bad input data: report and stop
    FATAL = "fatal"  # broken programming contract: never handled


class HardwareDBError(Exception):
    """Base exception for all hardwaredb failures."""

    error_class: ErrorClass = ErrorClass.RECOVERABLE


# ── Index integrity ──────────────────────────────────────────


class DuplicateKeyError(HardwareDBError):
    """Two records share a unique key."""

    def __init__(self, key: Any, new_record: Any, old_record: Any) -> None:
        self.key = key
        self.new_record = new_record
        self.old_record = old_record
        super().__init__(
            f"duplicate unique key {key!r} used in item {new_record!r} "
            f"and previously {old_record!r}"
        )


class DuplicatePrimaryKeyError(HardwareDBError):
    """Two records in the same foreign-key group share a primary key."""

    def __init__(self, key: Any, new_record: Any, old_record: Any) -> None:
        self.key = key
        self.new_record = new_record
        self.old_record = old_record
        super().__init__(
            f"duplicate primary key {key!r} used in item {new_record!r} "
            f"and previously {old_record!r}"
        )


class BrokenForeignKeyError(HardwareDBError):
    """A foreign key does not resolve in the referenced index."""

    def __init__(self, key: Any, relation: str) -> None:
        self.key = key
        self.relation = relation
        super().__init__(
            f"value {key!r} for foreign key {relation} does not exist"
        )


class DuplicateEntryError(HardwareDBError):
    """An enumeration of distinct tags contains the same entry twice."""

    def __init__(self, entry: Any) -> None:
        self.entry = entry
        super().__init__(f"duplicate entry {entry!r} in set")


# ── Uncertain values ─────────────────────────────────────────


class UnusableValueError(HardwareDBError):
    """An uncertain value was read in a state without a usable value."""


class MissingValueError(UnusableValueError):
    def __init__(self, message: str = "value missing") -> None:
        super().__init__(message)


class NotApplicableError(UnusableValueError):
    def __init__(self, message: str = "value not applicable") -> None:
        super().__init__(message)


# ── Dates ────────────────────────────────────────────────────


class DateRangeError(HardwareDBError):
    """A calendar field is outside its valid range."""

    def __init__(self, field: str, value: int, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(reason)


class DateParseError(HardwareDBError):
    """Input text is not an acceptable date.

    ``field`` names the offending component ("year", "month", "day",
    "quarter") when the text matched a known shape; it is ``None``
    for text of an unrecognized shape.
    """

    def __init__(
        self, text: str, reason: str, field: str | None = None
    ) -> None:
        self.text = text
        self.reason = reason
        self.field = field
        super().__init__(f"invalid date {text!r}: {reason}")


# ── Ranking ──────────────────────────────────────────────────


class InvalidScoreError(HardwareDBError):
    """A computed score is not a finite number."""

    def __init__(self, record: Any, score: float) -> None:
        self.record = record
        self.score = score
        super().__init__(
            f"score {score!r} for {record!r} is not a finite number"
        )


class IncomparableError(HardwareDBError):
    """Two produced scores cannot be ordered.

    Scores must be totally ordered before they reach the sort; hitting
    this means the producer broke that contract.
    """

    error_class = ErrorClass.FATAL

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"cannot order {left!r} and {right!r}; "
            "all ranked values must be comparable"
        )


def classify_error(error: Exception) -> ErrorClass:
    """Classify an error to decide whether the CLI may report it.

    Anything that is not a ``HardwareDBError`` is a bug and therefore
    fatal.
    """
    if isinstance(error, HardwareDBError):
        return error.error_class
    return ErrorClass.FATAL


def is_fatal(error: Exception) -> bool:
    """Return True if the error must not be handled."""
    return classify_error(error) is ErrorClass.FATAL
