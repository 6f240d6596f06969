"""Uncertain values: optional facts that carry their provenance.

A catalog fact is in exactly one of four states:

- ``Present(item)``: known.
- ``PresentWithDoubt(item, note)``: known, but the source is shaky;
  ``note`` says why. Every read logs a warning with the note.
- ``NotApplicable``: the fact does not exist for this record.
- ``Missing``: the fact exists but nobody has entered it yet.

All states are frozen. Bare values enter through ``lift()``; the
doubted and missing states are always spelled out explicitly.

Reading a state without a usable value raises by default. A
``ReadPolicy`` with ``abort_on_unusable=True`` turns those failures
into an immediate abort instead, so a debugger or core dump lands on
the read site. The policy is passed in by the caller; the read path
never looks at the process environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NoReturn

from hardwaredb.errors import (
    MissingValueError,
    NotApplicableError,
    UnusableValueError,
)

if TYPE_CHECKING:
    from hardwaredb.config import Settings

logger = logging.getLogger(__name__)


def _abort(message: str) -> NoReturn:
    os.abort()


@dataclass(frozen=True)
class ReadPolicy:
    """How reads of unusable values fail."""

    abort_on_unusable: bool = False
    abort: Callable[[str], Any] = field(default=_abort, repr=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> ReadPolicy:
        return cls(abort_on_unusable=settings.debug_value)

    def fail(self, error: UnusableValueError) -> NoReturn:
        """Raise ``error``, or abort first when the policy says so."""
        if self.abort_on_unusable:
            logger.critical(
                "Aborting on unusable value: %s", error, stack_info=True
            )
            self.abort(str(error))
        raise error


DEFAULT_READ_POLICY = ReadPolicy()


@dataclass(frozen=True)
class Present[T]:
    item: T

    @property
    def is_usable(self) -> bool:
        return True

    def value(self, policy: ReadPolicy = DEFAULT_READ_POLICY) -> T:
        return self.item


@dataclass(frozen=True)
class PresentWithDoubt[T]:
    item: T
    note: str

    @property
    def is_usable(self) -> bool:
        return True

    def value(self, policy: ReadPolicy = DEFAULT_READ_POLICY) -> T:
        logger.warning("There are doubts about a value: %s", self.note)
        return self.item


@dataclass(frozen=True)
class NotApplicable:
    @property
    def is_usable(self) -> bool:
        return False

    def value(self, policy: ReadPolicy = DEFAULT_READ_POLICY) -> NoReturn:
        policy.fail(NotApplicableError())


@dataclass(frozen=True)
class Missing:
    """Missing information, not a feature the article lacks."""

    @property
    def is_usable(self) -> bool:
        return False

    def value(self, policy: ReadPolicy = DEFAULT_READ_POLICY) -> NoReturn:
        policy.fail(MissingValueError())


type UncertainValue[T] = Present[T] | PresentWithDoubt[T] | NotApplicable | Missing

_STATES = (Present, PresentWithDoubt, NotApplicable, Missing)

MISSING = Missing()
NOT_APPLICABLE = NotApplicable()


def lift[T](value: T | UncertainValue[T]) -> UncertainValue[T]:
    """Wrap a bare value as ``Present``; uncertain values pass through."""
    if isinstance(value, _STATES):
        return value
    return Present(value)
