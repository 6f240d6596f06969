"""Normalized display names."""

from __future__ import annotations

from dataclasses import dataclass

from hardwaredb.constants import NAME_DECORATIONS


@dataclass(frozen=True)
class NormalizedName:
    """A product name with trademark marks stripped.

    "AMD Ryzen™ 9 5950X" and "AMD Ryzen 9 5950X" are the same name, so
    listings that drop the marks still resolve to their catalog entry.
    Build through ``NormalizedName.of``; hashing and equality use the
    normalized text.
    """

    text: str

    @classmethod
    def of(cls, raw: str) -> NormalizedName:
        return cls(normalize_name(raw))

    def __str__(self) -> str:
        return self.text


def normalize_name(raw: str) -> str:
    return "".join(c for c in raw if c not in NAME_DECORATIONS)
