"""Selector-part categories and their rendering table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class PartFormat:
    """How a single selector part is rendered and constrained.

    Attributes:
        rank: Position of the category in a compound selector (0-5).
        prefix: Text written before the value.
        suffix: Text written after the value.
        unique: Whether the category may appear at most once per selector.
    """

    rank: int
    prefix: str = ""
    suffix: str = ""
    unique: bool = False

    def render(self, value: str) -> str:
        return f"{self.prefix}{value}{self.suffix}"


class Category(Enum):
    """The six kinds of selector part, in compound-selector order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def format(self) -> PartFormat:
        return PART_FORMATS[self]

    @property
    def rank(self) -> int:
        return PART_FORMATS[self].rank

    @property
    def unique(self) -> bool:
        return PART_FORMATS[self].unique

    @classmethod
    def from_rank(cls, rank: int) -> Category:
        for category, fmt in PART_FORMATS.items():
            if fmt.rank == rank:
                return category
        raise ValueError(f"No selector category with rank {rank}")


PART_FORMATS: dict[Category, PartFormat] = {
    Category.ELEMENT: PartFormat(rank=0, unique=True),
    Category.ID: PartFormat(rank=1, prefix="#", unique=True),
    Category.CLASS: PartFormat(rank=2, prefix="."),
    Category.ATTRIBUTE: PartFormat(rank=3, prefix="[", suffix="]"),
    Category.PSEUDO_CLASS: PartFormat(rank=4, prefix=":"),
    Category.PSEUDO_ELEMENT: PartFormat(rank=5, prefix="::", unique=True),
}

# Human-readable order used in error messages.
CATEGORY_ORDER = ", ".join(c.value for c in sorted(Category, key=lambda c: c.rank))
