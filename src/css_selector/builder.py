"""SelectorBuilder: incremental, validated construction of CSS selectors.

A compound selector is made of parts in a fixed category order::

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class parts may repeat; element, id and
pseudo-element may appear once.  Compound selectors are joined into longer
chains with :meth:`SelectorBuilder.combine`.
"""

from __future__ import annotations

import logging

from css_selector.category import Category
from css_selector.errors import DuplicateSelectorPartError, SelectorOrderError

logger = logging.getLogger("css_selector")


class SelectorBuilder:
    """Accumulates selector parts and renders them as text.

    Every append method returns the builder itself so calls can be chained.
    A failed append raises and leaves the builder exactly as it was.
    """

    def __init__(self) -> None:
        self._ranks: list[int] = []
        self._categories: list[Category] = []
        self._seen_unique: set[Category] = set()
        self._text = ""

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, value)

    def add(self, category: Category, value: str) -> SelectorBuilder:
        """Append a part of an arbitrary *category*."""
        return self._append(category, value)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return self._text

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two built selectors with *combinator* into this builder.

        The combinator is rendered verbatim with one space on each side.  The
        operands' part history is not carried over, so the result accepts no
        further ordering checks against them.
        """
        self._text = f"{left.stringify()} {combinator} {right.stringify()}"
        self._ranks = []
        self._categories = []
        self._seen_unique = set()
        logger.debug("Combined selector: %r", self._text)
        return self

    @property
    def ranks(self) -> tuple[int, ...]:
        return tuple(self._ranks)

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories)

    # --- validation -----------------------------------------------------------

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        fmt = category.format
        if fmt.unique and category in self._seen_unique:
            logger.debug("Rejected duplicate %s part %r", category.value, value)
            raise DuplicateSelectorPartError(category)

        candidate = self._ranks + [fmt.rank]
        if candidate != sorted(candidate):
            previous = Category.from_rank(max(self._ranks))
            logger.debug(
                "Rejected %s part %r after %s", category.value, value, previous.value
            )
            raise SelectorOrderError(category, previous)

        self._ranks = candidate
        self._categories.append(category)
        if fmt.unique:
            self._seen_unique.add(category)
        self._text += fmt.render(str(value))
        logger.debug("Appended %s part %r", category.value, value)
        return self

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"
