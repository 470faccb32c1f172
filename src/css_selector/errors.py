"""Error types raised while building a selector."""

from __future__ import annotations

from css_selector.category import CATEGORY_ORDER, Category


class SelectorError(Exception):
    """Base error for an invalid selector part."""

    def __init__(self, message: str, *, category: Category, rule: str) -> None:
        super().__init__(message)
        self.category = category
        self.rule = rule


class DuplicateSelectorPartError(SelectorError):
    """Raised when element, id or pseudo-element occurs twice in one selector."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            f"{category.value}: Element, id and pseudo-element should not occur "
            "more then one time inside the selector",
            category=category,
            rule="duplicate",
        )


class SelectorOrderError(SelectorError):
    """Raised when a part would break the required category order."""

    def __init__(self, category: Category, previous: Category) -> None:
        super().__init__(
            f"{category.value} after {previous.value}: Selector parts should be "
            f"arranged in the following order: {CATEGORY_ORDER}",
            category=category,
            rule="order",
        )
        self.previous = previous
