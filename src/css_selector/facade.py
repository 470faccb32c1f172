"""Stateless entry points: every call starts a brand-new SelectorBuilder."""

from __future__ import annotations

from types import SimpleNamespace

from css_selector.builder import SelectorBuilder

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
    "DESCENDANT",
    "CHILD",
    "ADJACENT_SIBLING",
    "GENERAL_SIBLING",
    "KNOWN_COMBINATORS",
]

DESCENDANT = " "
CHILD = ">"
ADJACENT_SIBLING = "+"
GENERAL_SIBLING = "~"

KNOWN_COMBINATORS = frozenset({DESCENDANT, CHILD, ADJACENT_SIBLING, GENERAL_SIBLING})


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().pseudo_element(value)


def combine(
    left: SelectorBuilder, combinator: str, right: SelectorBuilder
) -> SelectorBuilder:
    return SelectorBuilder().combine(left, combinator, right)


# Namespace with the same callables; ``class`` is only reachable via getattr.
css_selector_builder = SimpleNamespace(
    element=element,
    id=id,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    combine=combine,
    **{"class": class_},
)
