"""css_selector -- build CSS selector strings with order and uniqueness checks."""

from css_selector.builder import SelectorBuilder
from css_selector.category import Category, PartFormat
from css_selector.errors import (
    DuplicateSelectorPartError,
    SelectorError,
    SelectorOrderError,
)
from css_selector.facade import (
    ADJACENT_SIBLING,
    CHILD,
    DESCENDANT,
    GENERAL_SIBLING,
    KNOWN_COMBINATORS,
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)

__version__ = "0.1.0"

__all__ = [
    # builder
    "SelectorBuilder",
    "Category",
    "PartFormat",
    # errors
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
    # facade
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
    # combinators
    "DESCENDANT",
    "CHILD",
    "ADJACENT_SIBLING",
    "GENERAL_SIBLING",
    "KNOWN_COMBINATORS",
]
