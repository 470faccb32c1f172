from __future__ import annotations

from dataclasses import dataclass, field

from css_selector.facade import ADJACENT_SIBLING, CHILD, DESCENDANT, GENERAL_SIBLING


def _default_combinator_aliases() -> dict[str, str]:
    return {
        "descendant": DESCENDANT,
        CHILD: CHILD,
        ADJACENT_SIBLING: ADJACENT_SIBLING,
        GENERAL_SIBLING: GENERAL_SIBLING,
    }


@dataclass(frozen=True)
class SelectorConfig:
    log_level: str = "WARNING"
    # CLI token -> combinator text rendered between compound selectors
    combinator_aliases: dict[str, str] = field(
        default_factory=_default_combinator_aliases
    )
