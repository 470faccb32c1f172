"""CLI command: css-selector build -- assemble a selector from part tokens."""

from __future__ import annotations

import sys

import click

from css_selector.builder import SelectorBuilder
from css_selector.category import Category
from css_selector.config import SelectorConfig
from css_selector.errors import SelectorError
from css_selector.facade import combine

# Token kinds accepted on the command line.
_KINDS: dict[str, Category] = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}


def _split_token(token: str) -> tuple[Category, str]:
    kind, sep, value = token.partition("=")
    if not sep:
        raise click.BadParameter(
            f"{token!r} is neither KIND=VALUE nor a combinator", param_hint="TOKENS"
        )
    if kind not in _KINDS:
        raise click.BadParameter(
            f"unknown part kind {kind!r} (expected one of: {', '.join(_KINDS)})",
            param_hint="TOKENS",
        )
    return _KINDS[kind], value


def build_from_tokens(
    tokens: tuple[str, ...] | list[str], aliases: dict[str, str]
) -> SelectorBuilder:
    """Build a selector from CLI tokens, combining compounds left to right.

    Raises :class:`click.BadParameter` for malformed tokens and lets
    :class:`SelectorError` propagate for invalid part sequences.
    """
    compounds: list[SelectorBuilder] = []
    combinators: list[str] = []
    current: SelectorBuilder | None = None

    for token in tokens:
        if token in aliases:
            if current is None:
                raise click.BadParameter(
                    f"combinator {token!r} has no selector on its left",
                    param_hint="TOKENS",
                )
            compounds.append(current)
            combinators.append(aliases[token])
            current = None
            continue
        category, value = _split_token(token)
        if current is None:
            current = SelectorBuilder()
        current.add(category, value)

    if current is None:
        raise click.BadParameter(
            "selector must not end with a combinator", param_hint="TOKENS"
        )
    compounds.append(current)

    result = compounds[0]
    for combinator, right in zip(combinators, compounds[1:]):
        result = combine(result, combinator, right)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.pass_context
def build(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE tokens and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Combinators (>, +, ~, descendant) start a new compound selector.

    Example: css-selector build element=div id=main '>' element=p class=lead
    """
    config = ctx.find_object(SelectorConfig) or SelectorConfig()

    try:
        selector = build_from_tokens(tokens, config.combinator_aliases)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
