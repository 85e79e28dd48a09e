"""CLI command: selectorkit build -- assemble a selector from tokens.

Tokens are ``kind:value`` pairs or bare combinators::

    selectorkit build element:div id:main + element:table ">" element:tr
    # div#main + table > tr
"""

from __future__ import annotations

import sys

import click

from selectorkit.builder import SelectorBuilder, css_selector_builder
from selectorkit.errors import SelectorError

COMBINATORS = frozenset({"+", "~", ">", " "})

_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


class TokenError(ValueError):
    """Raised when a build token is not ``kind:value`` or a combinator."""


def _compound(tokens: list[str]) -> SelectorBuilder:
    """Build one compound selector from ``kind:value`` tokens."""
    if not tokens:
        raise TokenError("Combinator without a selector on both sides")
    selector = css_selector_builder
    for token in tokens:
        kind, sep, value = token.partition(":")
        if not sep or kind not in _METHODS:
            raise TokenError(f"Invalid token: {token!r}")
        selector = getattr(selector, _METHODS[kind])(value)
    return selector


def build_selector(tokens: list[str]) -> SelectorBuilder:
    """Split *tokens* on combinators and fold them right to left."""
    compounds: list[list[str]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        if token in COMBINATORS:
            combinators.append(token)
            compounds.append([])
        else:
            compounds[-1].append(token)

    result = _compound(compounds[-1])
    for combinator, tokens_ in zip(reversed(combinators), reversed(compounds[:-1])):
        result = css_selector_builder.combine(_compound(tokens_), combinator, result)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def build(tokens: tuple[str, ...]) -> None:
    """Build a selector from TOKENS and print it.

    Each token is KIND:VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator (+, ~, >, or a single space).
    Exits with code 1 if the fragments break the ordering rules.
    """
    try:
        selector = build_selector(list(tokens))
    except (SelectorError, TokenError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
