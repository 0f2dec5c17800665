"""CLI command: objkit selector -- build a CSS selector from fragment tokens.

Tokens are ``kind=value`` fragments or combinators:

    objkit selector element=div id=main + element=span     # div#main + span
    objkit selector element=ul descendant element=li       # ul   li
"""

from __future__ import annotations

import sys

import click

from objkit.selector import COMBINATORS, SelectorBuilder, SelectorError

_FRAGMENT_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}

# "descendant" stands in for the single-space combinator.
_COMBINATOR_TOKENS = {token: token for token in COMBINATORS if token != " "}
_COMBINATOR_TOKENS["descendant"] = " "


def _apply_fragment(builder: SelectorBuilder, token: str) -> None:
    kind, sep, value = token.partition("=")
    method = _FRAGMENT_METHODS.get(kind)
    if not sep or method is None:
        raise click.BadParameter(
            f"expected KIND=VALUE with KIND one of {', '.join(_FRAGMENT_METHODS)}, "
            f"got {token!r}",
            param_hint="TOKENS",
        )
    getattr(builder, method)(value)


def build_selector(tokens: tuple[str, ...]) -> SelectorBuilder:
    """Turn CLI tokens into a built selector, folding combinators left to right."""
    compounds: list[SelectorBuilder] = [SelectorBuilder()]
    combinators: list[str] = []

    for token in tokens:
        if token in _COMBINATOR_TOKENS:
            if not compounds[-1].kinds:
                raise click.UsageError(f"combinator {token!r} must follow a selector")
            combinators.append(_COMBINATOR_TOKENS[token])
            compounds.append(SelectorBuilder())
        else:
            _apply_fragment(compounds[-1], token)

    if not compounds[-1].kinds:
        raise click.UsageError("selector must end with a fragment")

    result = compounds[0]
    for combinator, compound in zip(combinators, compounds[1:]):
        result = SelectorBuilder.combine(result, combinator, compound)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def selector(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from KIND=VALUE fragments and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    Combinators are +, ~, > and the word "descendant".
    """
    try:
        built = build_selector(tokens)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(built.stringify())
