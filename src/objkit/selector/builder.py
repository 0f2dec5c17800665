"""Fluent builder for CSS selector strings.

A compound selector is assembled fragment by fragment:

    element#id.class[attr]:pseudo-class::pseudo-element

Element, id and pseudo-element may each appear once; class, attribute and
pseudo-class may repeat. Fragments must be added in that order. Compound
selectors are joined with the combinators ' ', '+', '~' and '>':

    builder = css_selector_builder
    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("span"),
    ).stringify()                                   # 'div#main + span'
"""

from __future__ import annotations

import logging
from typing import Protocol

from objkit.selector.errors import DuplicateSelectorPartError, SelectorOrderError
from objkit.selector.model import FragmentKind

__all__ = ["SelectorBuilder", "CssSelectorBuilder", "css_selector_builder"]

log = logging.getLogger(__name__)


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


class SelectorBuilder:
    """Accumulates selector fragments, validating their order as they arrive.

    Every fragment method mutates the builder and returns it, so calls
    chain. A builder that raised a SelectorError must not be reused.

    To start a new selector from a single fragment, use the
    ``css_selector_builder`` facade or the matching ``objkit.selector``
    module function (``element("div")``, ``id("main")``, ...).
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._kinds: list[FragmentKind] = []
        self._used_once: set[FragmentKind] = set()

    @property
    def kinds(self) -> tuple[FragmentKind, ...]:
        """Fragment kinds added to this builder, in insertion order."""
        return tuple(self._kinds)

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._insert(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._insert(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._insert(FragmentKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._insert(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._insert(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._insert(FragmentKind.PSEUDO_ELEMENT, value)

    def _insert(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        if kind.once_only and kind in self._used_once:
            raise DuplicateSelectorPartError(kind)
        for previous in self._kinds:
            if previous.rank > kind.rank:
                raise SelectorOrderError(kind, previous)

        self._text += kind.format(value)
        self._kinds.append(kind)
        if kind.once_only:
            self._used_once.add(kind)
        log.debug("Added %s fragment %r -> %r", kind.value, value, self._text)
        return self

    # --- combination / output -------------------------------------------------

    @classmethod
    def combine(
        cls, first: Stringifiable, combinator: str, second: Stringifiable
    ) -> SelectorBuilder:
        """Join two selectors with *combinator*, padded by single spaces.

        The result carries only the joined text; its fragment history
        starts empty.
        """
        text = f"{first.stringify()} {combinator} {second.stringify()}"
        log.debug("Combined selectors with %r -> %r", combinator, text)
        return cls(text)

    def stringify(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder({self._text!r})"


class CssSelectorBuilder:
    """Facade whose fragment methods each start a new SelectorBuilder."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, first: Stringifiable, combinator: str, second: Stringifiable
    ) -> SelectorBuilder:
        return SelectorBuilder.combine(first, combinator, second)


css_selector_builder = CssSelectorBuilder()
