"""Selector model: fragment kinds, their ordering and text formats."""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """Kinds of simple-selector fragments, declared in the order they must appear.

    A compound selector reads ``element#id.class[attr]:pseudo-class::pseudo-element``;
    class, attribute and pseudo-class fragments may repeat.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rank(self) -> int:
        """Position of this kind in the required fragment order (0 = first)."""
        return _RANKS[self]

    @property
    def once_only(self) -> bool:
        """True if the kind may occur at most once in a compound selector."""
        return self in ONCE_ONLY_KINDS

    def format(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[FragmentKind, int] = {kind: i for i, kind in enumerate(FragmentKind)}

_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}

ONCE_ONLY_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

# CSS combinators; a single space is the descendant combinator.
COMBINATORS = (" ", "+", "~", ">")
