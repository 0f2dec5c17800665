"""Selector builder error types."""

from __future__ import annotations

from objkit.errors import ObjkitError
from objkit.selector.model import FragmentKind

DUPLICATE_PART_MESSAGE = (
    "element, id, and pseudo-element must each occur at most once in a selector"
)
ORDER_MESSAGE = (
    "selector parts must be arranged in order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ObjkitError):
    """Base class for invalid selector construction."""

    def __init__(self, message: str, kind: FragmentKind):
        self.kind = kind
        super().__init__(message)


class DuplicateSelectorPartError(SelectorError):
    """Raised when element, id or pseudo-element is added a second time."""

    def __init__(self, kind: FragmentKind):
        super().__init__(DUPLICATE_PART_MESSAGE, kind)


class SelectorOrderError(SelectorError):
    """Raised when a fragment would follow a fragment that must come after it."""

    def __init__(self, kind: FragmentKind, previous: FragmentKind):
        self.previous = previous
        super().__init__(ORDER_MESSAGE, kind)
