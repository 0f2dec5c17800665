from objkit.selector.builder import CssSelectorBuilder, SelectorBuilder, css_selector_builder
from objkit.selector.errors import (
    DuplicateSelectorPartError,
    SelectorError,
    SelectorOrderError,
)
from objkit.selector.model import COMBINATORS, FragmentKind

# Module-level entry points, each starting a new builder.
element = css_selector_builder.element
id = css_selector_builder.id  # noqa: A001
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine

__all__ = [
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
    "FragmentKind",
    "COMBINATORS",
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]
