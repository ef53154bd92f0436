from cssbuilder.selector.model import FragmentKind, SelectorBuilder
from cssbuilder.selector.builder import (
    attr,
    attribute,
    class_,
    combine,
    css_selector_builder,
    element,
    id_,
    pseudo_class,
    pseudo_element,
)
from cssbuilder.selector.chain import build_from_steps, parse_step

__all__ = [
    "FragmentKind",
    "SelectorBuilder",
    "css_selector_builder",
    "element",
    "id_",
    "class_",
    "attr",
    "attribute",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "build_from_steps",
    "parse_step",
]
