"""Facade for starting selector chains.

    from cssbuilder.selector import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from cssbuilder.selector.model import SelectorBuilder

__all__ = [
    "css_selector_builder",
    "element",
    "id_",
    "class_",
    "attr",
    "attribute",
    "pseudo_class",
    "pseudo_element",
    "combine",
]

# The empty chain: every appender on it starts a new selector.
css_selector_builder = SelectorBuilder()


def element(value: str) -> SelectorBuilder:
    return css_selector_builder.element(value)


def id_(value: str) -> SelectorBuilder:
    return css_selector_builder.id(value)


def class_(value: str) -> SelectorBuilder:
    return css_selector_builder.class_(value)


def attr(value: str) -> SelectorBuilder:
    return css_selector_builder.attr(value)


attribute = attr


def pseudo_class(value: str) -> SelectorBuilder:
    return css_selector_builder.pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return css_selector_builder.pseudo_element(value)


def combine(
    left: SelectorBuilder, combinator: str, right: SelectorBuilder
) -> SelectorBuilder:
    return SelectorBuilder.combine(left, combinator, right)
