"""Selector model: FragmentKind and the immutable SelectorBuilder chain.

A compound selector is written in a fixed order:

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class fragments may repeat. Element, id and
pseudo-element may appear at most once. Each append returns a new builder,
so a partially built chain can be reused as the base of several selectors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from cssbuilder.errors import DuplicateFragmentError, OutOfOrderError

__all__ = ["FragmentKind", "SelectorBuilder"]

logger = logging.getLogger("cssbuilder.selector")


class FragmentKind(StrEnum):
    """Category of the most recently appended selector fragment."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINED = "combined"

    @property
    def rank(self) -> int:
        """Position in the compound selector order; COMBINED sorts last."""
        return _ORDER.index(self) if self in _ORDER else len(_ORDER)

    @property
    def unique(self) -> bool:
        return self in _UNIQUE

    def render(self, value: str) -> str:
        """Return *value* wrapped in this fragment's CSS punctuation."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_ORDER = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

_UNIQUE = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class SelectorBuilder:
    """A partially or fully built selector.

    Attributes:
        text: The selector rendered so far; empty for a fresh chain.
        last_kind: Category of the last appended fragment, or None when
            nothing has been appended yet.
    """

    text: str = ""
    last_kind: FragmentKind | None = None

    # --- fragment appenders -------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, value)

    # CSS-facing name; ``class`` is a keyword, so only getattr reaches it.
    vars()["class"] = class_

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.ATTRIBUTE, value)

    attribute = attr

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    # --- composition --------------------------------------------------------

    @staticmethod
    def combine(
        left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors as ``"<left> <combinator> <right>"``.

        Neither operand is modified. The result is terminal: it can be
        stringified or combined again, but not appended to.
        """
        text = f"{left.stringify()} {combinator} {right.stringify()}"
        logger.debug("combine %r with %r -> %r", left.text, right.text, text)
        return SelectorBuilder(text=text, last_kind=FragmentKind.COMBINED)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    # --- internals ----------------------------------------------------------

    def _check(self, kind: FragmentKind) -> None:
        previous = self.last_kind
        if previous is None:
            return
        if previous is FragmentKind.COMBINED:
            raise OutOfOrderError(
                "Cannot append fragments to a combined selector",
                kind=kind,
                previous=previous,
            )
        if previous is kind and kind.unique:
            raise DuplicateFragmentError(kind=kind, previous=previous)
        if previous.rank > kind.rank:
            raise OutOfOrderError(kind=kind, previous=previous)

    def _append(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        self._check(kind)
        text = self.text + kind.render(value)
        logger.debug("append %s %r -> %r", kind, value, text)
        return SelectorBuilder(text=text, last_kind=kind)
