"""Error hierarchy for cssbuilder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.model import FragmentKind


class CssBuilderError(Exception):
    """Base error for all cssbuilder errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Selector errors
# ---------------------------------------------------------------------------


class SelectorError(CssBuilderError):
    """A fragment could not be appended to a selector chain."""

    default_message = "Invalid selector fragment"

    def __init__(
        self,
        message: str | None = None,
        *,
        kind: FragmentKind | None = None,
        previous: FragmentKind | None = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.kind = kind
        self.previous = previous


class DuplicateFragmentError(SelectorError):
    """Element, id or pseudo-element appended twice in one compound selector."""

    default_message = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )


class OutOfOrderError(SelectorError):
    """Fragment appended after a fragment that must come later."""

    default_message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )


# ---------------------------------------------------------------------------
# Other errors
# ---------------------------------------------------------------------------


class StepSyntaxError(CssBuilderError):
    """A build step is not of the form ``kind=value`` or a combinator."""

    def __init__(self, message: str, *, step: str | None = None) -> None:
        super().__init__(message)
        self.step = step


class SerializationError(CssBuilderError):
    """A value could not be converted to or from JSON."""
