from __future__ import annotations

from cssbuilder.errors import (
    CssBuilderError,
    DuplicateFragmentError,
    OutOfOrderError,
    SelectorError,
    SerializationError,
    StepSyntaxError,
)
from cssbuilder.selector import FragmentKind


class TestErrorHierarchy:
    def test_selector_errors(self) -> None:
        assert issubclass(DuplicateFragmentError, SelectorError)
        assert issubclass(OutOfOrderError, SelectorError)
        assert issubclass(SelectorError, CssBuilderError)

    def test_other_errors(self) -> None:
        assert issubclass(StepSyntaxError, CssBuilderError)
        assert issubclass(SerializationError, CssBuilderError)

    def test_default_messages_differ(self) -> None:
        assert str(DuplicateFragmentError()) != str(OutOfOrderError())
        assert "pseudo-element" in str(DuplicateFragmentError())
        assert "element, id, class" in str(OutOfOrderError())

    def test_attributes(self) -> None:
        err = OutOfOrderError(kind=FragmentKind.ID, previous=FragmentKind.CLASS)
        assert err.kind is FragmentKind.ID
        assert err.previous is FragmentKind.CLASS

    def test_custom_message(self) -> None:
        assert str(OutOfOrderError("nope")) == "nope"

    def test_cause(self) -> None:
        inner = ValueError("x")
        err = SerializationError("wrapped", cause=inner)
        assert err.cause is inner
