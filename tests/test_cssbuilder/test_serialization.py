"""Tests for the JSON helpers."""
from __future__ import annotations

from dataclasses import dataclass

import pytest

from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import CssBuilderError, SerializationError
from cssbuilder.serialization import from_json, get_json
from cssbuilder.shapes import Rectangle


@dataclass
class Circle:
    radius: float


# ---------------------------------------------------------------------------
# get_json
# ---------------------------------------------------------------------------


class TestGetJson:
    def test_list(self) -> None:
        assert get_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_order(self) -> None:
        assert get_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self) -> None:
        assert get_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_sort_keys_config(self) -> None:
        cfg = CssBuilderConfig(json_sort_keys=True)
        assert get_json({"width": 10, "height": 20}, config=cfg) == (
            '{"height":20,"width":10}'
        )

    def test_separators_config(self) -> None:
        cfg = CssBuilderConfig(json_separators=(", ", ": "))
        assert get_json([1, 2], config=cfg) == "[1, 2]"

    def test_unserializable(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            get_json(object())
        assert isinstance(exc_info.value.cause, TypeError)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_rectangle(self) -> None:
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.get_area() == 200

    def test_circle(self) -> None:
        c = from_json(Circle, '{"radius":10}')
        assert c == Circle(radius=10)

    def test_values_in_document_order(self) -> None:
        r = from_json(Rectangle, '{"height":3,"width":4}')
        assert r.width == 3
        assert r.height == 4

    def test_round_trip_through_get_json(self) -> None:
        original = Rectangle(2, 5)
        assert from_json(Rectangle, get_json(original)) == original

    def test_invalid_json(self) -> None:
        with pytest.raises(SerializationError, match="Invalid JSON"):
            from_json(Rectangle, "{width")

    def test_not_an_object(self) -> None:
        with pytest.raises(SerializationError, match="Expected a JSON object"):
            from_json(Rectangle, "[1, 2]")

    def test_arity_mismatch(self) -> None:
        with pytest.raises(SerializationError, match="Cannot construct Rectangle"):
            from_json(Rectangle, '{"width":1}')

    def test_non_numeric_values(self) -> None:
        with pytest.raises(SerializationError, match="width must be a number"):
            from_json(Rectangle, '{"width":"a","height":2}')

    def test_is_base_error(self) -> None:
        with pytest.raises(CssBuilderError):
            from_json(Circle, "null")
