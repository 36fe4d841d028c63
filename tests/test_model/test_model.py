"""Tests for the Rectangle value object and JSON helpers."""

import dataclasses
import json
from dataclasses import dataclass

import pytest

from cssbuilder.model import Rectangle, from_json, to_json


@dataclass
class Circle:
    radius: float

    def diameter(self) -> float:
        return self.radius * 2


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area == 200

    def test_zero_area(self):
        assert Rectangle(0, 5).area == 0

    def test_is_frozen(self):
        r = Rectangle(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.width = 3  # type: ignore[misc]


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list_is_compact(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_key_order(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_nested_dataclass(self):
        assert to_json({"shapes": [Circle(1)]}) == '{"shapes":[{"radius":1}]}'

    def test_unserializable_raises(self):
        with pytest.raises(TypeError, match="not JSON serializable"):
            to_json(object())

    def test_dataclass_type_is_not_serialized(self):
        with pytest.raises(TypeError):
            to_json(Rectangle)


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_restores_instance(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.diameter() == 20

    def test_frozen_dataclass(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.area == 200

    def test_does_not_call_init(self):
        class Strict:
            def __init__(self):
                raise AssertionError("constructor must not run")

        obj = from_json(Strict, '{"name":"x"}')
        assert obj.name == "x"

    def test_round_trip(self):
        r = Rectangle(3, 4)
        assert from_json(Rectangle, to_json(r)) == r

    def test_non_object_raises(self):
        with pytest.raises(TypeError, match="Expected a JSON object"):
            from_json(Circle, "[1,2,3]")

    def test_malformed_json_raises(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Circle, "{radius")
