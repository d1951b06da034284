"""Tests for selector JSON serialization."""

import json

import pytest

from cssbuilder import (
    DuplicateSelectorPartError,
    OrderViolationError,
    SerializationError,
    Stage,
    builder,
)
from cssbuilder.serializers import from_dict, from_json, load, save, to_dict, to_json


# ---------------------------------------------------------------------------
# to_dict / from_dict
# ---------------------------------------------------------------------------


class TestToDict:
    def test_empty(self):
        assert to_dict(builder) == {"stage": 0}

    def test_parts_are_rendered(self):
        sel = builder.element("a").id("x").class_("c1").class_("c2")
        assert to_dict(sel) == {
            "element": "a",
            "id": "#x",
            "class": ".c1.c2",
            "stage": 3,
        }

    def test_composite(self):
        sel = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert to_dict(sel) == {"composite": "a > b", "stage": 0}

    def test_is_json_compatible(self):
        sel = builder.element("a").attr('href$=".png"').pseudo_element("after")
        assert json.loads(json.dumps(to_dict(sel))) == to_dict(sel)


class TestFromDict:
    def test_restores_selector(self):
        sel = (
            builder.element("p")
            .id("intro")
            .class_("lead")
            .attr("lang=en")
            .pseudo_class("hover")
            .pseudo_element("first-line")
        )
        assert from_dict(to_dict(sel)) == sel

    def test_missing_keys_mean_absent(self):
        sel = from_dict({})
        assert sel == builder

    def test_restored_stage_enforces_order(self):
        sel = from_dict({"class": ".c", "stage": 3})
        assert sel.stage is Stage.CLASS
        with pytest.raises(OrderViolationError):
            sel.id("x")

    def test_restored_element_enforces_uniqueness(self):
        sel = from_dict({"element": "a", "stage": 1})
        with pytest.raises(DuplicateSelectorPartError):
            sel.element("b")

    def test_invalid_stage(self):
        with pytest.raises(SerializationError, match="Invalid stage"):
            from_dict({"stage": 9})

    def test_non_string_part(self):
        with pytest.raises(SerializationError, match="must be a string"):
            from_dict({"element": 5, "stage": 1})

    def test_not_an_object(self):
        with pytest.raises(SerializationError, match="Expected a JSON object"):
            from_dict(["a"])


# ---------------------------------------------------------------------------
# JSON text
# ---------------------------------------------------------------------------


class TestJson:
    def test_round_trip_preserves_rendering(self):
        sel = builder.combine(
            builder.element("div").id("main"), "+", builder.element("table").id("data")
        )
        assert from_json(to_json(sel)).stringify() == "div#main + table#data"

    def test_indent(self):
        text = to_json(builder.element("a"), indent=2)
        assert "\n" in text

    def test_invalid_json(self):
        with pytest.raises(SerializationError) as exc_info:
            from_json("{not json")
        assert isinstance(exc_info.value.cause, json.JSONDecodeError)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestFiles:
    def test_save_and_load(self, tmp_path):
        sel = builder.element("a").class_("nav")
        path = tmp_path / "nested" / "nav.json"
        save(sel, path)
        assert path.exists()
        assert load(path) == sel

    def test_load_invalid_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(SerializationError):
            load(path)

    def test_load_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"element": "\xff"}')
        with pytest.raises(SerializationError, match="not valid UTF-8") as exc_info:
            load(path)
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)


# ---------------------------------------------------------------------------
# Stage consistency
# ---------------------------------------------------------------------------


class TestStageConsistency:
    def test_stage_below_present_part_rejected(self):
        with pytest.raises(SerializationError, match="below the CLASS part"):
            from_dict({"class": ".c", "stage": 0})

    def test_missing_stage_with_parts_rejected(self):
        with pytest.raises(SerializationError):
            from_dict({"element": "a", "pseudo_element": "::after"})

    def test_stage_checked_against_highest_part(self):
        with pytest.raises(SerializationError, match="below the PSEUDO_CLASS part"):
            from_dict({"element": "a", "pseudo_class": ":hover", "stage": 3})

    def test_stage_above_parts_allowed(self):
        sel = from_dict({"element": "a", "stage": 4})
        assert sel.stage is Stage.ATTRIBUTE
        with pytest.raises(OrderViolationError):
            sel.class_("c")

    def test_composite_alone_needs_no_stage(self):
        assert from_dict({"composite": "a > b"}).stringify() == "a > b"
