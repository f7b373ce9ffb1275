from impact_report.models.section import SectionSchema
from impact_report.models.sections import DEFAULTS, FLEX_A, HERO, SECTIONS
from impact_report.services.sanitizer import sanitize


def test_unknown_keys_are_dropped():
    result = sanitize(HERO, {"title": "Impact", "slug": "other", "_id": "x", "isAdmin": True})
    assert result == {"title": "Impact"}


def test_output_keys_are_subset_of_allowed_keys():
    payload = {
        "title": "t",
        "header": {"title": "h"},
        "headline": "flat",
        "colorSwatch": ["#fff"],
        "regions": [],
        "nonsense": 1,
        "updatedAt": "2020-01-01",
    }
    for schema in SECTIONS.values():
        assert set(sanitize(schema, payload)) <= schema.allowed_keys


def test_string_list_keeps_only_strings():
    result = sanitize(DEFAULTS, {"colorSwatch": ["#111", 3, None, "#222", {"c": 1}]})
    assert result == {"colorSwatch": ["#111", "#222"]}


def test_string_list_non_list_value_is_passed_through():
    assert sanitize(DEFAULTS, {"colorSwatch": None}) == {"colorSwatch": None}


def test_other_values_are_not_type_checked():
    # Only string lists are narrowed; mistyped scalars are stored as sent.
    assert sanitize(HERO, {"title": 42}) == {"title": 42}


def test_legacy_flat_fields_are_accepted():
    assert sanitize(FLEX_A, {"headline": "Old Title"}) == {"headline": "Old Title"}


def test_empty_input_returns_empty_mapping():
    assert sanitize(FLEX_A, {}) == {}


def test_schema_without_fields_returns_empty_mapping():
    empty = SectionSchema(name="empty", collection="empty", label="Empty", field_kinds={})
    assert sanitize(empty, {"title": "x"}) == {}
