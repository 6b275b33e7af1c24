from copy import deepcopy

from widgetspec.services.normalize import normalize, normalize_mapping


def test_normalize_mapping_makes_y_a_list():
    assert normalize_mapping({"x": "a", "y": "b"}) == {"x": "a", "y": ["b"]}
    assert normalize_mapping({"x": "a"}) == {"x": "a"}
    assert normalize_mapping(None) == {}

    mapping = {"y": ["a", "b"]}
    result = normalize_mapping(mapping)
    result["y"].append("c")
    assert mapping == {"y": ["a", "b"]}


def test_lifts_legacy_mapping_fields():
    spec = {"kind": "form", "mapping": {"fields": [{"field": "name"}]}}
    before = deepcopy(spec)
    result = normalize(spec)
    assert result == {"kind": "form", "fields": [{"field": "name"}]}
    assert spec == before


def test_keeps_remaining_mapping_keys():
    spec = {"kind": "form", "mapping": {"fields": [{"field": "name"}], "x": "a"}}
    assert normalize(spec) == {"kind": "form", "fields": [{"field": "name"}], "mapping": {"x": "a"}}


def test_existing_fields_or_formdown_win():
    spec = {"kind": "form", "fields": [{"field": "a"}], "mapping": {"fields": [{"field": "b"}]}}
    assert normalize(spec) == spec

    spec = {"kind": "form", "formdown": "@a: []", "mapping": {"fields": [{"field": "b"}]}}
    assert normalize(spec) == spec


def test_normalize_mapping_drops_unusable_y():
    assert normalize_mapping({"y": 5}) == {}
    assert normalize_mapping({"x": "a", "y": {"a": 1}}) == {"x": "a"}
    assert normalize_mapping({"y": ("a", "b")}) == {"y": ["a", "b"]}
