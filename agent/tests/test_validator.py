from widgetspec.services.catalog import CATALOG, EXAMPLES, TEMPLATES
from widgetspec.services.validator import is_widget_spec, validate


def _nested_compose(levels):
    doc = {"kind": "metric", "data": {"value": 1}}
    for _ in range(levels):
        doc = {"kind": "compose", "children": [doc]}
    return doc


def test_valid_chart_spec_has_no_messages():
    result = validate(TEMPLATES["chart.bar"])
    assert result.valid
    assert result.errors == []
    assert result.warnings == []


def test_non_object_documents_are_rejected():
    for doc in (None, [], "chart.bar", 3):
        result = validate(doc)
        assert not result.valid
        assert result.errors == ["Spec must be a non-null object"]


def test_kind_is_required():
    for doc in ({"data": {"value": 1}}, {"kind": ""}, {"kind": 5}):
        result = validate(doc)
        assert result.errors == ['Required field "kind" must be a non-empty string']


def test_type_literal_must_match_when_present():
    assert validate({"kind": "metric", "type": "widget-spec", "data": {"value": 1}}).valid
    result = validate({"kind": "metric", "type": "chart", "data": {"value": 1}})
    assert not result.valid
    assert '"type" must be "widget-spec" if specified' in result.errors


def test_fields_and_formdown_are_exclusive():
    result = validate({"kind": "form", "fields": [{"field": "name"}], "formdown": "@name: []"})
    assert '"fields" and "formdown" are mutually exclusive' in result.errors


def test_unknown_kind_is_a_warning_with_hint():
    result = validate({"kind": "chart.barr"})
    assert result.valid
    assert result.warnings == ['Unknown kind "chart.barr". Did you mean "chart.bar"?']


def test_compose_requires_children():
    for doc in ({"kind": "compose"}, {"kind": "compose", "children": []}):
        result = validate(doc)
        assert result.errors == ['"compose" requires a non-empty "children" array']


def test_compose_child_errors_are_prefixed():
    doc = {"kind": "compose", "children": [{"kind": "metric", "data": {"value": 1}}, {"data": {}}]}
    result = validate(doc)
    assert result.errors == ['children[1]: Required field "kind" must be a non-empty string']


def test_compose_child_warnings_are_prefixed():
    doc = {
        "kind": "compose",
        "children": [{"kind": "chart.bar", "data": [{"c": "A", "v": 1}], "mapping": {"x": "c", "y": "missing"}}],
    }
    result = validate(doc)
    assert result.valid
    assert result.warnings == ['children[0]: mapping.y references "missing" which is not found in data keys [c, v]']


def test_compose_layout_enum():
    doc = {"kind": "compose", "layout": "carousel", "children": [{"kind": "divider"}]}
    assert '"layout" must be one of: stack, row, grid' in validate(doc).errors
    doc["layout"] = "row"
    assert validate(doc).valid


def test_nesting_depth_limit():
    assert validate(_nested_compose(2), max_depth=2).valid
    result = validate(_nested_compose(3), max_depth=2)
    assert not result.valid
    assert any("nesting depth exceeds the maximum of 2" in msg for msg in result.errors)


def test_deep_nesting_is_bounded_by_default_limit():
    result = validate(_nested_compose(50))
    assert not result.valid
    assert len(result.errors) == 1


def test_data_shape_is_enforced():
    result = validate({"kind": "chart.bar", "data": {"a": 1}})
    assert result.errors == ['"chart.bar" expects "data" to be an array, got object']

    result = validate({"kind": "metric", "data": [1, 2]})
    assert result.errors == ['"metric" expects "data" to be an object, got array']


def test_shape_uses_family_prefix_not_bare_names():
    # "bar" is not a chart family member, so no array rule applies
    result = validate({"kind": "bar", "data": {"a": 1}})
    assert result.valid
    assert len(result.warnings) == 1

    result = validate({"kind": "chart.custom", "data": {"a": 1}})
    assert not result.valid


def test_missing_data_skips_shape_check():
    assert validate({"kind": "chart.bar"}).valid


def test_mapping_reference_warning():
    doc = {
        "kind": "chart.bar",
        "data": [{"category": "A", "value": 1}],
        "mapping": {"x": "category", "y": "revenue"},
    }
    result = validate(doc)
    assert result.valid
    assert result.warnings == ['mapping.y references "revenue" which is not found in data keys [category, value]']


def test_mapping_reference_lists_and_column_objects():
    doc = {
        "kind": "table",
        "data": [{"name": "Alice"}],
        "mapping": {"columns": [{"field": "name"}, {"field": "age"}]},
    }
    result = validate(doc)
    assert result.warnings == ['mapping.columns references "age" which is not found in data keys [name]']


def test_field_definitions():
    result = validate({"kind": "form", "fields": [{"label": "Name"}]})
    assert result.errors == ['fields[0] must have a "field" string property']

    result = validate({"kind": "form", "fields": [{"field": "c", "type": "colour"}]})
    assert result.valid
    assert result.warnings == ['fields[0].type "colour" is not a recognized field type']


def test_action_definitions():
    result = validate({"kind": "actions", "actions": [{"label": "Go"}, {"action": "go"}]})
    assert result.errors == ['actions[1] must have a "label" string property']


def test_multiple_errors_are_all_reported():
    result = validate({"kind": "chart.bar", "type": "x", "data": {}, "fields": [], "formdown": ""})
    assert len(result.errors) == 3


def test_is_widget_spec():
    assert is_widget_spec({"kind": "divider"})
    assert not is_widget_spec({"kind": ""})
    assert not is_widget_spec(None)


def test_every_template_is_clean():
    for kind, spec in TEMPLATES.items():
        result = validate(spec)
        assert result.valid, (kind, result.errors)
        assert result.warnings == [], (kind, result.warnings)


def test_every_example_is_valid():
    for kind, examples in EXAMPLES.items():
        for example in examples:
            result = validate(example.spec)
            assert result.valid, (kind, example.label, result.errors)


def test_result_serializes():
    assert validate({"kind": "divider"}).to_dict() == {"valid": True, "errors": [], "warnings": []}


def test_minimal_compose_and_category_warning():
    assert validate({"kind": "compose", "children": [{"kind": "metric"}]}).valid

    result = validate({"kind": "chart.bar", "data": [{"name": "A", "value": 1}], "mapping": {"x": "category", "y": "value"}})
    assert result.valid
    assert len(result.warnings) == 1
    assert '"category"' in result.warnings[0]


def test_non_string_data_keys_in_reference_warning():
    result = validate({"kind": "metric", "data": {1: "a"}, "mapping": {"x": "b"}})
    assert result.valid
    assert result.warnings == ['mapping.x references "b" which is not found in data keys [1]']


def test_every_catalog_kind_enforces_its_data_shape():
    for info in CATALOG:
        if info.data_shape == "array":
            assert not validate({"kind": info.kind, "data": {"a": 1}}).valid, info.kind
        elif info.data_shape == "object":
            assert not validate({"kind": info.kind, "data": [{"a": 1}]}).valid, info.kind
