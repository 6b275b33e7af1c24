from widgetspec.services.catalog import TEMPLATES
from widgetspec.services.surface import PropInfo, spec_surface, type_label


def test_type_labels():
    assert type_label(None) == "null"
    assert type_label([]) == "array"
    assert type_label([{"a": 1}]) == "object[]"
    assert type_label([1, 2]) == "number[]"
    assert type_label(["a"]) == "string[]"
    assert type_label("a") == "string"
    assert type_label(2.5) == "number"
    assert type_label(False) == "boolean"
    assert type_label({"a": 1}) == "object"


def test_chart_surface():
    specs = [
        TEMPLATES["chart.bar"],
        {
            "kind": "chart.bar",
            "data": [{"category": "A", "value": 1, "tags": ["x"]}],
            "options": {"stack": True},
        },
    ]
    surface = spec_surface(specs, "chart.bar")
    assert surface.spec_keys == ["data", "mapping", "options"]
    assert [(p.key, p.type) for p in surface.data_fields] == [
        ("category", "string"),
        ("value", "number"),
        ("tags", "string[]"),
    ]
    assert surface.data_fields[1].desc == "The primary value to display"
    assert surface.data_fields[0].desc is None
    assert [(p.key, p.type) for p in surface.mapping_keys] == [("x", "string"), ("y", "string")]
    assert surface.option_keys == [PropInfo("stack", "boolean", "Stack series (bar/line/area)")]
    assert surface.events == ("select",)


def test_form_surface():
    surface = spec_surface([TEMPLATES["form"], TEMPLATES["confirm"]], "form")
    keys = [p.key for p in surface.field_props]
    assert keys == ["field", "label", "type", "required"]
    assert surface.field_types == ["text", "email"]
    assert surface.action_styles == ["primary", "danger"]
    assert surface.events == ("submit", "change", "action")


def test_select_options_are_reported_as_string_list():
    spec = {"kind": "form", "fields": [{"field": "c", "type": "select", "options": [{"label": "A", "value": "a"}]}]}
    props = {p.key: p.type for p in spec_surface([spec]).field_props}
    assert props["options"] == "string[]"


def test_list_mapping_is_string_list_and_object_data():
    surface = spec_surface([{"kind": "metric", "data": {"value": 1}, "mapping": {"y": ["a", "b"]}}])
    assert surface.mapping_keys[0].type == "string[]"
    assert surface.data_fields == [PropInfo("value", "number", "The primary value to display")]
    assert surface.events == ()


def test_non_dict_entries_are_skipped():
    surface = spec_surface([None, "x", {"kind": "divider", "fields": "oops", "actions": 3}])
    assert surface.spec_keys == ["fields", "actions"]
    assert surface.field_props == []
