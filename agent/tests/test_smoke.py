from widgetspec.services import compile_chart, lookup, resolve, template, validate


def test_template_roundtrip():
    spec = validate(template("chart.line"))
    assert spec.valid
    resolved = resolve(template("chart.line"))
    assert resolved.config["series"][0]["type"] == "line"


def test_every_kind_has_a_renderable_template():
    for info in lookup():
        resolved = resolve(template(info.kind))
        assert resolved.valid, info.kind
        if info.kind.startswith("chart."):
            assert resolved.config, info.kind


def test_compile_empty_spec_ok():
    assert compile_chart({}) == {}
