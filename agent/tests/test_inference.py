from widgetspec.services.inference import FieldClass, classify, infer


def test_classify_booleans_are_not_numbers():
    assert classify(True) is FieldClass.boolean
    assert classify(3) is FieldClass.number
    assert classify(2.5) is FieldClass.number
    assert classify("a") is FieldClass.string
    assert classify(None) is FieldClass.other
    assert classify([1]) is FieldClass.other


def test_category_kinds_single_and_multi_series():
    assert infer("chart.bar", [{"month": "Jan", "sales": 10}]) == {"x": "month", "y": "sales"}
    assert infer("chart.line", [{"month": "Jan", "sales": 10, "cost": 4}]) == {"x": "month", "y": ["sales", "cost"]}
    assert infer("chart.area", [{"d": "2024-01-01", "v": 1}]) == {"x": "d", "y": "v"}


def test_proportion_kinds():
    data = [{"name": "A", "share": 40}, {"name": "B", "share": 60}]
    assert infer("chart.pie", data) == {"label": "name", "value": "share"}
    assert infer("chart.funnel", data) == {"label": "name", "value": "share"}


def test_scatter_prefers_category_then_numeric_pairs():
    assert infer("chart.scatter", [{"g": "a", "v": 1}]) == {"x": "g", "y": "v"}
    assert infer("chart.scatter", [{"h": 1, "w": 2, "a": 3}]) == {"x": "h", "y": ["w", "a"]}
    assert infer("chart.scatter", [{"h": 1}]) is None


def test_radar_and_heatmap():
    assert infer("chart.radar", [{"skill": "Speed", "score": 80}]) == {"axis": "skill", "value": "score"}
    assert infer("chart.heatmap", [{"day": "Mon", "slot": "AM", "n": 3}]) == {"x": "day", "y": "slot", "value": "n"}
    assert infer("chart.heatmap", [{"day": "Mon", "n": 3}]) is None


def test_booleans_do_not_count_as_values():
    assert infer("chart.bar", [{"name": "a", "flag": True}]) is None


def test_nothing_to_infer_returns_none():
    assert infer("chart.bar", None) is None
    assert infer("chart.bar", []) is None
    assert infer("chart.bar", [{}]) is None
    assert infer("chart.bar", [1, 2]) is None
    assert infer("chart.treemap", [{"name": "A", "value": 1}]) is None
    assert infer("metric", {"value": 1}) is None


def test_single_object_is_treated_as_one_record():
    assert infer("chart.pie", {"name": "A", "value": 1}) == {"label": "name", "value": "value"}


def test_table_columns_follow_key_order():
    data = [{"name": "Alice", "age": 30, "active": True}]
    assert infer("table", data) == {"columns": [{"field": "name"}, {"field": "age"}, {"field": "active"}]}


def test_list_primary_and_secondary():
    assert infer("list", [{"name": "Alice", "role": "Eng", "age": 3}]) == {"primary": "name", "secondary": "role"}
    assert infer("list", [{"name": "Alice", "age": 3}]) == {"primary": "name"}
    assert infer("list", [{"age": 3}]) is None


def test_inference_uses_first_record_only():
    data = [{"name": "A", "v": 1}, {"other": "B", "w": 2, "z": 3}]
    assert infer("chart.bar", data) == {"x": "name", "y": "v"}


def test_inference_is_deterministic():
    data = [{"q": "Q1", "a": 1, "b": 2, "c": 3}]
    assert infer("chart.bar", data) == infer("chart.bar", data)


def test_numeric_scatter_keeps_third_field_for_size():
    assert infer("chart.scatter", [{"x": 1, "y": 2, "size": 10}]) == {"x": "x", "y": ["y", "size"]}


def test_box_orders_well_known_stats():
    record = {"g": "A", "max": 9, "min": 1, "q1": 2, "median": 5, "q3": 7}
    assert infer("chart.box", [record]) == {"x": "g", "y": ["min", "q1", "median", "q3", "max"]}
    assert infer("chart.box", [{"g": "A", "lo": 1, "hi": 2}]) == {"x": "g", "y": ["lo", "hi"]}
