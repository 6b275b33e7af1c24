"""
Chart configuration compiler.

Lowers a resolved chart spec into the option tree the charting backend
(ECharts) expects: axes, named series, legend / visual-map / tooltip blocks.

The compiler never raises for malformed content. Missing data, non-array
data, unknown chart kinds, or data that cannot fill the required roles all
yield ``{}``, which callers treat as "nothing to render".
"""

from __future__ import annotations

import json
import logging
import math
from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .inference import BOX_STATS, FieldClass, fields_of, infer
from .normalize import normalize_mapping

logger = logging.getLogger(__name__)

Config = Dict[str, Any]
Row = Dict[str, Any]

STACK_ID = "total"
WATERFALL_STACK_ID = "waterfall"
DEFAULT_STEP = "end"
HEATMAP_COLORS = ("#313695", "#4575b4", "#74add1", "#abd9e9", "#fee090", "#fdae61", "#f46d43", "#d73027")


@dataclass(frozen=True)
class SqrtSymbolSize:
    """Bubble radius from the third point value on a square-root scale, clamped."""

    factor: float = 4.0
    minimum: float = 4.0
    maximum: float = 60.0

    def __call__(self, point: List[Any]) -> float:
        raw = point[2] if len(point) > 2 and isinstance(point[2], (int, float)) else 0
        return max(self.minimum, min(self.maximum, math.sqrt(max(raw, 0)) * self.factor))

    def to_js(self) -> str:
        return (
            "function (val) { var raw = Math.max(val[2] || 0, 0); "
            f"return Math.max({self.minimum:g}, Math.min({self.maximum:g}, Math.sqrt(raw) * {self.factor:g})); }}"
        )


@dataclass(frozen=True)
class HeatmapTooltip:
    x_categories: Tuple[str, ...]
    y_categories: Tuple[str, ...]

    def __call__(self, params: Dict[str, Any]) -> str:
        point = params.get("data")
        if not point:
            return ""
        value = "-" if point[2] is None else point[2]
        return f"{self.x_categories[point[0]]} × {self.y_categories[point[1]]}: {value}"

    def to_js(self) -> str:
        xs = json.dumps(list(self.x_categories), ensure_ascii=False)
        ys = json.dumps(list(self.y_categories), ensure_ascii=False)
        return (
            f"function (params) {{ var xs = {xs}; var ys = {ys}; var d = params.data; "
            "if (!d) { return ''; } "
            "return xs[d[0]] + ' × ' + ys[d[1]] + ': ' + (d[2] != null ? d[2] : '-'); }"
        )


# value helpers


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _number(value: Any, default: Optional[float] = 0) -> Optional[float]:
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return default
    return default


def distinct(values: Iterable[str]) -> List[str]:
    """Ordered, de-duplicated values (first appearance wins)."""

    return list(dict.fromkeys(values))


def _first_rows(rows: List[Row], field: str) -> Dict[str, Row]:
    index: Dict[str, Row] = {}
    for row in rows:
        index.setdefault(_text(row.get(field)), row)
    return index


def _role(mapping: Dict[str, Any], key: str) -> Optional[str]:
    value = mapping.get(key)
    return value if isinstance(value, str) and value else None


def _roles(mapping: Dict[str, Any], key: str) -> List[str]:
    value = mapping.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def _strings(rows: List[Row]) -> List[str]:
    return fields_of(rows[0], FieldClass.string)


def _numbers(rows: List[Row]) -> List[str]:
    return fields_of(rows[0], FieldClass.number)


def _first(names: List[str]) -> Optional[str]:
    return names[0] if names else None


def _mark_line(reference_lines: List[Any]) -> Config:
    items: List[Config] = []
    for line in reference_lines:
        if not isinstance(line, dict) or "value" not in line:
            continue
        item: Config = {"xAxis" if line.get("axis") == "x" else "yAxis": line["value"]}
        label = line.get("label")
        if label:
            item["name"] = label
        style: Config = {}
        if line.get("color"):
            style["color"] = line["color"]
        if line.get("style"):
            style["type"] = line["style"]
        if style:
            item["lineStyle"] = style
        if label:
            item["label"] = {"formatter": label, "position": "end"}
        items.append(item)
    return {"silent": True, "symbol": "none", "data": items}


# family builders


def _build_cartesian(rows: List[Row], mapping: Dict[str, Any], options: Dict[str, Any], *, series_type: str, area: bool = False) -> Config:
    x_field = _role(mapping, "x") or _first(_strings(rows))
    y_fields = _roles(mapping, "y") or _numbers(rows)[:1]
    if not x_field or not y_fields:
        return {}

    by_category = _first_rows(rows, x_field)
    categories = list(by_category)

    stacked = bool(options.get("stack") or options.get("stacked"))
    step = options.get("step")
    series: List[Config] = []
    for field in y_fields:
        item: Config = {
            "name": field,
            "type": series_type,
            "data": [by_category[cat].get(field) for cat in categories],
        }
        if area:
            item["areaStyle"] = {}
        if series_type == "line":
            if options.get("smooth"):
                item["smooth"] = True
            if step:
                item["step"] = DEFAULT_STEP if step is True else step
        if stacked:
            item["stack"] = STACK_ID
        if options.get("showLabel") is True:
            item["label"] = {"show": True}
        series.append(item)

    category_axis: Config = {"type": "category", "data": categories}
    value_axis: Config = {"type": "value"}
    if options.get("histogram"):
        category_axis["axisTick"] = {"alignWithLabel": True}
        for item in series:
            item["barCategoryGap"] = "0%"

    horizontal = bool(options.get("horizontal"))
    config: Config = {
        "xAxis": value_axis if horizontal else category_axis,
        "yAxis": category_axis if horizontal else value_axis,
        "series": series,
        "tooltip": {"trigger": "axis"},
    }
    if len(y_fields) > 1:
        config["legend"] = {"data": list(y_fields)}
    return config


def _proportion_data(rows: List[Row], mapping: Dict[str, Any]) -> Optional[List[Config]]:
    label_field = _role(mapping, "label") or _first(_strings(rows))
    value_field = _role(mapping, "value") or _first(_numbers(rows))
    if not label_field or not value_field:
        return None
    return [{"name": _text(row.get(label_field)), "value": _number(row.get(value_field))} for row in rows]


def _build_pie(rows: List[Row], mapping: Dict[str, Any], options: Dict[str, Any]) -> Config:
    data = _proportion_data(rows, mapping)
    if data is None:
        return {}
    series: Config = {
        "type": "pie",
        "radius": ["40%", "70%"] if options.get("donut") else "50%",
        "data": data,
        "label": {"overflow": "truncate", "width": 80},
    }
    if options.get("showLabel") is False:
        series["label"] = {"show": False}
    return {
        "tooltip": {"trigger": "item"},
        "legend": {"orient": "vertical", "left": "left"},
        "series": [series],
    }


def _build_funnel(rows: List[Row], mapping: Dict[str, Any], options: Dict[str, Any]) -> Config:
    data = _proportion_data(rows, mapping)
    if data is None:
        return {}
    return {
        "tooltip": {"trigger": "item", "formatter": "{b}: {c} ({d}%)"},
        "legend": {"orient": "vertical", "left": "left"},
        "series": [
            {
                "type": "funnel",
                "data": data,
                "sort": "descending",
                "gap": 2,
                "label": {"show": options.get("showLabel") is not False, "position": "inside"},
            }
        ],
    }


def _build_scatter(rows: List[Row], mapping: Dict[str, Any], options: Dict[str, Any]) -> Config:
    numbers = _numbers(rows)
    x_field = _role(mapping, "x") or _first(numbers)
    y_field = _first(_roles(mapping, "y")) or (numbers[1] if len(numbers) > 1 else None)
    if not x_field or not y_field:
        return {}
    color_field = _role(mapping, "color")
    size_field = _role(mapping, "size")
    symbol_size = SqrtSymbolSize() if size_field else None

    def to_point(row: Row) -> List[Any]:
        point = [_number(row.get(x_field)), _number(row.get(y_field))]
        if size_field:
            point.append(_number(row.get(size_field)))
        return point

    def make_series(points: List[List[Any]], name: Optional[str] = None) -> Config:
        item: Config = {"type": "scatter", "data": points}
        if name is not None:
            item = {"name": name, **item}
        if symbol_size is not None:
            item["symbolSize"] = symbol_size
        return item

    config: Config = {
        "xAxis": {"type": "value"},
        "yAxis": {"type": "value"},
        "tooltip": {"trigger": "item"},
    }
    if color_field:
        groups: Dict[str, List[List[Any]]] = {}
        for row in rows:
            key = "unknown" if row.get(color_field) is None else _text(row.get(color_field))
            groups.setdefault(key, []).append(to_point(row))
        config["series"] = [make_series(points, name) for name, points in groups.items()]
        config["legend"] = {"data": list(groups)}
    else:
        config["series"] = [make_series([to_point(row) for row in rows])]
    return config


def _build_radar(rows: List[Row], mapping: Dict[str, Any], options: Dict[str, Any]) -> Config:
    axis_field = _role(mapping, "axis") or _first(_strings(rows))
    value_fields = _roles(mapping, "y") or _numbers(rows)
    if not axis_field or not value_fields:
        return {}

    by_axis = _first_rows(rows, axis_field)
    indicators = list(by_axis)
    entries = [
        {"name": field, "value": [_number(by_axis[name].get(field)) for name in indicators]}
        for field in value_fields
    ]
    return {
        "tooltip": {},
        "legend": {"data": list(value_fields)},
        "radar": {"indicator": [{"name": name} for name in indicators]},
        "series": [{"type": "radar", "data": entries}],
    }


def _build_heatmap(rows: List[Row], mapping: Dict[str, Any], options: Dict[str, Any]) -> Config:
    strings = _strings(rows)
    x_field = _role(mapping, "x") or _first(strings)
    y_field = _first(_roles(mapping, "y")) or next((name for name in strings if name != x_field), None)
    value_field = _role(mapping, "value") or _first(_numbers(rows))
    if not x_field or not y_field or not value_field:
        return {}

    x_categories = distinct(_text(row.get(x_field)) for row in rows)
    y_categories = distinct(_text(row.get(y_field)) for row in rows)
    x_index = {name: idx for idx, name in enumerate(x_categories)}
    y_index = {name: idx for idx, name in enumerate(y_categories)}

    cells: List[List[Any]] = []
    values: List[float] = []
    for row in rows:
        value = _number(row.get(value_field), default=None)
        cells.append([x_index[_text(row.get(x_field))], y_index[_text(row.get(y_field))], value])
        if value is not None:
            values.append(value)
    low, high = (min(values), max(values)) if values else (0, 1)

    color_range = options.get("colorRange")
    if not isinstance(color_range, list) or not color_range:
        color_range = list(HEATMAP_COLORS)

    return {
        "xAxis": {"type": "category", "data": x_categories, "splitArea": {"show": True}},
        "yAxis": {"type": "category", "data": y_categories, "splitArea": {"show": True}},
        "visualMap": {
            "min": _number(options["min"]) if options.get("min") is not None else low,
            "max": _number(options["max"]) if options.get("max") is not None else high,
            "calculable": True,
            "orient": "horizontal",
            "left": "center",
            "bottom": 0,
            "inRange": {"color": list(color_range)},
        },
        "tooltip": {"trigger": "item", "formatter": HeatmapTooltip(tuple(x_categories), tuple(y_categories))},
        "grid": {"bottom": 60},
        "series": [{"type": "heatmap", "data": cells, "label": {"show": options.get("showLabel") is not False}}],
    }


def _box_stats(rows: List[Row], mapping: Dict[str, Any]) -> List[str]:
    mapped = _roles(mapping, "y")
    if len(mapped) >= len(BOX_STATS):
        return mapped[: len(BOX_STATS)]
    numbers = _numbers(rows)
    if all(name in numbers for name in BOX_STATS):
        return list(BOX_STATS)
    return numbers[: len(BOX_STATS)]


def _build_boxplot(rows: List[Row], mapping: Dict[str, Any], options: Dict[str, Any]) -> Config:
    stats = _box_stats(rows, mapping)
    if len(stats) < len(BOX_STATS):
        return {}
    x_field = _role(mapping, "x") or _first(_strings(rows))

    category_axis: Config = {"type": "category"}
    if x_field:
        category_axis["data"] = [_text(row.get(x_field)) for row in rows]
    return {
        "tooltip": {"trigger": "item"},
        "xAxis": category_axis,
        "yAxis": {"type": "value"},
        "series": [{"type": "boxplot", "data": [[_number(row.get(name)) for name in stats] for row in rows]}],
    }


def _build_waterfall(rows: List[Row], mapping: Dict[str, Any], options: Dict[str, Any]) -> Config:
    x_field = _role(mapping, "x") or _first(_strings(rows))
    y_field = _first(_roles(mapping, "y")) or _first(_numbers(rows))
    if not x_field or not y_field:
        return {}

    categories: List[str] = []
    base: List[float] = []
    rises: List[Optional[float]] = []
    falls: List[Optional[float]] = []
    running = 0
    for row in rows:
        value = _number(row.get(y_field))
        categories.append(_text(row.get(x_field)))
        if value >= 0:
            base.append(running)
            rises.append(value)
            falls.append(None)
        else:
            base.append(running + value)
            rises.append(None)
            falls.append(abs(value))
        running += value

    hidden = {"borderColor": "transparent", "color": "transparent"}
    label = {"show": options.get("showLabel") is True, "position": "top"}
    return {
        "tooltip": {"trigger": "axis", "axisPointer": {"type": "shadow"}},
        "xAxis": {"type": "category", "data": categories},
        "yAxis": {"type": "value"},
        "series": [
            {
                "name": "Base",
                "type": "bar",
                "stack": WATERFALL_STACK_ID,
                "itemStyle": dict(hidden),
                "emphasis": {"itemStyle": dict(hidden)},
                "data": base,
            },
            {"name": "Positive", "type": "bar", "stack": WATERFALL_STACK_ID, "label": dict(label), "data": rises},
            {"name": "Negative", "type": "bar", "stack": WATERFALL_STACK_ID, "label": dict(label), "data": falls},
        ],
    }


def _tree_node(item: Row) -> Config:
    node: Config = {"name": _text(item.get("name")), "value": _number(item.get("value"))}
    children = item.get("children")
    if isinstance(children, list):
        node["children"] = [_tree_node(child) for child in children if isinstance(child, dict)]
    return node


def _build_treemap(rows: List[Row], mapping: Dict[str, Any], options: Dict[str, Any]) -> Config:
    return {
        "tooltip": {"trigger": "item"},
        "series": [
            {
                "type": "treemap",
                "data": [_tree_node(row) for row in rows],
                "leafDepth": 1,
                "roam": False,
                "label": {"show": options.get("showLabel") is not False, "formatter": "{b}"},
            }
        ],
    }


Builder = Callable[[List[Row], Dict[str, Any], Dict[str, Any]], Config]

BUILDERS: Dict[str, Builder] = {
    "chart.bar": lambda rows, mapping, options: _build_cartesian(rows, mapping, options, series_type="bar"),
    "chart.line": lambda rows, mapping, options: _build_cartesian(rows, mapping, options, series_type="line"),
    "chart.area": lambda rows, mapping, options: _build_cartesian(rows, mapping, options, series_type="line", area=True),
    "chart.pie": _build_pie,
    "chart.funnel": _build_funnel,
    "chart.scatter": _build_scatter,
    "chart.radar": _build_radar,
    "chart.heatmap": _build_heatmap,
    "chart.box": _build_boxplot,
    "chart.waterfall": _build_waterfall,
    "chart.treemap": _build_treemap,
}


# cross-cutting options


def deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge `overrides` onto `base` without touching either.

    Nested dicts merge key by key; lists and scalars from `overrides` replace
    the base value outright.
    """

    merged = dict(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def _apply_common(config: Config, options: Dict[str, Any]) -> Config:
    if options.get("legend") is False:
        config["legend"] = {**config.get("legend", {}), "show": False}

    if options.get("grid") is False:
        for axis in ("xAxis", "yAxis"):
            if isinstance(config.get(axis), dict):
                config[axis] = {**config[axis], "splitLine": {"show": False}}

    if options.get("animate") is False:
        config["animation"] = False

    colors = options.get("colors")
    if isinstance(colors, list) and colors:
        config["color"] = list(colors)

    reference_lines = options.get("referenceLines")
    series = config.get("series")
    if isinstance(reference_lines, list) and reference_lines and isinstance(series, list) and series:
        series[0]["markLine"] = _mark_line(reference_lines)

    passthrough = options.get("echarts")
    if isinstance(passthrough, dict):
        config = deep_merge(config, passthrough)
    return config


def resolve_mapping(kind: str, spec: Dict[str, Any], rows: List[Row]) -> Dict[str, Any]:
    """Caller mapping when supplied, otherwise the inferred one; ``y`` normalized to a list."""

    explicit = spec.get("mapping")
    if isinstance(explicit, dict) and explicit:
        return normalize_mapping(explicit)
    return normalize_mapping(infer(kind, rows))


def compile_chart(spec: Dict[str, Any]) -> Config:
    """Lower a resolved chart spec into a backend chart configuration.

    Returns ``{}`` when there is nothing to draw.
    """

    kind = spec.get("kind") if isinstance(spec, dict) else None
    builder = BUILDERS.get(kind) if isinstance(kind, str) else None
    if builder is None:
        logger.debug("compile: unsupported kind %r", kind)
        return {}

    data = spec.get("data")
    if not isinstance(data, list):
        logger.debug("compile: %s has no array data", kind)
        return {}
    rows = [row for row in data if isinstance(row, dict)]
    if not rows:
        logger.debug("compile: %s has no records", kind)
        return {}

    options = spec.get("options") if isinstance(spec.get("options"), dict) else {}
    mapping = resolve_mapping(kind, spec, rows)

    config = builder(rows, mapping, options)
    if not config:
        logger.debug("compile: %s data cannot fill the required roles", kind)
        return {}
    return _apply_common(config, options)


def to_jsonable(value: Any) -> Any:
    """Convert a configuration tree into plain JSON values; formatter callables become JS source."""

    if hasattr(value, "to_js"):
        return value.to_js()
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
