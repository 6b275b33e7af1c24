from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

MAPPING_DOCS: Mapping[str, str] = MappingProxyType(
    {
        "x": "X-axis / category field",
        "y": "Y-axis value field(s)",
        "label": "Label field (pie/funnel)",
        "value": "Value field (pie/funnel/heatmap)",
        "color": "Color grouping field (scatter)",
        "size": "Size encoding field (scatter bubble)",
        "axis": "Axis field (radar indicators)",
        "columns": "Column definitions (table)",
        "primary": "Primary text field (list)",
        "secondary": "Secondary text field (list)",
        "icon": "Icon letter field (list)",
        "avatar": "Avatar image URL field (list)",
        "trailing": "Trailing value field (list)",
        "badge": "Badge/tag field (list)",
    }
)

FIELD_PROP_DOCS: Mapping[str, str] = MappingProxyType(
    {
        "field": "Key name in submitted data",
        "label": "Display label",
        "type": "Input type",
        "required": "Must be filled before submit",
        "placeholder": "Placeholder text",
        "options": "Choices for select/radio/checkbox",
        "minLength": "Minimum character length",
        "maxLength": "Maximum character length",
        "pattern": "Custom regex pattern",
        "rows": "Textarea visible rows",
        "min": "Minimum value",
        "max": "Maximum value",
        "step": "Number/range step increment",
        "message": "Custom validation error message",
    }
)

ACTION_PROP_DOCS: Mapping[str, str] = MappingProxyType(
    {
        "label": "Button text",
        "action": "Action identifier (submit, cancel, navigate, custom)",
        "style": "Visual style (primary, danger, default)",
        "disabled": "Whether disabled",
        "url": "URL for navigate action",
    }
)

# Common data keys across display/content kinds; chart data is user-defined.
DATA_FIELD_DOCS: Mapping[str, str] = MappingProxyType(
    {
        "value": "The primary value to display",
        "label": "Display label or category name",
        "unit": "Value unit suffix",
        "prefix": "Text before the value",
        "suffix": "Text after the value",
        "change": "Delta / change amount",
        "trend": "Trend direction (up, down, flat)",
        "content": "Body text or markdown content",
        "message": "Message body text",
        "level": "Severity level (info, warning, error, success)",
        "title": "Heading or title text",
        "src": "Source URL (image)",
        "alt": "Alt text (image)",
        "caption": "Caption text",
        "max": "Maximum bound value",
        "name": "Node or item name",
        "children": "Nested child nodes",
        "language": "Programming language identifier",
        "key": "Key or label identifier",
        "text": "Display text content",
        "status": "Step status (done, active, pending, error)",
        "description": "Detailed description text",
        "count": "Number of reviews or votes",
        "poster": "Video poster image URL",
        "url": "Link URL",
        "snippet": "Excerpt or summary text",
        "source": "Source name or publisher",
        "group": "Group / category identifier",
        "min": "Minimum stat value",
        "q1": "First quartile (25th percentile)",
        "median": "Median (50th percentile)",
        "q3": "Third quartile (75th percentile)",
    }
)

OPTION_DOCS: Mapping[str, str] = MappingProxyType(
    {
        # gauge / progress
        "min": "Minimum range value",
        "max": "Maximum range value",
        "unit": "Display unit string",
        "thresholds": "Color threshold breakpoints",
        "label": "Label template ({value}, {percent})",
        # chart
        "smooth": "Smooth curves (line/area)",
        "stack": "Stack series (bar/line/area)",
        "horizontal": "Horizontal orientation (bar)",
        "donut": "Donut style (pie)",
        "colors": "Custom color palette",
        "colorRange": "Heatmap color gradient",
        "histogram": "Histogram mode (bar)",
        "referenceLines": "Reference/threshold lines",
        "step": "Step interpolation (line)",
        "legend": "Show/hide legend",
        "grid": "Show/hide grid lines",
        "animate": "Enable/disable animation",
        "showLabel": "Show/hide data labels",
        "echarts": "Raw chart configuration deep-merged over the generated one",
        # table / list
        "pageSize": "Rows per page",
        "compact": "Compact display mode",
        "searchable": "Enable search filter",
        "locale": "Locale for formatting/validation",
        # code
        "lineNumbers": "Show/hide line numbers (default true)",
        "highlight": "Line numbers to highlight (array)",
        "maxHeight": 'Maximum height with scroll (e.g. "300px")',
        "wrap": "Word wrap long lines (default false)",
        # citation
        "numbered": "Show numbered badges (default true)",
        # rating
        "interactive": "Allow user input (default false)",
        "icon": "Icon type (star, heart, thumb)",
        # video
        "autoplay": "Auto-play on load (default false)",
        "controls": "Show playback controls (default true)",
        "loop": "Loop playback (default false)",
        "muted": "Start muted (default false, auto when autoplay)",
        # gallery
        "aspectRatio": 'Image aspect ratio (e.g. "1:1", "16:9", default auto)',
        # compose / kv / actions / divider / steps
        "layout": "Layout mode (stack, row, grid, horizontal, vertical, wrap, column)",
        "columns": "Number of grid columns",
        "widths": 'Column width ratios (number[], "auto", "stretch")',
        "spacing": "Spacing size (small, default, large)",
        "card": "Render inside a card container with shadow and border",
    }
)

FIELD_TYPES: Tuple[str, ...] = (
    "text",
    "email",
    "password",
    "tel",
    "url",
    "textarea",
    "number",
    "select",
    "multiselect",
    "date",
    "datetime",
    "time",
    "toggle",
    "range",
    "radio",
    "checkbox",
)

_CHART_COMMON = ("colors", "legend", "animate", "echarts")

WIDGET_OPTIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "chart.bar": ("stack", "horizontal", "histogram", "referenceLines", "grid", "showLabel") + _CHART_COMMON,
        "chart.line": ("smooth", "stack", "step", "referenceLines", "grid", "showLabel") + _CHART_COMMON,
        "chart.area": ("smooth", "stack", "step", "referenceLines", "grid", "showLabel") + _CHART_COMMON,
        "chart.pie": ("donut", "showLabel") + _CHART_COMMON,
        "chart.scatter": ("referenceLines", "grid", "showLabel") + _CHART_COMMON,
        "chart.radar": ("showLabel",) + _CHART_COMMON,
        "chart.heatmap": ("colorRange", "min", "max", "grid", "showLabel") + _CHART_COMMON,
        "chart.box": ("grid", "referenceLines") + _CHART_COMMON,
        "chart.funnel": ("showLabel",) + _CHART_COMMON,
        "chart.waterfall": ("grid", "referenceLines", "showLabel") + _CHART_COMMON,
        "chart.treemap": ("showLabel",) + _CHART_COMMON,
        "metric": (),
        "stat-group": (),
        "gauge": ("min", "max", "unit", "thresholds", "label"),
        "progress": ("min", "max", "unit", "thresholds", "label"),
        "table": ("pageSize", "compact", "searchable"),
        "list": ("compact",),
        "form": ("locale",),
        "confirm": (),
        "markdown": (),
        "image": (),
        "callout": (),
        "code": ("lineNumbers", "highlight", "maxHeight", "wrap"),
        "citation": ("compact", "numbered"),
        "status": (),
        "steps": ("layout", "compact"),
        "rating": ("max", "interactive", "icon", "label"),
        "video": ("autoplay", "controls", "loop", "muted"),
        "gallery": ("columns", "aspectRatio"),
        "kv": ("layout", "columns"),
        "actions": ("layout",),
        "divider": ("label", "spacing"),
        "header": (),
        "compose": ("layout", "columns", "widths", "card"),
    }
)


@dataclass(frozen=True)
class DataFieldInfo:
    """A well-known data property of a display or content kind."""

    key: str
    type: str
    desc: str
    required: bool = False


_STAT_FIELDS: Tuple[DataFieldInfo, ...] = (
    DataFieldInfo("unit", "string", "Value unit suffix"),
    DataFieldInfo("prefix", "string", "Text before value"),
    DataFieldInfo("suffix", "string", "Text after value"),
    DataFieldInfo("change", "number", "Delta amount"),
    DataFieldInfo("trend", '"up" | "down" | "flat"', "Trend direction"),
    DataFieldInfo("icon", "string", "Emoji or short text icon"),
    DataFieldInfo("description", "string", "Sub-label below value"),
)

WIDGET_DATA_FIELDS: Mapping[str, Tuple[DataFieldInfo, ...]] = MappingProxyType(
    {
        "metric": (
            DataFieldInfo("value", "number | string", "Primary value", required=True),
            DataFieldInfo("label", "string", "Display label"),
        )
        + _STAT_FIELDS,
        "stat-group": (
            DataFieldInfo("label", "string", "Display label", required=True),
            DataFieldInfo("value", "number", "Primary value", required=True),
        )
        + _STAT_FIELDS,
        "gauge": (DataFieldInfo("value", "number", "Current value on the arc", required=True),),
        "progress": (
            DataFieldInfo("value", "number", "Current value", required=True),
            DataFieldInfo("max", "number", "Maximum bound (default 100)"),
        ),
        "markdown": (DataFieldInfo("content", "string", "Markdown text", required=True),),
        "image": (
            DataFieldInfo("src", "string", "Image URL", required=True),
            DataFieldInfo("alt", "string", "Alt text"),
            DataFieldInfo("caption", "string", "Caption text"),
        ),
        "callout": (
            DataFieldInfo("message", "string", "Body text", required=True),
            DataFieldInfo("title", "string", "Optional heading"),
            DataFieldInfo("level", '"info" | "warning" | "error" | "success"', "Severity"),
        ),
        "code": (
            DataFieldInfo("content", "string", "Code text content", required=True),
            DataFieldInfo("language", "string", "Language identifier (e.g. javascript, python, sql)"),
        ),
        "header": (
            DataFieldInfo("text", "string", "Heading text", required=True),
            DataFieldInfo("level", "1 | 2 | 3", "Heading level (default 2)"),
        ),
        "video": (
            DataFieldInfo("src", "string", "Video URL", required=True),
            DataFieldInfo("poster", "string", "Poster image URL"),
            DataFieldInfo("alt", "string", "Accessible description"),
            DataFieldInfo("caption", "string", "Caption text"),
        ),
        "gallery": (
            DataFieldInfo("src", "string", "Image URL", required=True),
            DataFieldInfo("alt", "string", "Alt text"),
            DataFieldInfo("caption", "string", "Caption text"),
        ),
        "steps": (
            DataFieldInfo("label", "string", "Step label", required=True),
            DataFieldInfo("status", '"done" | "active" | "pending" | "error"', "Step status (default pending)"),
            DataFieldInfo("description", "string", "Step detail text"),
            DataFieldInfo("icon", "string", "Custom icon (emoji/text) override"),
        ),
        "rating": (
            DataFieldInfo("value", "number", "Current rating value"),
            DataFieldInfo("max", "number", "Scale maximum (default 5)"),
            DataFieldInfo("count", "number", "Number of reviews"),
        ),
        "citation": (
            DataFieldInfo("title", "string", "Citation title", required=True),
            DataFieldInfo("url", "string", "Link URL"),
            DataFieldInfo("snippet", "string", "Excerpt text"),
            DataFieldInfo("source", "string", "Source name"),
        ),
        "status": (
            DataFieldInfo("label", "string", "Status label", required=True),
            DataFieldInfo("value", "string", "Status value", required=True),
            DataFieldInfo(
                "level", '"info" | "success" | "warning" | "error" | "neutral"', "Severity level (default info)"
            ),
        ),
    }
)

WIDGET_INFERENCE: Mapping[str, str] = MappingProxyType(
    {
        "chart.bar": "mapping omittable. First string -> x, number fields -> y.",
        "chart.line": "mapping omittable. First string -> x, numbers -> y. Date-like preferred for x.",
        "chart.area": "mapping omittable. Same as line: first string -> x, numbers -> y.",
        "chart.pie": "mapping omittable. First string -> label, first number -> value.",
        "chart.scatter": "mapping omittable. First two numbers -> x, y. color/size optional.",
        "chart.radar": "mapping omittable. First string -> axis, first number -> value; y lists several series.",
        "chart.heatmap": "mapping recommended. x, y (categories), value (intensity).",
        "chart.box": "mapping recommended. x (group), y mapped to [min, q1, median, q3, max].",
        "chart.funnel": "mapping omittable. First string -> label, first number -> value.",
        "chart.waterfall": "mapping omittable. First string -> x, first number -> y.",
        "chart.treemap": "No mapping. data is [{name, value, children?}].",
        "metric": "No mapping needed. data is {value, label?, unit?, change?, trend?}.",
        "stat-group": "No mapping needed. data is [{label, value, ...}]. Optional: icon, description.",
        "gauge": "No mapping needed. data is {value}. Set min/max/unit in options.",
        "progress": "No mapping needed. data is {value, max?}. Set label in options.",
        "table": "mapping.columns omittable: auto-inferred from data keys.",
        "list": "mapping omittable. First string -> primary, second string -> secondary.",
        "form": "Uses fields[] or formdown, not data/mapping. data provides defaults.",
        "confirm": "Uses title, description, actions. data is optional.",
        "markdown": 'No mapping. data is {content: "markdown string"}.',
        "image": "No mapping. data is {src, alt?, caption?}.",
        "callout": "No mapping. data is {message, title?, level?}.",
        "compose": "Uses children[] and layout. Each child is a widget spec.",
        "kv": "No mapping. data is {key: val, ...}. layout in options.",
        "code": "No mapping. data is {content, language?}. lineNumbers/highlight/maxHeight/wrap in options.",
        "citation": "No mapping. data is [{title, url?, snippet?, source?}]. compact/numbered in options.",
        "status": "No mapping. data is [{label, value, level?}]. level: info/success/warning/error/neutral.",
        "video": "No mapping. data is {src, poster?, alt?, caption?}. autoplay/controls/loop/muted in options.",
        "gallery": "No mapping. data is [{src, alt?, caption?}]. columns/aspectRatio in options.",
        "steps": "No mapping. data is [{label, status?, description?, icon?}]. layout: vertical/horizontal.",
        "rating": "No mapping. data is {value?, max?}. options: interactive, icon (star/heart/thumb), max, label.",
        "actions": "No data. Uses actions[] array. layout in options (wrap/column).",
        "divider": "No data. label/spacing in options.",
        "header": "data is {text, level?}. level defaults to 2.",
    }
)

WIDGET_EVENTS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "chart": ("select",),
        "table": ("select",),
        "list": ("select",),
        "form": ("submit", "change", "action"),
        "confirm": ("submit", "action"),
        "citation": ("action",),
        "rating": ("submit",),
        "actions": ("action",),
    }
)


def get_widget_events(kind: str) -> Tuple[str, ...]:
    """Return the event kinds a widget emits; dotted kinds fall back to their family."""

    if kind in WIDGET_EVENTS:
        return WIDGET_EVENTS[kind]
    return WIDGET_EVENTS.get(kind.split(".")[0], ())
