"""Static widget catalog: what each kind is, what data it expects, and starter specs.

The tables here are built once at import time and never mutated. Callers get
deep copies of every template and example so edits on their side cannot leak
back into the catalog.
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Union

from .widget_meta import (
    ACTION_PROP_DOCS,
    FIELD_PROP_DOCS,
    MAPPING_DOCS,
    OPTION_DOCS,
    WIDGET_DATA_FIELDS,
    WIDGET_INFERENCE,
    WIDGET_OPTIONS,
    DataFieldInfo,
    get_widget_events,
)

Category = Literal["chart", "display", "input", "content", "composition"]
DataShape = Literal["array", "object", "none"]

CHART_FAMILY = "chart."


@dataclass(frozen=True)
class WidgetInfo:
    kind: str
    category: Category
    description: str
    mapping_keys: Tuple[str, ...]
    data_shape: DataShape


@dataclass(frozen=True)
class WidgetExample:
    label: str
    spec: Dict[str, Any]


@dataclass(frozen=True)
class WidgetDetail:
    """Full description of one kind, returned by an exact-name lookup."""

    kind: str
    category: Category
    description: str
    mapping_keys: Tuple[str, ...]
    data_shape: DataShape
    auto_inference: str
    data_fields: Tuple[DataFieldInfo, ...]
    mapping_docs: Dict[str, str]
    option_docs: Dict[str, str]
    events: Tuple[str, ...]
    examples: List[WidgetExample] = field(default_factory=list)
    field_docs: Optional[Dict[str, str]] = None
    action_docs: Optional[Dict[str, str]] = None


CATALOG: Tuple[WidgetInfo, ...] = (
    # chart
    WidgetInfo("chart.bar", "chart", "Bar chart for category x value comparison", ("x", "y"), "array"),
    WidgetInfo("chart.line", "chart", "Line chart for trends over a category axis", ("x", "y"), "array"),
    WidgetInfo("chart.area", "chart", "Area chart (filled line chart)", ("x", "y"), "array"),
    WidgetInfo("chart.pie", "chart", "Pie or donut chart for proportions", ("label", "value"), "array"),
    WidgetInfo("chart.scatter", "chart", "Scatter plot for two numeric dimensions", ("x", "y", "color", "size"), "array"),
    WidgetInfo("chart.radar", "chart", "Radar chart for multi-axis comparison", ("axis", "value", "y"), "array"),
    WidgetInfo("chart.heatmap", "chart", "Heatmap for matrix data visualization", ("x", "y", "value"), "array"),
    WidgetInfo("chart.box", "chart", "Box plot for statistical distribution", ("x", "y"), "array"),
    WidgetInfo("chart.funnel", "chart", "Funnel chart for sequential stages", ("label", "value"), "array"),
    WidgetInfo("chart.waterfall", "chart", "Waterfall chart for cumulative values", ("x", "y"), "array"),
    WidgetInfo("chart.treemap", "chart", "Treemap for hierarchical data", (), "array"),
    # display
    WidgetInfo("metric", "display", "Single KPI value with optional trend", (), "object"),
    WidgetInfo("stat-group", "display", "Multiple KPI values in a row", (), "array"),
    WidgetInfo("gauge", "display", "Arc gauge for a value within a range", (), "object"),
    WidgetInfo("progress", "display", "Progress bar for a value within a range", (), "object"),
    WidgetInfo("table", "display", "Sortable data table with auto-inferred columns", ("columns",), "array"),
    WidgetInfo(
        "list",
        "display",
        "Structured list with avatars and trailing values",
        ("primary", "secondary", "avatar", "icon", "trailing", "badge"),
        "array",
    ),
    # input
    WidgetInfo("form", "input", "Data entry form with typed fields", (), "object"),
    WidgetInfo("confirm", "input", "Yes/no confirmation dialog", (), "object"),
    # content
    WidgetInfo("markdown", "content", "Render markdown text (headers, emphasis, code, links, lists, tables)", (), "object"),
    WidgetInfo("image", "content", "Display an image", (), "object"),
    WidgetInfo("callout", "content", "Callout/alert banner", (), "object"),
    WidgetInfo("code", "content", "Syntax-highlighted code block with line numbers and copy button", (), "object"),
    WidgetInfo("citation", "content", "Source/reference cards with title, URL, snippet, and source", (), "array"),
    WidgetInfo("status", "content", "Status indicators with label, value, and level-based coloring", (), "array"),
    WidgetInfo("steps", "content", "Multi-step progress indicator (done/active/pending/error)", (), "array"),
    WidgetInfo("rating", "content", "Star/heart/thumb rating display or input", (), "object"),
    WidgetInfo("video", "content", "Video player with controls, poster, and caption", (), "object"),
    WidgetInfo("gallery", "content", "Image gallery grid with captions", (), "array"),
    WidgetInfo("kv", "content", "Key-value pairs display", (), "object"),
    WidgetInfo("actions", "content", "Standalone action buttons (quick replies, suggested actions)", (), "none"),
    WidgetInfo("divider", "content", "Visual separator with optional label", (), "none"),
    WidgetInfo("header", "content", "Section heading (h1-h3)", (), "object"),
    # composition
    WidgetInfo("compose", "composition", "Combine multiple widgets with layout hints", (), "none"),
)

_BY_KIND: Mapping[str, WidgetInfo] = MappingProxyType({info.kind: info for info in CATALOG})

TEMPLATES: Mapping[str, Dict[str, Any]] = MappingProxyType(
    {
        "chart.bar": {
            "kind": "chart.bar",
            "data": [{"category": "A", "value": 30}, {"category": "B", "value": 70}, {"category": "C", "value": 45}],
            "mapping": {"x": "category", "y": "value"},
        },
        "chart.line": {
            "kind": "chart.line",
            "data": [{"month": "Jan", "value": 100}, {"month": "Feb", "value": 120}, {"month": "Mar", "value": 90}],
            "mapping": {"x": "month", "y": "value"},
        },
        "chart.area": {
            "kind": "chart.area",
            "data": [{"month": "Jan", "value": 100}, {"month": "Feb", "value": 120}, {"month": "Mar", "value": 90}],
            "mapping": {"x": "month", "y": "value"},
        },
        "chart.pie": {
            "kind": "chart.pie",
            "data": [{"name": "A", "value": 40}, {"name": "B", "value": 35}, {"name": "C", "value": 25}],
            "mapping": {"label": "name", "value": "value"},
        },
        "chart.scatter": {
            "kind": "chart.scatter",
            "data": [{"x": 10, "y": 20}, {"x": 30, "y": 40}, {"x": 50, "y": 15}],
            "mapping": {"x": "x", "y": "y"},
        },
        "chart.radar": {
            "kind": "chart.radar",
            "data": [{"axis": "Speed", "value": 80}, {"axis": "Power", "value": 90}, {"axis": "Defense", "value": 60}],
            "mapping": {"axis": "axis", "value": "value"},
        },
        "chart.heatmap": {
            "kind": "chart.heatmap",
            "data": [
                {"x": "Mon", "y": "Morning", "value": 10},
                {"x": "Mon", "y": "Afternoon", "value": 20},
                {"x": "Tue", "y": "Morning", "value": 15},
                {"x": "Tue", "y": "Afternoon", "value": 25},
            ],
            "mapping": {"x": "x", "y": "y", "value": "value"},
        },
        "chart.box": {
            "kind": "chart.box",
            "data": [{"group": "A", "min": 10, "q1": 25, "median": 50, "q3": 75, "max": 90}],
            "mapping": {"x": "group", "y": ["min", "q1", "median", "q3", "max"]},
        },
        "chart.funnel": {
            "kind": "chart.funnel",
            "data": [{"stage": "Visit", "count": 1000}, {"stage": "Click", "count": 600}, {"stage": "Purchase", "count": 200}],
            "mapping": {"label": "stage", "value": "count"},
        },
        "chart.waterfall": {
            "kind": "chart.waterfall",
            "data": [{"item": "Revenue", "amount": 500}, {"item": "Cost", "amount": -200}, {"item": "Tax", "amount": -50}],
            "mapping": {"x": "item", "y": "amount"},
        },
        "chart.treemap": {
            "kind": "chart.treemap",
            "data": [{"name": "Group A", "value": 100}, {"name": "Group B", "value": 80}],
        },
        "metric": {"kind": "metric", "data": {"value": 1284, "unit": "users", "change": 12.5, "trend": "up"}},
        "stat-group": {
            "kind": "stat-group",
            "data": [
                {"label": "Users", "value": 1284, "suffix": ""},
                {"label": "Revenue", "value": 42000, "suffix": "$"},
            ],
        },
        "gauge": {"kind": "gauge", "data": {"value": 73}, "options": {"min": 0, "max": 100, "unit": "%"}},
        "progress": {"kind": "progress", "data": {"value": 65}, "options": {"min": 0, "max": 100, "unit": "%"}},
        "table": {
            "kind": "table",
            "data": [
                {"name": "Alice", "role": "Engineer", "status": "Active"},
                {"name": "Bob", "role": "Designer", "status": "Away"},
            ],
        },
        "list": {
            "kind": "list",
            "data": [{"name": "Alice", "role": "Engineer"}, {"name": "Bob", "role": "Designer"}],
            "mapping": {"primary": "name", "secondary": "role"},
        },
        "form": {
            "kind": "form",
            "fields": [
                {"field": "name", "label": "Name", "type": "text", "required": True},
                {"field": "email", "label": "Email", "type": "email"},
            ],
            "actions": [{"label": "Submit", "action": "submit", "style": "primary"}],
        },
        "confirm": {
            "kind": "confirm",
            "title": "Are you sure?",
            "description": "This action cannot be undone.",
            "actions": [
                {"label": "Confirm", "action": "submit", "style": "danger"},
                {"label": "Cancel", "action": "cancel"},
            ],
        },
        "markdown": {"kind": "markdown", "data": {"content": "# Hello\n\nThis is **markdown** content."}},
        "image": {"kind": "image", "data": {"src": "https://placehold.co/300x200", "alt": "Placeholder image"}},
        "callout": {"kind": "callout", "data": {"message": "This is an informational callout.", "level": "info"}},
        "code": {"kind": "code", "data": {"content": "x = 42\nprint(x)", "language": "python"}},
        "citation": {
            "kind": "citation",
            "data": [{"title": "Project documentation", "url": "https://example.com/docs", "source": "Docs"}],
        },
        "status": {
            "kind": "status",
            "data": [
                {"label": "API", "value": "Operational", "level": "success"},
                {"label": "DB", "value": "Degraded", "level": "warning"},
            ],
        },
        "steps": {
            "kind": "steps",
            "data": [
                {"label": "Data collection", "status": "done"},
                {"label": "Analysis", "status": "active"},
                {"label": "Report", "status": "pending"},
            ],
        },
        "rating": {"kind": "rating", "data": {"value": 4.2}},
        "video": {"kind": "video", "data": {"src": "https://example.com/demo.mp4", "poster": "https://example.com/thumb.jpg"}},
        "gallery": {
            "kind": "gallery",
            "data": [
                {"src": "https://placehold.co/300x200", "alt": "Image 1"},
                {"src": "https://placehold.co/300x200", "alt": "Image 2"},
                {"src": "https://placehold.co/300x200", "alt": "Image 3"},
            ],
        },
        "kv": {"kind": "kv", "data": {"status": "Active", "plan": "Pro", "expires": "2026-03-15"}},
        "actions": {
            "kind": "actions",
            "actions": [{"label": "Analyze", "action": "analyze"}, {"label": "Export", "action": "export", "style": "primary"}],
        },
        "divider": {"kind": "divider"},
        "header": {"kind": "header", "data": {"text": "Section Title"}},
        "compose": {
            "kind": "compose",
            "layout": "grid",
            "children": [
                {"kind": "metric", "data": {"value": 42, "unit": "items"}},
                {"kind": "metric", "data": {"value": 95, "unit": "%"}},
            ],
        },
    }
)

EXAMPLES: Mapping[str, Tuple[WidgetExample, ...]] = MappingProxyType(
    {
        "chart.bar": (
            WidgetExample(
                "Stacked multi-series",
                {
                    "kind": "chart.bar",
                    "data": [
                        {"quarter": "Q1", "product": 80, "service": 40},
                        {"quarter": "Q2", "product": 100, "service": 55},
                        {"quarter": "Q3", "product": 90, "service": 60},
                    ],
                    "mapping": {"x": "quarter", "y": ["product", "service"]},
                    "options": {"stack": True},
                },
            ),
            WidgetExample(
                "Horizontal",
                {
                    "kind": "chart.bar",
                    "data": [{"lang": "JavaScript", "pct": 65}, {"lang": "Python", "pct": 48}, {"lang": "TypeScript", "pct": 35}],
                    "options": {"horizontal": True},
                },
            ),
        ),
        "chart.line": (
            WidgetExample(
                "Smooth multi-series",
                {
                    "kind": "chart.line",
                    "data": [
                        {"day": "Mon", "cpu": 45, "mem": 62},
                        {"day": "Tue", "cpu": 52, "mem": 58},
                        {"day": "Wed", "cpu": 68, "mem": 71},
                    ],
                    "mapping": {"x": "day", "y": ["cpu", "mem"]},
                    "options": {"smooth": True},
                },
            ),
            WidgetExample(
                "Threshold line",
                {
                    "kind": "chart.line",
                    "data": [{"day": "Mon", "latency": 120}, {"day": "Tue", "latency": 180}, {"day": "Wed", "latency": 95}],
                    "options": {"referenceLines": [{"axis": "y", "value": 150, "label": "SLO", "style": "dashed"}]},
                },
            ),
        ),
        "chart.area": (
            WidgetExample(
                "Stacked area",
                {
                    "kind": "chart.area",
                    "data": [
                        {"month": "Jan", "organic": 100, "paid": 60},
                        {"month": "Feb", "organic": 120, "paid": 80},
                        {"month": "Mar", "organic": 110, "paid": 90},
                    ],
                    "mapping": {"x": "month", "y": ["organic", "paid"]},
                    "options": {"stack": True},
                },
            ),
        ),
        "chart.pie": (
            WidgetExample(
                "Donut + custom colors",
                {
                    "kind": "chart.pie",
                    "data": [
                        {"category": "Completed", "count": 42},
                        {"category": "In Progress", "count": 18},
                        {"category": "Blocked", "count": 5},
                    ],
                    "options": {"donut": True, "colors": ["#22c55e", "#f59e0b", "#ef4444"]},
                },
            ),
        ),
        "chart.scatter": (
            WidgetExample(
                "Color groups",
                {
                    "kind": "chart.scatter",
                    "data": [
                        {"height": 170, "weight": 65, "group": "A"},
                        {"height": 175, "weight": 72, "group": "A"},
                        {"height": 160, "weight": 55, "group": "B"},
                        {"height": 180, "weight": 80, "group": "B"},
                    ],
                    "mapping": {"x": "height", "y": "weight", "color": "group"},
                },
            ),
            WidgetExample(
                "Bubble sizes",
                {
                    "kind": "chart.scatter",
                    "data": [{"gdp": 10, "life": 70, "pop": 25}, {"gdp": 40, "life": 78, "pop": 100}],
                    "mapping": {"x": "gdp", "y": "life", "size": "pop"},
                },
            ),
        ),
        "chart.radar": (
            WidgetExample(
                "Multi-person comparison",
                {
                    "kind": "chart.radar",
                    "data": [
                        {"skill": "JS", "alice": 90, "bob": 70},
                        {"skill": "CSS", "alice": 80, "bob": 85},
                        {"skill": "Node", "alice": 75, "bob": 60},
                    ],
                    "mapping": {"axis": "skill", "y": ["alice", "bob"]},
                },
            ),
        ),
        "chart.heatmap": (
            WidgetExample(
                "Custom colorRange",
                {
                    "kind": "chart.heatmap",
                    "data": [
                        {"x": "Mon", "y": "9am", "value": 5},
                        {"x": "Mon", "y": "12pm", "value": 20},
                        {"x": "Tue", "y": "9am", "value": 8},
                        {"x": "Tue", "y": "12pm", "value": 25},
                    ],
                    "mapping": {"x": "x", "y": "y", "value": "value"},
                    "options": {"colorRange": ["#eff6ff", "#3b82f6", "#1e3a5f"]},
                },
            ),
        ),
        "chart.box": (
            WidgetExample(
                "Multi-group",
                {
                    "kind": "chart.box",
                    "data": [
                        {"group": "Setosa", "min": 4.3, "q1": 4.8, "median": 5.0, "q3": 5.2, "max": 5.8},
                        {"group": "Versicolor", "min": 4.9, "q1": 5.6, "median": 5.9, "q3": 6.3, "max": 7.0},
                    ],
                },
            ),
        ),
        "chart.funnel": (
            WidgetExample(
                "Marketing funnel",
                {
                    "kind": "chart.funnel",
                    "data": [
                        {"stage": "Impressions", "count": 10000},
                        {"stage": "Clicks", "count": 3500},
                        {"stage": "Sign-ups", "count": 800},
                        {"stage": "Purchases", "count": 200},
                    ],
                },
            ),
        ),
        "chart.waterfall": (
            WidgetExample(
                "P&L waterfall",
                {
                    "kind": "chart.waterfall",
                    "data": [
                        {"item": "Revenue", "amount": 500},
                        {"item": "COGS", "amount": -200},
                        {"item": "OpEx", "amount": -120},
                        {"item": "Tax", "amount": -50},
                    ],
                },
            ),
        ),
        "chart.treemap": (
            WidgetExample(
                "Nested hierarchy",
                {
                    "kind": "chart.treemap",
                    "data": [
                        {
                            "name": "Engineering",
                            "value": 100,
                            "children": [
                                {"name": "Frontend", "value": 40},
                                {"name": "Backend", "value": 35},
                                {"name": "DevOps", "value": 25},
                            ],
                        },
                        {"name": "Design", "value": 50},
                    ],
                },
            ),
        ),
        "metric": (
            WidgetExample(
                "With prefix/suffix",
                {
                    "kind": "metric",
                    "data": {"value": 4250, "label": "Revenue", "prefix": "$", "suffix": "/mo", "change": 8.3, "trend": "up"},
                },
            ),
        ),
        "gauge": (
            WidgetExample(
                "Threshold colors",
                {
                    "kind": "gauge",
                    "data": {"value": 73},
                    "options": {
                        "min": 0,
                        "max": 100,
                        "unit": "%",
                        "thresholds": [
                            {"to": 50, "color": "green"},
                            {"to": 80, "color": "yellow"},
                            {"to": 100, "color": "red"},
                        ],
                    },
                },
            ),
        ),
        "table": (
            WidgetExample(
                "Formatted columns",
                {
                    "kind": "table",
                    "data": [
                        {"name": "Alice", "role": "Engineer", "salary": 95000},
                        {"name": "Bob", "role": "Designer", "salary": 82000},
                    ],
                    "mapping": {
                        "columns": [
                            {"field": "name", "label": "Name"},
                            {"field": "role", "label": "Role"},
                            {"field": "salary", "label": "Salary", "format": "currency", "align": "right"},
                        ]
                    },
                },
            ),
        ),
        "list": (
            WidgetExample(
                "Avatar + trailing",
                {
                    "kind": "list",
                    "data": [
                        {"name": "Alice Kim", "role": "Engineer", "hours": "32h"},
                        {"name": "Bob Park", "role": "Designer", "hours": "28h"},
                    ],
                    "mapping": {"primary": "name", "secondary": "role", "trailing": "hours"},
                },
            ),
        ),
        "form": (
            WidgetExample(
                "Validation + choices",
                {
                    "kind": "form",
                    "fields": [
                        {"field": "username", "label": "Username", "type": "text", "required": True, "maxLength": 20},
                        {"field": "email", "label": "Email", "type": "email", "required": True},
                        {"field": "plan", "label": "Plan", "type": "radio", "options": ["Free", "Pro", "Enterprise"]},
                    ],
                    "actions": [{"label": "Register", "action": "submit", "style": "primary"}],
                },
            ),
        ),
        "steps": (
            WidgetExample(
                "Horizontal layout",
                {
                    "kind": "steps",
                    "data": [
                        {"label": "Upload", "status": "done"},
                        {"label": "Process", "status": "active"},
                        {"label": "Deploy", "status": "pending"},
                    ],
                    "options": {"layout": "horizontal"},
                },
            ),
        ),
        "kv": (
            WidgetExample(
                "Horizontal layout",
                {"kind": "kv", "data": {"CPU": "72%", "Memory": "4.2 GB", "Disk": "85%"}, "options": {"layout": "horizontal"}},
            ),
        ),
        "divider": (WidgetExample("With label", {"kind": "divider", "options": {"label": "Related items"}}),),
        "compose": (
            WidgetExample(
                "Grid dashboard",
                {
                    "kind": "compose",
                    "layout": "grid",
                    "columns": 2,
                    "children": [
                        {"kind": "metric", "data": {"value": 99.9, "unit": "%", "label": "Uptime"}},
                        {"kind": "metric", "data": {"value": 142, "label": "Requests/s"}},
                        {"kind": "progress", "data": {"value": 680, "max": 1000}, "span": 2},
                    ],
                },
            ),
        ),
    }
)


def known_kinds() -> List[str]:
    return [info.kind for info in CATALOG]


def get_info(kind: str) -> Optional[WidgetInfo]:
    return _BY_KIND.get(kind)


def is_family_member(kind: str, family: str = CHART_FAMILY) -> bool:
    """True when `kind` sits under the dotted `family` prefix (``chart.bar`` yes, ``bar`` no)."""

    return kind.startswith(family) and len(kind) > len(family)


def data_shape(kind: str) -> Optional[DataShape]:
    """Resolve the expected data container for a kind by exact name, then by dotted family."""

    info = _BY_KIND.get(kind)
    if info is not None:
        return info.data_shape
    if is_family_member(kind):
        return "array"
    return None


def _matches_prefix(kind: str, prefix: str) -> bool:
    if prefix.endswith("."):
        return is_family_member(kind, prefix)
    return is_family_member(kind, prefix + ".")


def _build_detail(info: WidgetInfo) -> WidgetDetail:
    kind = info.kind
    mapping_docs = {key: MAPPING_DOCS[key] for key in info.mapping_keys if key in MAPPING_DOCS}
    option_docs = {key: OPTION_DOCS[key] for key in WIDGET_OPTIONS.get(kind, ()) if key in OPTION_DOCS}

    examples: List[WidgetExample] = []
    if kind in TEMPLATES:
        examples.append(WidgetExample("Minimal", deepcopy(TEMPLATES[kind])))
    for example in EXAMPLES.get(kind, ()):
        examples.append(WidgetExample(example.label, deepcopy(example.spec)))

    is_input = kind in {"form", "confirm"}
    return WidgetDetail(
        kind=kind,
        category=info.category,
        description=info.description,
        mapping_keys=info.mapping_keys,
        data_shape=info.data_shape,
        auto_inference=WIDGET_INFERENCE.get(kind, ""),
        data_fields=WIDGET_DATA_FIELDS.get(kind, ()),
        mapping_docs=mapping_docs,
        option_docs=option_docs,
        events=get_widget_events(kind),
        examples=examples,
        field_docs=dict(FIELD_PROP_DOCS) if is_input else None,
        action_docs=dict(ACTION_PROP_DOCS) if is_input else None,
    )


def lookup(name: Optional[str] = None) -> Union[List[WidgetInfo], WidgetDetail]:
    """Describe the catalog.

    - no name: every kind, in catalog order
    - exact kind name: a full ``WidgetDetail``
    - category name (``"chart"``, ``"display"`` ...): the kinds in that category
    - dotted family prefix (``"chart."``): the members of that family
    """

    if not name:
        return list(CATALOG)

    exact = _BY_KIND.get(name)
    if exact is not None:
        return _build_detail(exact)

    by_category = [info for info in CATALOG if info.category == name]
    if by_category:
        return by_category

    return [info for info in CATALOG if _matches_prefix(info.kind, name)]


def template(kind: str) -> Optional[Dict[str, Any]]:
    """Return a fresh copy of the minimal starter spec for `kind`, or None when unknown."""

    starter = TEMPLATES.get(kind)
    if starter is None:
        return None
    return deepcopy(starter)
