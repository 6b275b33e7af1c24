from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .widget_meta import DATA_FIELD_DOCS, FIELD_PROP_DOCS, MAPPING_DOCS, OPTION_DOCS, get_widget_events


@dataclass
class PropInfo:
    key: str
    type: str
    desc: Optional[str] = None


@dataclass
class SpecSurface:
    """Every property actually used by a set of specs, with registry descriptions."""

    spec_keys: List[str] = field(default_factory=list)
    data_fields: List[PropInfo] = field(default_factory=list)
    mapping_keys: List[PropInfo] = field(default_factory=list)
    option_keys: List[PropInfo] = field(default_factory=list)
    field_props: List[PropInfo] = field(default_factory=list)
    field_types: List[str] = field(default_factory=list)
    action_styles: List[str] = field(default_factory=list)
    events: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def type_label(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, list):
        if not value:
            return "array"
        first = value[0]
        if isinstance(first, dict):
            return "object[]"
        return f"{_scalar_label(first)}[]"
    return _scalar_label(value)


def _scalar_label(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return "object"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def _with_docs(types: Dict[str, str], docs: Mapping[str, str]) -> List[PropInfo]:
    return [PropInfo(key=key, type=label, desc=docs.get(key)) for key, label in types.items()]


def _items(spec: Dict[str, Any], key: str) -> List[Any]:
    value = spec.get(key)
    return value if isinstance(value, list) else []


def _collect_data(data: Any, out: Dict[str, str]) -> None:
    records = data if isinstance(data, list) else [data]
    for record in records:
        if isinstance(record, dict):
            for key, value in record.items():
                out[key] = type_label(value)


def spec_surface(specs: Iterable[Dict[str, Any]], kind: Optional[str] = None) -> SpecSurface:
    """Scan `specs` and report every key they use.

    If a spec uses a property, the surface reports it. Later specs overwrite
    the type label of a key seen earlier; key order is first appearance.
    """

    spec_keys: Dict[str, None] = {}
    data_types: Dict[str, str] = {}
    mapping_types: Dict[str, str] = {}
    option_types: Dict[str, str] = {}
    field_prop_types: Dict[str, str] = {}
    field_types: Dict[str, None] = {}
    action_styles: Dict[str, None] = {}

    for spec in specs:
        if not isinstance(spec, dict):
            continue
        for key in spec:
            if key != "kind":
                spec_keys[key] = None

        _collect_data(spec.get("data"), data_types)

        mapping = spec.get("mapping")
        if isinstance(mapping, dict):
            for key, value in mapping.items():
                mapping_types[key] = "string[]" if isinstance(value, list) else _scalar_label(value)

        options = spec.get("options")
        if isinstance(options, dict):
            for key, value in options.items():
                option_types[key] = type_label(value)

        for item in _items(spec, "fields"):
            if not isinstance(item, dict):
                continue
            for key, value in item.items():
                field_prop_types[key] = "string[]" if key == "options" else type_label(value)
            if isinstance(item.get("type"), str):
                field_types[item["type"]] = None

        for action in _items(spec, "actions"):
            if isinstance(action, dict) and isinstance(action.get("style"), str):
                action_styles[action["style"]] = None

    return SpecSurface(
        spec_keys=list(spec_keys),
        data_fields=_with_docs(data_types, DATA_FIELD_DOCS),
        mapping_keys=_with_docs(mapping_types, MAPPING_DOCS),
        option_keys=_with_docs(option_types, OPTION_DOCS),
        field_props=_with_docs(field_prop_types, FIELD_PROP_DOCS),
        field_types=list(field_types),
        action_styles=list(action_styles),
        events=get_widget_events(kind) if kind else (),
    )
