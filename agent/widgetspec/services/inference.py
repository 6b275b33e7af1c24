from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .catalog import CHART_FAMILY

Record = Dict[str, Any]
Mapping = Dict[str, Any]

CATEGORY_KINDS = {"chart.bar", "chart.line", "chart.area", "chart.waterfall", "chart.box"}
PROPORTION_KINDS = {"chart.pie", "chart.funnel"}
BOX_STATS = ("min", "q1", "median", "q3", "max")


class FieldClass(str, Enum):
    string = "string"
    number = "number"
    boolean = "boolean"
    other = "other"


def classify(value: Any) -> FieldClass:
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return FieldClass.boolean
    if isinstance(value, (int, float)):
        return FieldClass.number
    if isinstance(value, str):
        return FieldClass.string
    return FieldClass.other


def fields_of(record: Record, cls: FieldClass) -> List[str]:
    """Keys of `record` whose values fall in `cls`, in declaration order."""

    return [key for key, value in record.items() if classify(value) is cls]


def _scalar_or_list(names: List[str]) -> Union[str, List[str]]:
    return names[0] if len(names) == 1 else list(names)


def _infer_category(strings: List[str], numbers: List[str]) -> Optional[Mapping]:
    if not strings or not numbers:
        return None
    return {"x": strings[0], "y": _scalar_or_list(numbers)}


def _infer_scatter(strings: List[str], numbers: List[str]) -> Optional[Mapping]:
    if strings:
        return _infer_category(strings, numbers)
    if len(numbers) < 2:
        return None
    return {"x": numbers[0], "y": _scalar_or_list(numbers[1:])}


def _infer_heatmap(strings: List[str], numbers: List[str]) -> Optional[Mapping]:
    if len(strings) < 2 or not numbers:
        return None
    return {"x": strings[0], "y": strings[1], "value": numbers[0]}


def _infer_chart(kind: str, strings: List[str], numbers: List[str]) -> Optional[Mapping]:
    if kind in PROPORTION_KINDS:
        if strings and numbers:
            return {"label": strings[0], "value": numbers[0]}
        return None
    if kind == "chart.radar":
        if strings and numbers:
            return {"axis": strings[0], "value": numbers[0]}
        return None
    if kind == "chart.scatter":
        return _infer_scatter(strings, numbers)
    if kind == "chart.heatmap":
        return _infer_heatmap(strings, numbers)
    if kind == "chart.box" and strings and all(name in numbers for name in BOX_STATS):
        return {"x": strings[0], "y": list(BOX_STATS)}
    if kind in CATEGORY_KINDS:
        return _infer_category(strings, numbers)
    return None


def infer(kind: str, data: Union[Record, List[Record], None]) -> Optional[Mapping]:
    """Propose a mapping for `kind` from the shape of the first data record.

    Returns None whenever nothing confident can be said: no data, an empty
    record, no field of a usable type, or a kind that does not use mappings.
    """

    if data is None:
        return None
    records = data if isinstance(data, list) else [data]
    if not records or not isinstance(records[0], dict):
        return None

    sample = records[0]
    if not sample:
        return None

    strings = fields_of(sample, FieldClass.string)
    numbers = fields_of(sample, FieldClass.number)

    if kind.startswith(CHART_FAMILY):
        return _infer_chart(kind, strings, numbers)

    if kind == "table":
        return {"columns": [{"field": key} for key in sample]}

    if kind == "list":
        if not strings:
            return None
        mapping: Mapping = {"primary": strings[0]}
        if len(strings) > 1:
            mapping["secondary"] = strings[1]
        return mapping

    return None
