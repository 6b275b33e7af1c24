"""
Suggest a widget kind and mapping from raw data alone.

Looks at the shape of the data (object vs. records, and the string / number
fields of the first record) and ranks the kinds that would render it well.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .inference import FieldClass, fields_of, infer

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}")
_US_DATE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")
_SLASH_DATE = re.compile(r"^\d{4}/\d{2}/\d{2}$")
_MONTH_NAME = re.compile(r"^(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)", re.IGNORECASE)

# Confidences for a constrained request (`kind` given).
INFERRED_CONFIDENCE = 0.8
FALLBACK_CONFIDENCE = 0.3


@dataclass
class MappingSuggestion:
    kind: str
    confidence: float
    reason: str
    mapping: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"kind": self.kind, "confidence": self.confidence, "reason": self.reason}
        if self.mapping is not None:
            out["mapping"] = self.mapping
        return out


def is_date_like(value: Any) -> bool:
    if not isinstance(value, str) or not 6 <= len(value) <= 30:
        return False
    return bool(
        _ISO_DATE.match(value) or _US_DATE.match(value) or _SLASH_DATE.match(value) or _MONTH_NAME.match(value)
    )


@dataclass
class _Shape:
    is_array: bool
    keys: List[str]
    strings: List[str]
    numbers: List[str]
    sample: Dict[str, Any] = field(default_factory=dict)


def _shape_of(data: Any) -> Optional[_Shape]:
    if data is None:
        return None
    records = data if isinstance(data, list) else [data]
    if not records or not isinstance(records[0], dict) or not records[0]:
        return None
    sample = records[0]
    return _Shape(
        is_array=isinstance(data, list),
        keys=list(sample),
        strings=fields_of(sample, FieldClass.string),
        numbers=fields_of(sample, FieldClass.number),
        sample=sample,
    )


def _record_candidates(data: List[Dict[str, Any]], shape: _Shape) -> List[MappingSuggestion]:
    out: List[MappingSuggestion] = []
    strings, numbers = shape.strings, shape.numbers

    def add(kind: str, confidence: float, reason: str, *, require_mapping: bool = False, mapped: bool = True) -> None:
        mapping = infer(kind, data) if mapped else None
        if require_mapping and mapping is None:
            return
        out.append(MappingSuggestion(kind=kind, confidence=confidence, reason=reason, mapping=mapping))

    if strings and numbers:
        add("chart.bar", 0.9 if len(numbers) == 1 else 0.7, "Category × value pattern detected")
    if strings and len(numbers) >= 2:
        add("chart.line", 0.8, "Category × multiple values pattern detected (multi-series)")
    if strings and numbers and any(is_date_like(shape.sample[key]) for key in strings):
        add("chart.area", 0.75, "Date-like category field detected, suitable for a time-series area chart")
    if strings and len(numbers) == 1:
        add("chart.pie", 0.6, "Label + value pattern could work as proportions")
    if len(numbers) >= 2 and not strings:
        add("chart.scatter", 0.85, "All-numeric data is ideal for a scatter plot")
    if len(shape.keys) >= 2:
        add("table", 0.75, "Multi-field array renders well as a table")
    if strings:
        add("list", 0.5, "String fields can display as a list")
    if strings and len(numbers) >= 2:
        add("chart.radar", 0.6, "Category × multiple values can display as a radar chart", require_mapping=True)
    if len(strings) >= 2 and numbers:
        add("chart.heatmap", 0.65, "Two categories × value pattern suits a heatmap", require_mapping=True)
    if len(numbers) >= 5:
        add("chart.box", 0.7, "Five or more numeric fields fit a box plot (min/q1/median/q3/max)", require_mapping=True)
    if strings and len(numbers) == 1:
        add("chart.funnel", 0.45, "Label + value pattern can display as a funnel", require_mapping=True)
    if strings and numbers:
        add("chart.waterfall", 0.4, "Category × value pattern can display as a waterfall chart", require_mapping=True)
    if "label" in shape.keys and "value" in shape.keys:
        add("stat-group", 0.85, 'Array with "label" and "value" keys matches the stat-group pattern', mapped=False)
    return out


def _object_candidates(shape: _Shape) -> List[MappingSuggestion]:
    out: List[MappingSuggestion] = []
    if "value" not in shape.numbers:
        return out
    out.append(MappingSuggestion("metric", 0.95, 'Object data with "value" key is ideal for a metric widget'))
    if "min" in shape.numbers or "max" in shape.numbers:
        out.append(MappingSuggestion("progress", 0.85, 'Object with "value" and "min"/"max" is ideal for a progress bar'))
    out.append(MappingSuggestion("gauge", 0.7, 'Object with "value" can display as a gauge'))
    return out


def suggest_mapping(data: Any, kind: Optional[str] = None) -> List[MappingSuggestion]:
    """Ranked kind/mapping suggestions for `data`, best first.

    With `kind`, only a mapping for that kind is proposed.
    """

    shape = _shape_of(data)
    if shape is None:
        return []

    if kind:
        mapping = infer(kind, data)
        if mapping is not None:
            return [MappingSuggestion(kind, INFERRED_CONFIDENCE, f"Auto-inferred mapping for {kind}", mapping)]
        return [
            MappingSuggestion(kind, FALLBACK_CONFIDENCE, f"No mapping could be inferred for {kind} from this data shape")
        ]

    suggestions = _record_candidates(data, shape) if shape.is_array else _object_candidates(shape)
    # sorted() is stable, so ties keep discovery order
    return sorted(suggestions, key=lambda item: -item.confidence)


def auto_spec(data: Any) -> Optional[Dict[str, Any]]:
    """A ready-to-render spec built from the top suggestion, or None."""

    suggestions = suggest_mapping(data)
    if not suggestions:
        return None
    top = suggestions[0]
    spec: Dict[str, Any] = {"kind": top.kind, "data": data}
    if top.mapping:
        spec["mapping"] = top.mapping
    return spec
