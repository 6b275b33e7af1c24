from __future__ import annotations

from typing import Any, Dict, Optional


def normalize_mapping(mapping: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Copy of `mapping` with ``y`` always a list."""

    result = dict(mapping or {})
    y = result.get("y")
    if isinstance(y, str):
        result["y"] = [y]
    elif isinstance(y, (list, tuple)):
        result["y"] = list(y)
    else:
        # anything else cannot name a field
        result.pop("y", None)
    return result


def normalize(spec: Dict[str, Any]) -> Dict[str, Any]:
    """Return a normalized copy of a validated spec.

    A legacy ``mapping.fields`` list is lifted to top-level ``fields`` unless
    the spec already has its own. ``formdown`` is left for the form parser.
    """

    result = dict(spec)
    mapping = result.get("mapping")
    if isinstance(mapping, dict) and "fields" in mapping and "fields" not in result and "formdown" not in result:
        rest = {key: value for key, value in mapping.items() if key != "fields"}
        result["fields"] = mapping["fields"]
        if rest:
            result["mapping"] = rest
        else:
            result.pop("mapping")
    return result
