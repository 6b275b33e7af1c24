"""
Widget spec validator.

Checks the structure of a raw widget spec before anything else touches it:
- required ``kind`` discriminator
- mutually exclusive ``fields`` / ``formdown``
- compose children (recursively, with a nesting limit) and layout
- field and action definitions
- data container shape per kind
- mapping references against the first data record (warnings only)

Errors make the spec unusable. Warnings are informational and never block
rendering, since a typo in a mapping should not blank the widget.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.settings import get_settings
from .catalog import data_shape, get_info
from .suggest import suggest_kind
from .widget_meta import FIELD_TYPES

logger = logging.getLogger(__name__)

SPEC_TYPE = "widget-spec"
COMPOSE_KIND = "compose"
COMPOSE_LAYOUTS = ("stack", "row", "grid")


@dataclass
class ValidationResult:
    """Result of widget spec validation."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors), "warnings": list(self.warnings)}


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _data_keys(data: Any) -> Optional[List[str]]:
    if isinstance(data, list):
        if data and isinstance(data[0], dict):
            return list(data[0].keys())
        return None
    if isinstance(data, dict):
        return list(data.keys())
    return None


def _check_data_shape(kind: str, data: Any, errors: List[str]) -> None:
    shape = data_shape(kind)
    if shape is None or data is None:
        return
    if shape == "array":
        if not isinstance(data, list):
            errors.append(f'"{kind}" expects "data" to be an array, got {_type_name(data)}')
    elif not isinstance(data, dict):
        errors.append(f'"{kind}" expects "data" to be an object, got {_type_name(data)}')


def _check_mapping_refs(mapping: Dict[str, Any], data: Any, warnings: List[str]) -> None:
    keys = _data_keys(data)
    if keys is None:
        return
    known = set(keys)
    listing = ", ".join(str(key) for key in keys)

    def _missing(role: str, name: str) -> None:
        warnings.append(f'mapping.{role} references "{name}" which is not found in data keys [{listing}]')

    for role, ref in mapping.items():
        if isinstance(ref, str):
            if ref not in known:
                _missing(role, ref)
        elif isinstance(ref, list):
            for item in ref:
                if isinstance(item, str) and item not in known:
                    _missing(role, item)
                elif isinstance(item, dict) and isinstance(item.get("field"), str) and item["field"] not in known:
                    _missing(role, item["field"])


def _check_children(doc: Dict[str, Any], depth: int, max_depth: int, errors: List[str], warnings: List[str]) -> None:
    children = doc.get("children")
    if not isinstance(children, list) or not children:
        errors.append(f'"{COMPOSE_KIND}" requires a non-empty "children" array')
        return
    if depth + 1 > max_depth:
        errors.append(f"nesting depth exceeds the maximum of {max_depth}")
        return
    for idx, child in enumerate(children):
        child_errors: List[str] = []
        child_warnings: List[str] = []
        _check_spec(child, depth + 1, max_depth, child_errors, child_warnings)
        errors.extend(f"children[{idx}]: {msg}" for msg in child_errors)
        warnings.extend(f"children[{idx}]: {msg}" for msg in child_warnings)


def _check_spec(doc: Any, depth: int, max_depth: int, errors: List[str], warnings: List[str]) -> None:
    if not isinstance(doc, dict):
        errors.append("Spec must be a non-null object")
        return

    kind = doc.get("kind")
    if not isinstance(kind, str) or not kind:
        errors.append('Required field "kind" must be a non-empty string')
        return

    if "type" in doc and doc["type"] != SPEC_TYPE:
        errors.append(f'"type" must be "{SPEC_TYPE}" if specified')

    if "fields" in doc and "formdown" in doc:
        errors.append('"fields" and "formdown" are mutually exclusive')

    if get_info(kind) is None:
        hint = suggest_kind(kind)
        message = f'Unknown kind "{kind}"'
        warnings.append(f'{message}. Did you mean "{hint}"?' if hint else message)

    if kind == COMPOSE_KIND:
        _check_children(doc, depth, max_depth, errors, warnings)
        layout = doc.get("layout")
        if layout is not None and layout not in COMPOSE_LAYOUTS:
            errors.append(f'"layout" must be one of: {", ".join(COMPOSE_LAYOUTS)}')

    fields = doc.get("fields")
    if isinstance(fields, list):
        for idx, item in enumerate(fields):
            if not isinstance(item, dict) or not isinstance(item.get("field"), str):
                errors.append(f'fields[{idx}] must have a "field" string property')
                continue
            ftype = item.get("type")
            if ftype is not None and ftype not in FIELD_TYPES:
                warnings.append(f'fields[{idx}].type "{ftype}" is not a recognized field type')

    actions = doc.get("actions")
    if isinstance(actions, list):
        for idx, item in enumerate(actions):
            if not isinstance(item, dict) or not isinstance(item.get("label"), str):
                errors.append(f'actions[{idx}] must have a "label" string property')

    data = doc.get("data")
    _check_data_shape(kind, data, errors)

    mapping = doc.get("mapping")
    if isinstance(mapping, dict) and data:
        _check_mapping_refs(mapping, data, warnings)


def validate(doc: Any, *, max_depth: Optional[int] = None) -> ValidationResult:
    """Validate a raw widget spec. Never raises; always returns both message lists."""

    limit = max_depth if max_depth is not None else get_settings().max_depth
    errors: List[str] = []
    warnings: List[str] = []
    _check_spec(doc, 0, limit, errors, warnings)

    result = ValidationResult(valid=not errors, errors=errors, warnings=warnings)
    logger.debug("validate: valid=%s errors=%d warnings=%d", result.valid, len(errors), len(warnings))
    return result


def is_widget_spec(doc: Any) -> bool:
    return validate(doc).valid
