from __future__ import annotations

import logging
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .catalog import is_family_member
from .compiler import compile_chart, to_jsonable
from .inference import infer
from .normalize import normalize
from .validator import COMPOSE_KIND, validate

logger = logging.getLogger(__name__)


@dataclass
class ResolvedWidget:
    """A spec carried through validate → normalize → infer → compile."""

    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    spec: Optional[Dict[str, Any]] = None
    mapping_inferred: bool = False
    config: Optional[Dict[str, Any]] = None
    children: List["ResolvedWidget"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "spec": self.spec,
            "mapping_inferred": self.mapping_inferred,
            "config": to_jsonable(self.config) if self.config is not None else None,
            "children": [child.to_dict() for child in self.children],
        }


def _resolve_valid(doc: Dict[str, Any]) -> ResolvedWidget:
    spec = normalize(doc)
    kind = spec["kind"]

    inferred = False
    if "mapping" not in spec and spec.get("data") is not None:
        mapping = infer(kind, spec["data"])
        if mapping is not None:
            spec["mapping"] = mapping
            inferred = True

    config = compile_chart(spec) if is_family_member(kind) else None

    children: List[ResolvedWidget] = []
    if kind == COMPOSE_KIND:
        children = [_resolve_valid(child) for child in spec.get("children", [])]
        spec["children"] = [child.spec for child in children]

    return ResolvedWidget(valid=True, spec=spec, mapping_inferred=inferred, config=config, children=children)


def resolve(doc: Any, *, max_depth: Optional[int] = None) -> ResolvedWidget:
    """Validate and prepare a raw spec for rendering.

    The input is never mutated. An invalid spec comes back with its errors and
    no spec or config; compose children are resolved recursively.
    """

    result = validate(doc, max_depth=max_depth)
    if not result.valid:
        logger.info("resolve: rejected spec with %d error(s): %s", len(result.errors), result.errors[0])
        return ResolvedWidget(valid=False, errors=result.errors, warnings=result.warnings)

    resolved = _resolve_valid(deepcopy(doc))
    resolved.warnings = result.warnings
    return resolved
