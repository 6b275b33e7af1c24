from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Path

from ..schemas.widget import (
    KIND_MAX_LENGTH,
    AutoSpecRequest,
    AutoSpecResponse,
    CompileRequest,
    CompileResponse,
    HelpResponse,
    InferRequest,
    InferResponse,
    ResolveResponse,
    SpecRequest,
    SuggestMappingRequest,
    SuggestMappingResponse,
    SurfaceRequest,
    SurfaceResponse,
    TemplateResponse,
    ValidateResponse,
)
from ..services import (
    auto_spec,
    compile_chart,
    infer,
    known_kinds,
    lookup,
    resolve,
    spec_surface,
    suggest_kind,
    suggest_mapping,
    template,
    to_jsonable,
    validate,
)
from ..services.catalog import WidgetDetail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/widgets", tags=["widgets"])


def _unknown_kind(name: str) -> HTTPException:
    hint = suggest_kind(name)
    detail = f"Unknown widget kind '{name}'."
    if hint:
        detail += f" Did you mean '{hint}'?"
    else:
        detail += f" Known kinds: {', '.join(known_kinds())}"
    return HTTPException(status_code=404, detail=detail)


@router.get("/help", response_model=HelpResponse)
async def help_all() -> Dict[str, Any]:
    return {"kinds": [asdict(info) for info in lookup()]}


@router.get("/help/{name}", response_model=HelpResponse)
async def help_for(name: str = Path(..., max_length=KIND_MAX_LENGTH)) -> Dict[str, Any]:
    found = lookup(name)
    if isinstance(found, WidgetDetail):
        detail = asdict(found)
        summary = {key: detail[key] for key in ("kind", "category", "description", "mapping_keys", "data_shape")}
        return {"kinds": [summary], "detail": detail}
    if not found:
        raise _unknown_kind(name)
    return {"kinds": [asdict(info) for info in found]}


@router.get("/template/{kind}", response_model=TemplateResponse)
async def get_template(kind: str = Path(..., max_length=KIND_MAX_LENGTH)) -> Dict[str, Any]:
    starter = template(kind)
    if starter is None:
        raise _unknown_kind(kind)
    return {"kind": kind, "spec": starter}


@router.post("/validate", response_model=ValidateResponse)
async def validate_spec(payload: SpecRequest) -> Dict[str, Any]:
    return validate(payload.spec, max_depth=payload.max_depth).to_dict()


@router.post("/infer", response_model=InferResponse)
async def infer_mapping(payload: InferRequest) -> Dict[str, Any]:
    return {"kind": payload.kind, "mapping": infer(payload.kind, payload.data)}


@router.post("/compile", response_model=CompileResponse)
async def compile_spec(payload: CompileRequest) -> Dict[str, Any]:
    return {"config": to_jsonable(compile_chart(payload.spec))}


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_spec(payload: SpecRequest) -> Dict[str, Any]:
    return resolve(payload.spec, max_depth=payload.max_depth).to_dict()


@router.post("/suggest_mapping", response_model=SuggestMappingResponse)
async def suggest(payload: SuggestMappingRequest) -> Dict[str, Any]:
    suggestions = suggest_mapping(payload.data, payload.kind)
    return {"suggestions": [item.to_dict() for item in suggestions]}


@router.post("/auto_spec", response_model=AutoSpecResponse)
async def build_auto_spec(payload: AutoSpecRequest) -> Dict[str, Any]:
    spec = auto_spec(payload.data)
    if spec is None:
        raise HTTPException(status_code=422, detail="Could not suggest a widget for this data shape.")
    logger.info("auto_spec: picked %s", spec["kind"])
    return {"spec": spec}


@router.post("/surface", response_model=SurfaceResponse)
async def surface(payload: SurfaceRequest) -> Dict[str, Any]:
    return spec_surface(payload.specs, payload.kind).to_dict()
