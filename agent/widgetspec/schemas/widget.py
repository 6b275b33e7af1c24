from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

KIND_MAX_LENGTH = 100


class WidgetInfoModel(BaseModel):
    kind: str
    category: str
    description: str
    mapping_keys: List[str]
    data_shape: str


class DataFieldModel(BaseModel):
    key: str
    type: str
    desc: str
    required: bool = False


class WidgetExampleModel(BaseModel):
    label: str
    spec: Dict[str, Any]


class WidgetDetailModel(WidgetInfoModel):
    auto_inference: str
    data_fields: List[DataFieldModel]
    mapping_docs: Dict[str, str]
    option_docs: Dict[str, str]
    events: List[str]
    examples: List[WidgetExampleModel]
    field_docs: Optional[Dict[str, str]] = None
    action_docs: Optional[Dict[str, str]] = None


class HelpResponse(BaseModel):
    kinds: List[WidgetInfoModel]
    detail: Optional[WidgetDetailModel] = None


class TemplateResponse(BaseModel):
    kind: str
    spec: Dict[str, Any]


class SpecRequest(BaseModel):
    spec: Any = Field(..., description="Raw widget spec document.")
    max_depth: Optional[int] = Field(None, ge=1, description="Override for the composition nesting limit.")


class ValidateResponse(BaseModel):
    valid: bool
    errors: List[str]
    warnings: List[str]


class InferRequest(BaseModel):
    kind: str = Field(..., min_length=1, max_length=KIND_MAX_LENGTH)
    data: Any = None


class InferResponse(BaseModel):
    kind: str
    mapping: Optional[Dict[str, Any]]


class CompileRequest(BaseModel):
    spec: Dict[str, Any]


class CompileResponse(BaseModel):
    config: Dict[str, Any]


class ResolveResponse(BaseModel):
    valid: bool
    errors: List[str]
    warnings: List[str]
    spec: Optional[Dict[str, Any]] = None
    mapping_inferred: bool = False
    config: Optional[Dict[str, Any]] = None
    children: List[ResolveResponse] = Field(default_factory=list)


ResolveResponse.model_rebuild()


class SuggestMappingRequest(BaseModel):
    data: Any
    kind: Optional[str] = Field(None, max_length=KIND_MAX_LENGTH)


class SuggestionModel(BaseModel):
    kind: str
    confidence: float
    reason: str
    mapping: Optional[Dict[str, Any]] = None


class SuggestMappingResponse(BaseModel):
    suggestions: List[SuggestionModel]


class AutoSpecRequest(BaseModel):
    data: Any


class AutoSpecResponse(BaseModel):
    spec: Dict[str, Any]


class SurfaceRequest(BaseModel):
    specs: List[Dict[str, Any]]
    kind: Optional[str] = Field(None, max_length=KIND_MAX_LENGTH)


class PropInfoModel(BaseModel):
    key: str
    type: str
    desc: Optional[str] = None


class SurfaceResponse(BaseModel):
    spec_keys: List[str]
    data_fields: List[PropInfoModel]
    mapping_keys: List[PropInfoModel]
    option_keys: List[PropInfoModel]
    field_props: List[PropInfoModel]
    field_types: List[str]
    action_styles: List[str]
    events: List[str]
