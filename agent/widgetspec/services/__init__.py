from .catalog import known_kinds, lookup, template
from .compiler import compile_chart, deep_merge, to_jsonable
from .inference import infer
from .normalize import normalize, normalize_mapping
from .pipeline import ResolvedWidget, resolve
from .suggest import suggest_kind
from .suggest_mapping import MappingSuggestion, auto_spec, is_date_like, suggest_mapping
from .surface import SpecSurface, spec_surface
from .validator import ValidationResult, is_widget_spec, validate

__all__ = [
    "known_kinds",
    "lookup",
    "template",
    "compile_chart",
    "deep_merge",
    "to_jsonable",
    "infer",
    "normalize",
    "normalize_mapping",
    "ResolvedWidget",
    "resolve",
    "suggest_kind",
    "MappingSuggestion",
    "auto_spec",
    "is_date_like",
    "suggest_mapping",
    "SpecSurface",
    "spec_surface",
    "ValidationResult",
    "is_widget_spec",
    "validate",
]
