"""scopegen data model."""

from .acquisition import Acquisition, GeneratedFile, GenerationResult
from .counters import Counter, ParsedCounter, TemplateValidation
from .project import (
    DEFAULT_GLOBAL_SETTINGS,
    GlobalSettings,
    Pattern,
    ProjectConfig,
    ScopeFile,
    SymbolTemplate,
    new_id,
)
from .samples import DEFAULT_SAMPLES, Sample
from .types import DATA_TYPE_SIZES, DataType, variable_size_for

__all__ = [
    "Acquisition",
    "Counter",
    "DATA_TYPE_SIZES",
    "DEFAULT_GLOBAL_SETTINGS",
    "DEFAULT_SAMPLES",
    "DataType",
    "GeneratedFile",
    "GenerationResult",
    "GlobalSettings",
    "ParsedCounter",
    "Pattern",
    "ProjectConfig",
    "Sample",
    "ScopeFile",
    "SymbolTemplate",
    "TemplateValidation",
    "new_id",
    "variable_size_for",
]
