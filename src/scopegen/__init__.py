"""scopegen — counter templates to TwinCAT Scope configurations.

Entry points::

    from scopegen import validate_template, calculate_expansion_count
    from scopegen import build_output_set, GlobalSettings, ScopeFile
"""

from scopegen.export import build_output_set, generate_project
from scopegen.model import (
    DataType,
    GenerationResult,
    GlobalSettings,
    Pattern,
    ProjectConfig,
    ScopeFile,
    SymbolTemplate,
)
from scopegen.patterns import (
    calculate_expansion_count,
    expand_all_symbols,
    validate_template,
)

__all__ = [
    "DataType",
    "GenerationResult",
    "GlobalSettings",
    "Pattern",
    "ProjectConfig",
    "ScopeFile",
    "SymbolTemplate",
    "build_output_set",
    "calculate_expansion_count",
    "expand_all_symbols",
    "generate_project",
    "validate_template",
]
