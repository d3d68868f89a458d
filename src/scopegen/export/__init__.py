"""scopegen export — TwinCAT Scope documents from scope files.

Public API::

    from scopegen.export import build_output_set
    result = build_output_set(settings, scope_files)
    for file_name, content in result.iter_files():
        ...
"""

from ._acquisitions import synthesize_acquisitions
from ._output import build_output_set, generate_project
from ._xml import escape_xml
from .tcmproj import MANIFEST_EXTENSION, manifest_file_name, render_manifest_document
from .tcscopex import PRIMARY_EXTENSION, render_primary_document

__all__ = [
    "MANIFEST_EXTENSION",
    "PRIMARY_EXTENSION",
    "build_output_set",
    "escape_xml",
    "generate_project",
    "manifest_file_name",
    "render_manifest_document",
    "render_primary_document",
    "synthesize_acquisitions",
]
