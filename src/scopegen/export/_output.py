"""Output set assembly: scope files in, named documents out."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from scopegen.model.acquisition import Acquisition, GeneratedFile, GenerationResult
from scopegen.model.project import GlobalSettings, ProjectConfig, ScopeFile

from ._acquisitions import synthesize_acquisitions
from .tcmproj import manifest_file_name, render_manifest_document
from .tcscopex import PRIMARY_EXTENSION, render_primary_document

logger = logging.getLogger(__name__)


def build_output_set(
    settings: GlobalSettings, scope_files: Sequence[ScopeFile]
) -> GenerationResult:
    """Render one ``.tcscopex`` per non-empty scope file plus the manifest.

    A scope file with no patterns, or whose templates are all blank, is
    left out. The manifest is always produced and lists the rendered
    files in declaration order.
    """
    if not isinstance(settings, GlobalSettings):
        raise TypeError(
            f"build_output_set() expects GlobalSettings, got {type(settings).__name__}"
        )

    files: list[GeneratedFile] = []

    for scope_file in scope_files:
        if not scope_file.patterns:
            logger.debug("Skipping scope file %r: no patterns", scope_file.name)
            continue

        acquisitions: list[Acquisition] = []
        for pattern in scope_file.patterns:
            acquisitions.extend(synthesize_acquisitions(pattern, settings))

        if not acquisitions:
            logger.debug("Skipping scope file %r: no acquisitions", scope_file.name)
            continue

        files.append(GeneratedFile(
            file_name=f"{scope_file.name}{PRIMARY_EXTENSION}",
            content=render_primary_document(settings, acquisitions),
            acquisition_count=len(acquisitions),
        ))

    file_names = [f.file_name for f in files]
    result = GenerationResult(
        primary_files=files,
        manifest_file_name=manifest_file_name(settings.project_name),
        manifest_content=render_manifest_document(settings.project_name, file_names),
    )
    logger.info(
        "Generated %d scope files (%d acquisitions) for project %r",
        len(files), result.acquisition_count, settings.project_name,
    )
    return result


def generate_project(config: ProjectConfig) -> GenerationResult:
    """``build_output_set`` for a whole ``ProjectConfig``."""
    return build_output_set(config.global_settings, config.scope_files)
