"""Synthesized acquisition records and generation output."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

from .types import DataType


class Acquisition(BaseModel):
    """One ADS acquisition, i.e. one expanded symbol of one pattern."""

    guid: str
    name: str
    symbol_name: str
    ams_net_id: str
    target_port: int
    data_type: DataType
    variable_size: int
    base_sample_time: int
    enabled: bool = True


class GeneratedFile(BaseModel):
    file_name: str
    content: str
    acquisition_count: int


class GenerationResult(BaseModel):
    """All documents produced for a project.

    ``primary_files`` holds one ``.tcscopex`` per non-empty scope file; the
    ``.tcmproj`` manifest is always present.
    """

    primary_files: list[GeneratedFile] = []
    manifest_file_name: str
    manifest_content: str

    def iter_files(self) -> Iterator[tuple[str, str]]:
        """Yield ``(file_name, content)`` pairs, manifest last."""
        for f in self.primary_files:
            yield f.file_name, f.content
        yield self.manifest_file_name, self.manifest_content

    @property
    def acquisition_count(self) -> int:
        return sum(f.acquisition_count for f in self.primary_files)
