"""Scope project configuration: settings, scope files, patterns, symbols.

These are the caller-owned inputs of a generation run. Nothing in
``scopegen`` mutates them; editing helpers such as ``duplicate()`` and
``with_data_type()`` return new objects.
"""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, Field, model_validator

from .types import DataType, variable_size_for


def new_id() -> str:
    """Mint an opaque identifier for an editable model object."""
    return str(uuid.uuid4())


class GlobalSettings(BaseModel):
    """Project-wide settings shared by every generated scope file.

    ``record_time`` and ``base_sample_time`` are in 100 ns units.
    """

    project_name: str = "Scope Project"
    ams_net_id: str = "127.0.0.1.1.1"
    main_server: str = "127.0.0.1.1.1"
    record_time: int = Field(default=6_000_000_000, ge=0)  # 600 s
    base_sample_time: int = Field(default=100_000, ge=0)  # 10 ms
    default_target_port: int = Field(default=851, ge=0, le=65535)


DEFAULT_GLOBAL_SETTINGS = GlobalSettings()


class SymbolTemplate(BaseModel):
    """A symbol name template such as ``MAIN.mover[{i:1:5}].position``.

    ``variable_size`` follows ``data_type`` unless given explicitly, both
    for mapping input and for plain objects carrying the fields as
    attributes.
    """

    id: str = Field(default_factory=new_id)
    template: str = ""
    data_type: DataType = DataType.REAL64
    variable_size: int = Field(gt=0)

    @model_validator(mode="before")
    @classmethod
    def _derive_variable_size(cls, data: Any) -> Any:
        if isinstance(data, BaseModel):
            return data
        if not isinstance(data, dict):
            if not hasattr(data, "template"):
                return data
            data = {
                name: getattr(data, name)
                for name in cls.model_fields
                if hasattr(data, name)
            }
        if data.get("variable_size") is None:
            data = dict(data)
            data["variable_size"] = variable_size_for(
                data.get("data_type", DataType.REAL64)
            )
        return data

    def with_data_type(self, data_type: DataType | str) -> SymbolTemplate:
        """Copy with a new data type and its matching variable size."""
        data_type = DataType(data_type)
        return self.model_copy(update={
            "data_type": data_type,
            "variable_size": variable_size_for(data_type),
        })


class Pattern(BaseModel):
    """A group of symbol templates read through one ADS target port."""

    id: str = Field(default_factory=new_id)
    target_port: int = Field(default=851, ge=0, le=65535)
    symbols: list[SymbolTemplate] = Field(
        default_factory=lambda: [SymbolTemplate()]
    )

    @classmethod
    def new(cls, target_port: int = 851) -> Pattern:
        return cls(target_port=target_port)

    def duplicate(self) -> Pattern:
        """Deep copy with fresh ids for the pattern and each symbol."""
        return self.model_copy(update={
            "id": new_id(),
            "symbols": [s.model_copy(update={"id": new_id()}) for s in self.symbols],
        })


class ScopeFile(BaseModel):
    """One ``.tcscopex`` output document.

    ``name`` is the file name without extension.
    """

    id: str = Field(default_factory=new_id)
    name: str
    patterns: list[Pattern] = Field(default_factory=lambda: [Pattern()])

    @classmethod
    def new(cls, name: str, target_port: int = 851) -> ScopeFile:
        return cls(name=name, patterns=[Pattern.new(target_port)])

    def duplicate(self) -> ScopeFile:
        """Deep copy named ``<name>_copy`` with fresh ids throughout."""
        return self.model_copy(update={
            "id": new_id(),
            "name": f"{self.name}_copy",
            "patterns": [p.duplicate() for p in self.patterns],
        })


class ProjectConfig(BaseModel):
    """Everything needed for one generation run."""

    global_settings: GlobalSettings = Field(default_factory=GlobalSettings)
    scope_files: list[ScopeFile] = Field(
        default_factory=lambda: [ScopeFile.new("Scope_1")]
    )

    def add_scope_file(self) -> ProjectConfig:
        """Copy with one more default scope file appended.

        The new file is named ``Scope_<n>`` and its pattern uses the
        project's default target port.
        """
        scope_file = ScopeFile.new(
            f"Scope_{len(self.scope_files) + 1}",
            self.global_settings.default_target_port,
        )
        return self.model_copy(update={"scope_files": [*self.scope_files, scope_file]})
