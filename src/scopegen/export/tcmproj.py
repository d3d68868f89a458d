"""TwinCAT Measurement project (``.tcmproj``) writer.

The manifest is an MSBuild project that lists the scope files of a
measurement project as content items.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from ._xml import XML_DECLARATION, XmlWriter, escape_xml, new_guid

logger = logging.getLogger(__name__)

MANIFEST_EXTENSION = ".tcmproj"

_MSBUILD_PROJECT = {
    "ToolsVersion": "4.0",
    "DefaultTargets": "Build",
    "xmlns": "http://schemas.microsoft.com/developer/msbuild/2003",
}


def manifest_file_name(project_name: str) -> str:
    """``My Test Project`` -> ``My_Test_Project.tcmproj``."""
    return re.sub(r"\s+", "_", project_name) + MANIFEST_EXTENSION


def render_manifest_document(project_name: str, file_names: Sequence[str]) -> str:
    """Render a ``.tcmproj`` referencing *file_names* in order."""
    w = MeasurementProjectWriter()
    w.write_project(project_name, file_names)
    logger.debug(
        "Rendered measurement project %r with %d scope files",
        project_name, len(file_names),
    )
    return w.getvalue()


class MeasurementProjectWriter(XmlWriter):

    def write_project(self, project_name: str, file_names: Sequence[str]) -> None:
        self._line(XML_DECLARATION)
        self._open("Project", _MSBUILD_PROJECT)

        self._open("PropertyGroup")
        self._line(
            "<Configuration Condition=\" '$(Configuration)' == '' \">"
            "Debug</Configuration>"
        )
        self._element("SchemaVersion", "2.0")
        self._element("ProjectGuid", f"{{{new_guid()}}}")
        self._element("OutputType", "Exe")
        self._element("RootNamespace", "MyApplication")
        self._element("AssemblyName", "MyApplication")
        self._element("Name", escape_xml(project_name))
        self._close("PropertyGroup")

        self._open("ItemGroup")
        if not file_names:
            self._line()
        for file_name in file_names:
            self._open("Content", {"Include": escape_xml(file_name)})
            self._element("SubType", "Content")
            self._close("Content")
        self._close("ItemGroup")

        self._close("Project")
