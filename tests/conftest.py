"""Shared test helpers for the scopegen test suite."""

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from scopegen.model import DataType, GlobalSettings, Pattern, ScopeFile, SymbolTemplate

MSBUILD_NS = "{http://schemas.microsoft.com/developer/msbuild/2003}"
GOLDEN_DIR = Path(__file__).parent / "golden"

_ANY_GUID = re.compile(r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")


def mask_guids(content: str) -> str:
    """Replace every GUID with ``GUID`` so documents compare byte for byte."""
    return _ANY_GUID.sub("GUID", content)


def golden(name: str) -> str:
    # newline="" disables newline translation
    with open(GOLDEN_DIR / name, encoding="utf-8", newline="") as f:
        return f.read()


def symbol(template: str, data_type: DataType = DataType.REAL64, **kwargs) -> SymbolTemplate:
    return SymbolTemplate(template=template, data_type=data_type, **kwargs)


def pattern(*templates: str, target_port: int = 851, **symbol_kwargs) -> Pattern:
    """Pattern with one symbol per template."""
    return Pattern(
        target_port=target_port,
        symbols=[symbol(t, **symbol_kwargs) for t in templates],
    )


def scope_file(name: str, *patterns: Pattern) -> ScopeFile:
    return ScopeFile(name=name, patterns=list(patterns))


def settings(**overrides) -> GlobalSettings:
    return GlobalSettings(**overrides)


def parse_xml(content: str) -> ET.Element:
    return ET.fromstring(content.encode("utf-8"))
