"""Line-oriented XML emission shared by the document writers."""

from __future__ import annotations

import uuid
from enum import Enum
from io import StringIO
from xml.sax.saxutils import escape as escape_text

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

_ESCAPES = (
    ("&", "&amp;"),  # must run first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    """Escape the five XML reserved characters in user supplied text."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def new_guid() -> str:
    """Mint a random GUID in the lowercase 8-4-4-4-12 form."""
    return str(uuid.uuid4())


def xml_value(value: object) -> str:
    """Render a scalar the way .NET serializes it (``true``, ``42``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


class XmlWriter:
    """Emits indented XML into an internal buffer, one element per line.

    Values passed to the element helpers are written as-is; callers
    escape user text with ``escape_xml`` first.
    """

    def __init__(self) -> None:
        self._buf = StringIO()
        self._indent = 0
        self._indent_str = "  "

    def getvalue(self) -> str:
        return self._buf.getvalue().rstrip("\n")

    # -- Low-level output helpers -------------------------------------------

    def _line(self, text: str = "") -> None:
        if text:
            self._buf.write(self._indent_str * self._indent + text + "\n")
        else:
            self._buf.write("\n")

    def _indent_inc(self) -> None:
        self._indent += 1

    def _indent_dec(self) -> None:
        self._indent = max(0, self._indent - 1)

    # -- Element helpers ----------------------------------------------------

    def _open(self, tag: str, attrs: dict[str, str] | None = None) -> None:
        self._line(f"<{tag}{_format_attrs(attrs)}>")
        self._indent_inc()

    def _close(self, tag: str) -> None:
        self._indent_dec()
        self._line(f"</{tag}>")

    def _element(self, tag: str, value: object) -> None:
        self._line(f"<{tag}>{xml_value(value)}</{tag}>")

    def _empty(self, tag: str) -> None:
        self._line(f"<{tag} />")

    def _embedded(self, tag: str, document: str) -> None:
        """Element whose text is a whole XML document, escaped verbatim.

        Only ``&``, ``<`` and ``>`` are escaped, so quotes inside the
        embedded document stay literal. Continuation lines are not
        re-indented.
        """
        self._line(f"<{tag}>{escape_text(document)}</{tag}>")


def _format_attrs(attrs: dict[str, str] | None) -> str:
    if not attrs:
        return ""
    return "".join(f' {name}="{value}"' for name, value in attrs.items())
