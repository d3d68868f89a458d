"""Counter definitions parsed out of symbol templates."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Counter(BaseModel):
    """A named, inclusive integer range driving template expansion.

    An inverted range (start > end) is representable so that it can be
    reported by ``validate_template`` rather than rejected here.
    """

    name: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @property
    def span(self) -> int:
        """Number of values in the range (0 when inverted)."""
        return max(0, self.end - self.start + 1)


class ParsedCounter(Counter):
    """A Counter plus the exact placeholder text it was parsed from."""

    placeholder: str


class TemplateValidation(BaseModel):
    valid: bool
    errors: list[str] = []
