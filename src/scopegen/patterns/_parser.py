"""Counter placeholder parsing and template validation.

A placeholder is ``{name:start:end}`` where ``name`` is one or more ASCII word
characters and both bounds are unsigned ASCII decimal literals. Anything else
in a template, including stray braces, is plain text.
"""

from __future__ import annotations

import re

from scopegen.model.counters import ParsedCounter, TemplateValidation

COUNTER_PATTERN = re.compile(r"\{(\w+):(\d+):(\d+)\}", re.ASCII)


def parse_counters(template: str) -> list[ParsedCounter]:
    """Extract the distinct counters of *template* in first-seen order.

    A name may occur several times; the first occurrence defines the
    range and later occurrences are only reuse sites that take the same
    value during expansion.
    """
    counters: dict[str, ParsedCounter] = {}
    for match in COUNTER_PATTERN.finditer(template):
        name = match.group(1)
        if name in counters:
            continue
        counters[name] = ParsedCounter(
            name=name,
            start=int(match.group(2)),
            end=int(match.group(3)),
            placeholder=match.group(0),
        )
    return list(counters.values())


def validate_template(template: str) -> TemplateValidation:
    """Check *template* for structural problems.

    Brace balance is checked by count only, so balanced braces that form
    no placeholder pass, and a stray brace next to a good placeholder
    fails.
    """
    if not template.strip():
        return TemplateValidation(valid=False, errors=["Template cannot be empty"])

    errors: list[str] = []
    if template.count("{") != template.count("}"):
        errors.append("Mismatched braces in template")

    for counter in parse_counters(template):
        if counter.start > counter.end:
            errors.append(
                f'Counter "{counter.name}": start ({counter.start}) '
                f"must be <= end ({counter.end})"
            )
        # Unreachable while the grammar has no sign.
        if counter.start < 0 or counter.end < 0:
            errors.append(f'Counter "{counter.name}": values must be non-negative')

    return TemplateValidation(valid=not errors, errors=errors)


def format_counter_placeholder(name: str, start: int, end: int) -> str:
    """Build the placeholder text for a counter, e.g. ``{n:1:10}``."""
    return f"{{{name}:{start}:{end}}}"
