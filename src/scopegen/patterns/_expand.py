"""Counter combinations and template expansion."""

from __future__ import annotations

import itertools
import math
import re
from collections.abc import Mapping, Sequence

from scopegen.model.counters import Counter

from ._parser import parse_counters


def generate_combinations(counters: Sequence[Counter]) -> list[dict[str, int]]:
    """Every assignment of values to *counters*.

    The first counter is the outermost loop and the last the innermost,
    values ascending. No counters gives a single empty assignment.
    """
    names = [c.name for c in counters]
    ranges = [range(c.start, c.end + 1) for c in counters]
    return [dict(zip(names, values)) for values in itertools.product(*ranges)]


def expand_template(template: str, assignment: Mapping[str, int]) -> str:
    """Substitute *assignment* into every matching placeholder.

    Each occurrence of a name is replaced whatever range is written
    there, so a reused counter always resolves to the same value.
    """
    result = template
    for name, value in assignment.items():
        placeholder = re.compile(r"\{" + re.escape(name) + r":\d+:\d+\}", re.ASCII)
        result = placeholder.sub(str(value), result)
    return result


def expand_all_symbols(template: str) -> list[str]:
    """All concrete symbol names of *template*, in combination order."""
    combinations = generate_combinations(parse_counters(template))
    return [expand_template(template, values) for values in combinations]


def calculate_expansion_count(template: str) -> int:
    """Number of names ``expand_all_symbols`` would produce.

    Computed arithmetically, without building any combination. An
    inverted counter range counts as empty.
    """
    return math.prod(c.span for c in parse_counters(template))
