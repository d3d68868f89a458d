"""Counter template parsing and expansion.

Public API::

    from scopegen.patterns import validate_template, expand_all_symbols

    validate_template("GVL.axis[{n:1:4}].pos").valid   # True
    expand_all_symbols("GVL.axis[{n:1:2}].pos")
    # ['GVL.axis[1].pos', 'GVL.axis[2].pos']
"""

from ._expand import (
    calculate_expansion_count,
    expand_all_symbols,
    expand_template,
    generate_combinations,
)
from ._parser import (
    COUNTER_PATTERN,
    format_counter_placeholder,
    parse_counters,
    validate_template,
)

__all__ = [
    "COUNTER_PATTERN",
    "calculate_expansion_count",
    "expand_all_symbols",
    "expand_template",
    "format_counter_placeholder",
    "generate_combinations",
    "parse_counters",
    "validate_template",
]
