"""Acquisition synthesis: one acquisition per expanded symbol name."""

from __future__ import annotations

import logging

from scopegen.model.acquisition import Acquisition
from scopegen.model.project import GlobalSettings, Pattern
from scopegen.patterns import expand_all_symbols

from ._xml import new_guid

logger = logging.getLogger(__name__)


def synthesize_acquisitions(
    pattern: Pattern, settings: GlobalSettings
) -> list[Acquisition]:
    """Expand every symbol of *pattern* into acquisitions.

    Symbols are taken in declaration order and each symbol's names in
    combination order. Blank templates contribute nothing. Every
    acquisition gets a freshly minted guid.
    """
    acquisitions: list[Acquisition] = []

    for symbol in pattern.symbols:
        if not symbol.template.strip():
            continue

        for symbol_name in expand_all_symbols(symbol.template):
            acquisitions.append(Acquisition(
                guid=new_guid(),
                name=symbol_name,
                symbol_name=symbol_name,
                ams_net_id=settings.ams_net_id,
                target_port=pattern.target_port,
                data_type=symbol.data_type,
                variable_size=symbol.variable_size,
                base_sample_time=settings.base_sample_time,
                enabled=True,
            ))

    logger.debug(
        "Pattern %s (port %d): %d symbols -> %d acquisitions",
        pattern.id, pattern.target_port, len(pattern.symbols), len(acquisitions),
    )
    return acquisitions
