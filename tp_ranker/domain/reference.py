"""Parsing of the off-season TP reference table."""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Mapping

from .normalization import normalize_name
from .numbers import is_usable_decimal

logger = logging.getLogger(__name__)

DELIMITER = ","

TPReference = Mapping[str, Decimal]


def _parse_tp(value: str) -> Decimal | None:
    try:
        parsed = Decimal(value.strip())
    except InvalidOperation:
        return None
    if not is_usable_decimal(parsed):
        return None
    return parsed


def load_tp_reference(raw_text: str) -> dict[str, Decimal]:
    """Build a normalized-name -> TP lookup from ``name,value`` lines.

    The first line is a header. Short lines and unparsable TP values are
    skipped; a later line overwrites an earlier one with the same normalized
    name.
    """
    lines = raw_text.strip().splitlines()
    reference: dict[str, Decimal] = {}
    skipped = 0
    for line in lines[1:]:
        parts = line.split(DELIMITER)
        if len(parts) < 2:
            skipped += 1
            continue
        tp_value = _parse_tp(parts[1])
        if tp_value is None:
            skipped += 1
            continue
        reference[normalize_name(parts[0].strip())] = tp_value
    if skipped:
        logger.debug(f"Skipped {skipped} reference lines without a usable TP value")
    return reference
