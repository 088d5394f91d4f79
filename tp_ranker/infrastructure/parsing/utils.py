"""Shared parsing utilities for holdings ingestion."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation

from tp_ranker.domain.models import ZERO
from tp_ranker.domain.numbers import is_usable_decimal


def try_parse_decimal(value: object) -> Decimal | None:
    """Parse ``value`` as a finite, bounded decimal, or return ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        try:
            result = Decimal(s)
        except InvalidOperation:
            return None
    else:
        return None
    if not is_usable_decimal(result):
        return None
    return result


def decimal_or_default(value: object, default: Decimal = ZERO) -> Decimal:
    parsed = try_parse_decimal(value)
    return default if parsed is None else parsed
