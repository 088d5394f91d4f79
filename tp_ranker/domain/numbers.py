"""Magnitude bounds for decimals entering the valuation arithmetic."""
from __future__ import annotations

from decimal import Decimal, getcontext

# price * supply / tp combines three inputs, so each stays under a quarter of Emax
MAX_ADJUSTED_EXPONENT = getcontext().Emax // 4


def is_usable_decimal(value: Decimal) -> bool:
    """True for finite values the pipeline can multiply and divide safely."""
    if not value.is_finite():
        return False
    if value.is_zero():
        return True
    return -MAX_ADJUSTED_EXPONENT <= value.adjusted() <= MAX_ADJUSTED_EXPONENT
