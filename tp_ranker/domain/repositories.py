"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from typing import Protocol, Sequence

from .models import HoldingRecord


class HoldingsRepository(Protocol):
    """Provides one wallet's holdings snapshot."""

    def list_holdings(self) -> Sequence[HoldingRecord]:
        ...


class ReferenceRepository(Protocol):
    """Provides the raw text of the TP reference table."""

    def read_text(self) -> str:
        ...
