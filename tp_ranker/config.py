"""Central configuration for the TP ranker package."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from decimal import Decimal
from pathlib import Path
from typing import Mapping

from tp_ranker.domain.errors import ConfigurationError
from tp_ranker.infrastructure.parsing.utils import try_parse_decimal

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PREFIX = "TP_RANKER_"


@dataclass(slots=True, frozen=True)
class Settings:
    total_supply: Decimal
    api_base_url: str
    main_pool_wallet: str
    market_pool_wallet: str
    holdings_limit: int
    reference_path: Path
    http_timeout: float
    max_retries: int

    def holdings_url(self, wallet: str) -> str:
        return f"{self.api_base_url.rstrip('/')}/{wallet}/holdings"

    @property
    def main_pool_url(self) -> str:
        return self.holdings_url(self.main_pool_wallet)

    @property
    def market_pool_url(self) -> str:
        return self.holdings_url(self.market_pool_wallet)


DEFAULT_SETTINGS = Settings(
    total_supply=Decimal("25000000"),
    api_base_url="https://api.tenero.io/v1/sportsfun/wallets",
    main_pool_wallet="0x2EeF466e802Ab2835aB81BE63eEbc55167d35b56",
    market_pool_wallet="0x4Fdce033b9F30019337dDC5cC028DC023580585e",
    holdings_limit=80,
    reference_path=BASE_DIR / "OffSeasonTP.csv",
    http_timeout=20.0,
    max_retries=3,
)


def _env_decimal(name: str, value: str) -> Decimal:
    parsed = try_parse_decimal(value)
    if parsed is None:
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    return parsed


def _env_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from None


def _env_float(name: str, value: str) -> float:
    return float(_env_decimal(name, value))


def load_settings(
    environ: Mapping[str, str] | None = None,
    base: Settings = DEFAULT_SETTINGS,
) -> Settings:
    """Overlay ``TP_RANKER_*`` environment variables on ``base``."""
    env = os.environ if environ is None else environ
    overrides: dict[str, object] = {}
    converters = {
        "total_supply": _env_decimal,
        "api_base_url": lambda _name, value: value.strip(),
        "main_pool_wallet": lambda _name, value: value.strip(),
        "market_pool_wallet": lambda _name, value: value.strip(),
        "holdings_limit": _env_int,
        "reference_path": lambda _name, value: Path(value).expanduser(),
        "http_timeout": _env_float,
        "max_retries": _env_int,
    }
    for field_name, convert in converters.items():
        env_name = ENV_PREFIX + field_name.upper()
        raw = env.get(env_name)
        if raw is None or not raw.strip():
            continue
        overrides[field_name] = convert(env_name, raw)
    return replace(base, **overrides)
