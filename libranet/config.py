"""
Centralized configuration for the circulation desk.

Settings are read from environment variables once, when a ``LibrarySystem``
is built, so tests can pass an explicit ``Settings`` instead.

Environment Variables:
    LIBRANET_FINE_PER_DAY: daily fine rate applied to new items (default 10)
    LIBRANET_CURRENCY: prefix used when printing money (default "Rs.")
    LIBRANET_LOG_LEVEL: root log level for ``configure_logging`` (default INFO)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_FINE_PER_DAY = Decimal("10")
DEFAULT_CURRENCY = "Rs."
DEFAULT_LOG_LEVEL = "INFO"


def _fine_from_env(raw: Optional[str]) -> Decimal:
    if raw is None or not raw.strip():
        return DEFAULT_FINE_PER_DAY
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        logger.warning(
            f"Invalid LIBRANET_FINE_PER_DAY '{raw}'. "
            f"Falling back to {DEFAULT_FINE_PER_DAY}."
        )
        return DEFAULT_FINE_PER_DAY
    if not value.is_finite() or value < 0:
        logger.warning(
            f"LIBRANET_FINE_PER_DAY must be a non-negative amount, got '{raw}'. "
            f"Falling back to {DEFAULT_FINE_PER_DAY}."
        )
        return DEFAULT_FINE_PER_DAY
    return value


@dataclass(frozen=True)
class Settings:
    fine_per_day: Decimal = DEFAULT_FINE_PER_DAY
    currency: str = DEFAULT_CURRENCY
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            fine_per_day=_fine_from_env(os.getenv("LIBRANET_FINE_PER_DAY")),
            currency=os.getenv("LIBRANET_CURRENCY", DEFAULT_CURRENCY),
            log_level=os.getenv("LIBRANET_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )


def configure_logging(level: Optional[str] = None) -> None:
    """Install a basic root handler unless the host application already did."""
    level_name = (level or Settings.from_env().log_level).upper()
    numeric = getattr(logging, level_name, None)
    if not isinstance(numeric, int):
        logger.warning(f"Unknown log level '{level_name}', using {DEFAULT_LOG_LEVEL}")
        numeric = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=numeric, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    else:
        root.setLevel(numeric)
