"""Runtime settings read from the environment.

Env vars:
  NETWORTH_DATA_DIR=<dir>          -> where saved plans live (default user_data)
  NETWORTH_PORT=8000               -> port for the REST backend
  NETWORTH_DEBUG=1                 -> Flask debug mode
  NETWORTH_LOG_LEVEL=INFO          -> root log level when run as a script
  NETWORTH_BASE_YEAR=2025          -> default base year offered to clients
  NETWORTH_PROJECTION_YEARS=30     -> default projection horizon
  NETWORTH_RETURN_RATE=0.07        -> default investment return rate
  NETWORTH_MAX_PROJECTION_YEARS=200 -> longest year range a request may ask for
"""
from __future__ import annotations

import os
from dataclasses import dataclass

TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    data_dir: str = "user_data"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    base_year: int = 2025
    projection_years: int = 30
    investment_return_rate: float = 0.07
    max_projection_years: int = 200

    @property
    def plans_path(self) -> str:
        return os.path.join(self.data_dir, "plans.json")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def load_settings() -> Settings:
    defaults = Settings()
    return Settings(
        data_dir=os.getenv("NETWORTH_DATA_DIR") or defaults.data_dir,
        port=_env_int("NETWORTH_PORT", defaults.port),
        debug=str(os.getenv("NETWORTH_DEBUG", "")).lower() in TRUTHY,
        log_level=(os.getenv("NETWORTH_LOG_LEVEL") or defaults.log_level).upper(),
        base_year=_env_int("NETWORTH_BASE_YEAR", defaults.base_year),
        projection_years=_env_int("NETWORTH_PROJECTION_YEARS", defaults.projection_years),
        investment_return_rate=_env_float("NETWORTH_RETURN_RATE", defaults.investment_return_rate),
        max_projection_years=_env_int("NETWORTH_MAX_PROJECTION_YEARS", defaults.max_projection_years),
    )
