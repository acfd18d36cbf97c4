"""Configuration and dependency wiring for the HTTP API."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from campuscost.data.expense_rules import DEFAULT_PRESET
from campuscost.engine import FacilitiesEngine
from campuscost.factory import create_default_engine

logger = logging.getLogger(__name__)

ENV_EXPENSE_PRESET = "CAMPUSCOST_EXPENSE_PRESET"
ENV_SCENARIO_UTILIZATION = "CAMPUSCOST_SCENARIO_UTILIZATION"
ENV_DATA_PATH = "CAMPUSCOST_DATA_PATH"

DEFAULT_SCENARIO_UTILIZATION = 80.0


@dataclass(frozen=True)
class ApiSettings:
    """Defaults the API applies when a request leaves them out."""

    expense_preset: str = DEFAULT_PRESET
    scenario_utilization_pct: float = DEFAULT_SCENARIO_UTILIZATION
    data_path: Path | None = None


def load_settings() -> ApiSettings:
    """Read API settings from environment variables.

    Raises:
        ValueError: If the utilization setting is not a non-negative number.
    """
    preset = os.environ.get(ENV_EXPENSE_PRESET, "").strip() or DEFAULT_PRESET

    raw_utilization = os.environ.get(ENV_SCENARIO_UTILIZATION, "").strip()
    utilization = DEFAULT_SCENARIO_UTILIZATION
    if raw_utilization:
        try:
            utilization = float(raw_utilization)
        except ValueError:
            msg = f"{ENV_SCENARIO_UTILIZATION} must be a number, got '{raw_utilization}'"
            raise ValueError(msg) from None
        if utilization < 0:
            msg = f"{ENV_SCENARIO_UTILIZATION} must be non-negative, got {utilization}"
            raise ValueError(msg)

    raw_path = os.environ.get(ENV_DATA_PATH, "").strip()
    data_path = Path(raw_path) if raw_path else None

    return ApiSettings(
        expense_preset=preset,
        scenario_utilization_pct=utilization,
        data_path=data_path,
    )


def create_engine(settings: ApiSettings) -> FacilitiesEngine:
    """Create an engine for the API and check the configured preset exists.

    Raises:
        UnknownPresetError: If the configured preset is not registered.
        RecordLoadError: If the configured data file cannot be loaded.
    """
    engine = create_default_engine(settings.data_path)
    engine.rules.get_preset(settings.expense_preset)
    logger.info(
        "Engine ready with %d schools (preset=%s, source=%s)",
        len(engine.repository),
        settings.expense_preset,
        settings.data_path or "seed",
    )
    return engine
