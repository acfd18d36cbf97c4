"""Factory functions for creating pre-configured FacilitiesEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from campuscost.data.repository import SchoolRecordRepository, load_records
from campuscost.data.seed import SEED_SCHOOL_RECORDS
from campuscost.engine import FacilitiesEngine

if TYPE_CHECKING:
    from pathlib import Path


def create_default_engine(data_path: Path | None = None) -> FacilitiesEngine:
    """Create a FacilitiesEngine wired up with school records.

    This is the recommended way to create an engine for typical usage. With
    no ``data_path`` it uses the built-in seed portfolio; otherwise records
    are loaded and validated from the JSON file.

    Raises:
        RecordLoadError: If ``data_path`` cannot be read or validated.

    Example::

        from campuscost import create_default_engine

        engine = create_default_engine()
        summary = engine.summarize(engine.analyze_portfolio())
    """
    records = SEED_SCHOOL_RECORDS if data_path is None else load_records(data_path)
    return FacilitiesEngine(SchoolRecordRepository(records))
