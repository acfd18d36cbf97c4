"""School record repository and JSON loader."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from pydantic import TypeAdapter, ValidationError

from campuscost.exceptions import RecordLoadError, UnknownSchoolError
from campuscost.models.school import SchoolRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from campuscost.models.enums import SchoolType, TuitionTier

logger = logging.getLogger(__name__)

_RECORD_LIST = TypeAdapter(list[SchoolRecord])


class SchoolRecordRepository:
    """Repository for looking up raw school records.

    Wraps an in-memory collection keyed by ``school_id`` and preserves the
    order the records were supplied in.
    """

    def __init__(self, records: Iterable[SchoolRecord]) -> None:
        self._records: dict[str, SchoolRecord] = {}
        for record in records:
            if record.school_id in self._records:
                msg = f"Duplicate school id '{record.school_id}'"
                raise ValueError(msg)
            self._records[record.school_id] = record

    def get(self, school_id: str) -> SchoolRecord:
        """Look up a record by id.

        Raises:
            UnknownSchoolError: If no record has this id.
        """
        record = self._records.get(school_id)
        if record is None:
            raise UnknownSchoolError(school_id)
        return record

    def all(self) -> list[SchoolRecord]:
        return list(self._records.values())

    def ids(self) -> list[str]:
        return list(self._records)

    def filter(
        self,
        school_type: SchoolType | None = None,
        tuition_tier: TuitionTier | None = None,
        operating_only: bool = False,
    ) -> list[SchoolRecord]:
        """Return the records matching every supplied criterion."""
        return [
            r
            for r in self._records.values()
            if (school_type is None or r.school_type == school_type)
            and (tuition_tier is None or r.tuition_tier == tuition_tier)
            and (not operating_only or r.is_operating)
        ]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SchoolRecord]:
        return iter(self._records.values())

    def __contains__(self, school_id: object) -> bool:
        return school_id in self._records


def load_records(path: Path) -> list[SchoolRecord]:
    """Read a JSON array of school records from ``path``.

    This is the validation boundary for raw data: every record is checked
    against the :class:`SchoolRecord` schema before the engine sees it.

    Raises:
        RecordLoadError: If the file cannot be read, is not valid JSON, or
            any record fails validation.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        msg = f"Could not read school records from {path}: {exc}"
        raise RecordLoadError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in school record file {path}: {exc}"
        raise RecordLoadError(msg) from exc

    try:
        records = _RECORD_LIST.validate_python(raw)
    except ValidationError as exc:
        msg = f"Invalid school record in {path}: {exc}"
        raise RecordLoadError(msg) from exc

    logger.info("Loaded %d school records from %s", len(records), path)
    return records
