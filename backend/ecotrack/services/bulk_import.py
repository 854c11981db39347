import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from ecotrack.schemas.dashboard import ImportResult
from ecotrack.services.record_store import KIND_BINDINGS, RecordKind
from ecotrack.services.state import DashboardController

logger = logging.getLogger(__name__)


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"]) or "record"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def import_records(controller: DashboardController, kind: RecordKind, rows: List[Dict[str, Any]]) -> ImportResult:
    """
    Add already-shaped rows of one kind. Each row is validated on its own and
    goes through the same add path as a manual entry; rows without an id get a
    fresh one. Invalid rows are reported and skipped.
    """
    binding = KIND_BINDINGS[kind]
    created = 0
    errors = []

    for row_num, row in enumerate(rows, start=1):
        if not isinstance(row, dict):
            errors.append(f"Row {row_num}: expected an object")
            continue
        try:
            record = binding.create_schema.model_validate(row)
        except ValidationError as e:
            errors.append(f"Row {row_num}: {_describe(e)}")
            continue

        try:
            controller.add_record(kind, record)
        except ValueError as e:
            errors.append(f"Row {row_num}: {e}")
            continue
        created += 1

    logger.info(f"Imported {created} {kind.value} records ({len(errors)} rejected)")
    return ImportResult(
        message=f"Successfully imported {created} records",
        created=created,
        errors=errors,
    )
