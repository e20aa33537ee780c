"""In-memory resource stores (non-persistent, one per entity kind)."""

from __future__ import annotations

import logging
import re
from typing import Generic, TypeVar

from pydantic import BaseModel

from branchdesk.models.branch import Branch, BranchCreate, BranchUpdate
from branchdesk.models.employee import Employee, EmployeeCreate, EmployeeUpdate

logger = logging.getLogger(__name__)

CreateT = TypeVar("CreateT", bound=BaseModel)
RecordT = TypeVar("RecordT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)

_ID_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def _parse_id(record_id: str) -> int | None:
    if not isinstance(record_id, str) or not _ID_PATTERN.fullmatch(record_id):
        return None
    return int(record_id)


def merge_update(record: BaseModel, changes: BaseModel) -> BaseModel:
    """Copy the explicitly supplied, non-null fields of ``changes`` onto ``record``."""
    for name in changes.model_fields_set:
        value = getattr(changes, name)
        if value is not None:
            setattr(record, name, value)
    return record


class ResourceStore(Generic[CreateT, RecordT, UpdateT]):
    """Ordered collection of records with a store-assigned integer id.

    Ids start at 1 and are never reused, even after deletes. Lookups take the
    id as text, the way it arrives in a URL; text that is not an integer
    simply matches nothing.
    """

    record_model: type[RecordT]
    entity_name: str = "record"

    def __init__(self) -> None:
        self._records: list[RecordT] = []
        self._next_id: int = 1

    def __len__(self) -> int:
        return len(self._records)

    def list_all(self) -> list[RecordT]:
        return list(self._records)

    def create(self, fields: CreateT) -> RecordT:
        record = self.record_model(id=self._next_id, **fields.model_dump())
        self._next_id += 1
        self._records.append(record)
        logger.debug("Created %s id=%d", self.entity_name, record.id)
        return record

    def get_by_id(self, record_id: str) -> RecordT | None:
        target = _parse_id(record_id)
        if target is None:
            return None
        for record in self._records:
            if record.id == target:
                return record
        return None

    def update(self, record_id: str, changes: UpdateT) -> RecordT | None:
        record = self.get_by_id(record_id)
        if record is None:
            return None
        merge_update(record, changes)
        logger.debug(
            "Updated %s id=%d fields=%s",
            self.entity_name,
            record.id,
            sorted(changes.model_fields_set),
        )
        return record

    def delete(self, record_id: str) -> bool:
        target = _parse_id(record_id)
        if target is None:
            return False
        for index, record in enumerate(self._records):
            if record.id == target:
                del self._records[index]
                logger.debug("Deleted %s id=%d", self.entity_name, target)
                return True
        return False

    def clear(self) -> None:
        self._records.clear()
        self._next_id = 1


class BranchStore(ResourceStore[BranchCreate, Branch, BranchUpdate]):
    record_model = Branch
    entity_name = "branch"


class EmployeeStore(ResourceStore[EmployeeCreate, Employee, EmployeeUpdate]):
    record_model = Employee
    entity_name = "employee"
