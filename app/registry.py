"""
In-memory student registry.

The registry owns the ordered list of student records and the id counter.
Records are plain dicts so that any caller-supplied field is carried
through verbatim; only ``id`` is controlled by the registry.
"""

import logging
import math
from typing import Any, Dict, List, Mapping

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class RegistryError(Exception):
    """Base class for registry errors."""


class StudentNotFoundError(RegistryError):
    """No student record matches the requested id."""

    def __init__(self, student_id: Any):
        self.student_id = student_id
        super().__init__(f"Student {student_id!r} not found")


class InvalidStudentIdError(StudentNotFoundError):
    """The path parameter is not an integral number, so it can match no record."""


def parse_student_id(raw: str) -> int:
    """Parse a path parameter into a student id.

    Accepts base-10 integer text and numeric text with an integral value
    (``"1.0"``, ``"1e0"``), as well as unsigned ``0x``/``0o``/``0b``
    literals. Surrounding whitespace is ignored; digit separators are not.
    """
    text = raw.strip()
    if "_" in text:
        raise InvalidStudentIdError(raw)
    if text[:2].lower() in ("0x", "0o", "0b"):
        try:
            return int(text, 0)
        except ValueError:
            raise InvalidStudentIdError(raw) from None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise InvalidStudentIdError(raw) from None
    if math.isfinite(value) and value.is_integer():
        return int(value)
    raise InvalidStudentIdError(raw)


class StudentRegistry:
    """Ordered in-memory collection of student records.

    Ids are assigned from a counter that only ever moves forward, so an id
    is never reissued even after its record is deleted.
    """

    def __init__(self, first_id: int = 1):
        self._students: List[Record] = []
        self._id_counter = first_id

    def __len__(self) -> int:
        return len(self._students)

    def create(self, body: Mapping[str, Any]) -> Record:
        """Store a new record built from ``body`` and return it."""
        student_id = self._id_counter
        self._id_counter += 1
        student = _build_record(student_id, body)
        self._students.append(student)
        logger.info("Created student %d", student_id)
        return student

    def list_all(self) -> List[Record]:
        return list(self._students)

    def get(self, student_id: int) -> Record:
        student = next((s for s in self._students if s["id"] == student_id), None)
        if student is None:
            logger.debug("Student %d not found", student_id)
            raise StudentNotFoundError(student_id)
        return student

    def update(self, student_id: int, body: Mapping[str, Any]) -> Record:
        """Replace the whole record; fields missing from ``body`` are dropped."""
        index = next(
            (i for i, s in enumerate(self._students) if s["id"] == student_id),
            None,
        )
        if index is None:
            logger.debug("Student %d not found for update", student_id)
            raise StudentNotFoundError(student_id)
        student = _build_record(student_id, body)
        self._students[index] = student
        logger.info("Updated student %d", student_id)
        return student

    def delete(self, student_id: int) -> int:
        """Remove every record with ``student_id`` and return how many were removed."""
        before = len(self._students)
        self._students = [s for s in self._students if s["id"] != student_id]
        removed = before - len(self._students)
        if removed:
            logger.info("Deleted student %d", student_id)
        else:
            logger.debug("Student %d not found for delete", student_id)
        return removed


def _build_record(student_id: int, body: Mapping[str, Any]) -> Record:
    # The assigned id always wins over an id sent by the caller.
    record: Record = {"id": student_id}
    record.update((key, value) for key, value in body.items() if key != "id")
    return record
