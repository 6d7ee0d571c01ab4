from fastapi import APIRouter, Depends, Request, Response
from typing import List, Optional
from app.config import Settings
from app.models.student import Student, StudentCreate, StudentUpdate
from app.registry import (
    InvalidStudentIdError,
    StudentNotFoundError,
    StudentRegistry,
    parse_student_id,
)

router = APIRouter()

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Student not found",
        "content": {"text/plain": {"example": "Not Found"}},
    }
}


def get_registry(request: Request) -> StudentRegistry:
    return request.app.state.registry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post("", response_model=Student, status_code=201, summary="Create a new student")
async def create_student(
    student: Optional[StudentCreate] = None,
    registry: StudentRegistry = Depends(get_registry)
):
    """Create a student. The server assigns the id; every other field is stored as sent."""
    return registry.create(student.fields_sent() if student is not None else {})


@router.get("", response_model=List[Student], summary="Get all students")
async def get_students(registry: StudentRegistry = Depends(get_registry)):
    """List students in insertion order"""
    return registry.list_all()


@router.get("/{student_id}", response_model=Student, summary="Get a student by ID", responses=NOT_FOUND_RESPONSE)
async def get_student(student_id: str, registry: StudentRegistry = Depends(get_registry)):
    return registry.get(parse_student_id(student_id))


@router.put("/{student_id}", response_model=Student, summary="Update a student by ID", responses=NOT_FOUND_RESPONSE)
async def update_student(
    student_id: str,
    student: Optional[StudentUpdate] = None,
    registry: StudentRegistry = Depends(get_registry)
):
    """Replace a student. Fields left out of the body are removed from the record."""
    return registry.update(parse_student_id(student_id), student.fields_sent() if student is not None else {})


@router.delete(
    "/{student_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a student by ID",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_student(
    student_id: str,
    registry: StudentRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings)
):
    """Delete a student.

    Answers 204 whether or not the student existed, unless
    ``delete_reports_missing`` is enabled.
    """
    try:
        parsed_id = parse_student_id(student_id)
    except InvalidStudentIdError:
        if settings.delete_reports_missing:
            raise
        return Response(status_code=204)

    removed = registry.delete(parsed_id)
    if not removed and settings.delete_reports_missing:
        raise StudentNotFoundError(parsed_id)
    return Response(status_code=204)
