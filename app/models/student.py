from pydantic import BaseModel, Field, PrivateAttr, model_validator
from typing import Any, Dict, List


class StudentBase(BaseModel):
    """Fields a student is expected to carry. None of them is enforced."""
    name: Any = Field(default=None, json_schema_extra={"type": "string", "example": "Alice"})
    age: Any = Field(default=None, json_schema_extra={"type": "integer", "example": 20})

    _key_order: List[str] = PrivateAttr(default_factory=list)

    class Config:
        extra = "allow"

    @model_validator(mode="wrap")
    @classmethod
    def remember_key_order(cls, data: Any, handler):
        student = handler(data)
        if isinstance(data, dict):
            student._key_order = list(data)
        return student

    def fields_sent(self) -> Dict[str, Any]:
        """Fields present in the request body, in the order the caller sent them."""
        sent = {**self.model_dump(exclude_unset=True), **(self.model_extra or {})}
        ordered = {key: sent[key] for key in self._key_order if key in sent}
        ordered.update((key, value) for key, value in sent.items() if key not in ordered)
        return ordered


class StudentCreate(StudentBase):
    pass


class StudentUpdate(StudentBase):
    grade: Any = Field(default=None, json_schema_extra={"type": "string"})


class Student(BaseModel):
    id: int

    class Config:
        extra = "allow"
        json_schema_extra = {"example": {"id": 1, "name": "Alice", "age": 20}}
