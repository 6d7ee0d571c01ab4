import pytest

from app.registry import (
    InvalidStudentIdError,
    StudentNotFoundError,
    StudentRegistry,
    parse_student_id,
)


def test_create_assigns_increasing_ids(registry):
    first = registry.create({"name": "Alice", "age": 20})
    second = registry.create({"name": "Bob", "age": 22})
    assert first == {"id": 1, "name": "Alice", "age": 20}
    assert second["id"] == 2
    assert len(registry) == 2


def test_create_ignores_caller_id(registry):
    student = registry.create({"id": 99, "name": "Mallory"})
    assert student == {"id": 1, "name": "Mallory"}
    assert list(student) == ["id", "name"]


def test_create_accepts_empty_body(registry):
    assert registry.create({}) == {"id": 1}


def test_ids_are_not_reused_after_delete(registry):
    registry.create({"name": "Alice"})
    registry.create({"name": "Bob"})
    registry.delete(2)
    assert registry.create({"name": "Carol"})["id"] == 3


def test_first_id_is_configurable():
    registry = StudentRegistry(first_id=100)
    assert registry.create({})["id"] == 100


def test_list_all_returns_copy_in_insertion_order(registry):
    for name in ["Alice", "Bob", "Carol"]:
        registry.create({"name": name})
    students = registry.list_all()
    assert [s["name"] for s in students] == ["Alice", "Bob", "Carol"]
    students.clear()
    assert len(registry) == 3


def test_get_missing_raises(registry):
    with pytest.raises(StudentNotFoundError) as exc_info:
        registry.get(1)
    assert exc_info.value.student_id == 1


def test_update_replaces_in_place(registry):
    registry.create({"name": "Alice", "age": 20})
    registry.create({"name": "Bob", "age": 22})
    updated = registry.update(1, {"name": "Alice2", "id": 7})
    assert updated == {"id": 1, "name": "Alice2"}
    assert registry.list_all()[0] == {"id": 1, "name": "Alice2"}
    assert registry.get(1) == updated


def test_update_missing_leaves_collection_unchanged(registry):
    registry.create({"name": "Alice"})
    with pytest.raises(StudentNotFoundError):
        registry.update(5, {"name": "Ghost"})
    assert registry.list_all() == [{"id": 1, "name": "Alice"}]


def test_delete_reports_removed_count(registry):
    registry.create({"name": "Alice"})
    assert registry.delete(1) == 1
    assert registry.delete(1) == 0
    assert len(registry) == 0


@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    ("01", 1),
    (" 2 ", 2),
    ("+3", 3),
    ("4.0", 4),
    ("5e0", 5),
    ("-1", -1),
    ("0x1", 1),
    ("0X1F", 31),
    ("0o7", 7),
    ("0b10", 2),
])
def test_parse_student_id(raw, expected):
    assert parse_student_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "1.5", "nan", "inf", "1a", "1_0", "0x", "0xg", "-0x1"])
def test_parse_student_id_rejects_non_integral(raw):
    with pytest.raises(InvalidStudentIdError):
        parse_student_id(raw)


def test_invalid_id_is_a_not_found_error():
    assert issubclass(InvalidStudentIdError, StudentNotFoundError)
