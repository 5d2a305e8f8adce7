import pytest

from app.backend.db.tables import COURSES, STUDENTS, TEACHERS, build_set_clause


def test_only_present_fields_are_assigned():
    clause, values = build_set_clause(STUDENTS, {"name": "New", "major": None})

    assert clause == "name = $1, major = $2, updated_at = NOW()"
    assert values == ["New", None]


def test_start_index_shifts_placeholders():
    clause, values = build_set_clause(COURSES, {"credit_hours": 3}, start_index=4)

    assert clause == "credit_hours = $4, updated_at = NOW()"
    assert values == [3]


def test_unknown_column_is_rejected():
    with pytest.raises(ValueError, match="Unknown column"):
        build_set_clause(TEACHERS, {"email = NULL; DROP TABLE teachers; --": "x"})


def test_empty_patch_is_rejected():
    with pytest.raises(ValueError):
        build_set_clause(STUDENTS, {})


def test_returning_lists_every_column():
    assert TEACHERS.returning == (
        "id, teacher_code, name, title, email, phone, department, created_at, updated_at"
    )
