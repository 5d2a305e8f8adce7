# app/backend/db/tables.py
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class EntityTable:
    """
    Describes one of the managed tables: which columns may be written and
    which column carries the unique natural key.
    """
    name: str
    natural_key: str
    columns: Tuple[str, ...]

    @property
    def returning(self) -> str:
        return ", ".join(("id",) + self.columns + ("created_at", "updated_at"))


STUDENTS = EntityTable(
    name="students",
    natural_key="student_number",
    columns=("student_number", "name", "gender", "age", "major", "class_name", "contact", "notes"),
)

COURSES = EntityTable(
    name="courses",
    natural_key="course_code",
    columns=("course_code", "name", "credit_hours", "teacher", "description"),
)

TEACHERS = EntityTable(
    name="teachers",
    natural_key="teacher_code",
    columns=("teacher_code", "name", "title", "email", "phone", "department"),
)


def build_set_clause(table: EntityTable, patch: Mapping[str, Any], start_index: int = 1) -> Tuple[str, List[Any]]:
    """
    Turns a sparse patch into a parameterized SET clause.

    Only the keys present in `patch` are assigned; a `None` value clears the
    column. `updated_at` is always touched. Column names come from the table
    definition, never from the payload, so unknown keys are rejected.
    """
    if not patch:
        raise ValueError("Patch must contain at least one field.")

    assignments: List[str] = []
    values: List[Any] = []
    index = start_index
    for column, value in patch.items():
        if column not in table.columns:
            raise ValueError(f"Unknown column '{column}' for table '{table.name}'.")
        assignments.append(f"{column} = ${index}")
        values.append(value)
        index += 1

    assignments.append("updated_at = NOW()")
    return ", ".join(assignments), values


def record_to_dict(record: Mapping[str, Any]) -> Dict[str, Any]:
    return dict(record.items())
