from ..db.tables import STUDENTS
from ..models.db_models import Student
from .entity_service import EntityService


class StudentService(EntityService[Student]):
    """
    Service layer for student records.
    """
    table = STUDENTS
    model = Student
    label = "Student"
    conflict_message = "Student number already exists."
    search_columns = ("student_number", "name", "major")
