from ..db.tables import TEACHERS
from ..models.db_models import Teacher
from .entity_service import EntityService


class TeacherService(EntityService[Teacher]):
    """
    Service layer for teacher records.
    """
    table = TEACHERS
    model = Teacher
    label = "Teacher"
    conflict_message = "Teacher code already exists."
    search_columns = ("teacher_code", "name", "department")
