from ..db.tables import COURSES
from ..models.db_models import Course
from .entity_service import EntityService


class CourseService(EntityService[Course]):
    """
    Service layer for course records.
    """
    table = COURSES
    model = Course
    label = "Course"
    conflict_message = "Course code already exists."
    search_columns = ("course_code", "name")
