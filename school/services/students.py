"""Student listing and CRUD operations.

Every function takes the SQLAlchemy session to work with as its first
argument; the caller owns the session and its lifetime. Missing students
are reported by returning ``None`` so the HTTP layer can answer 404, and
storage failures are logged and turned into a generic message instead of
being raised.
"""

import logging
from collections import namedtuple
from datetime import date, datetime

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload

from ..models import Enrollment, Student
from ..pagination import PaginatedList

logger = logging.getLogger(__name__)

PAGE_SIZE = 3
SAVE_ERROR_MESSAGE = ("Unable to save changes. Try again, and if the problem "
                      "persists see your system administrator.")
DELETE_ERROR_MESSAGE = ("Delete failed. Try again, and if the problem "
                        "persists see your system administrator.")

SORT_ORDERS = {
    "name_desc": Student.last_name.desc(),
    "Date":      Student.enrollment_date.asc(),
    "date_desc": Student.enrollment_date.desc(),
}
DEFAULT_ORDER = Student.last_name.asc()

DeleteConfirmation = namedtuple("DeleteConfirmation", ["student", "error_message"])


class StudentListing:
    """A page of students plus the sort/filter state used to build links."""

    def __init__(self, students, sort_order, current_filter):
        self.students = students
        self.current_sort = sort_order
        self.current_filter = current_filter
        # tokens for the column headers: clicking a header flips its direction
        self.name_sort_parm = "" if sort_order else "name_desc"
        self.date_sort_parm = "date_desc" if sort_order == "Date" else "Date"


class StudentForm:
    """Student input limited to the fields a user may set.

    Only ``last_name``, ``first_mid_name`` and ``enrollment_date`` are read
    from the submitted data. The id and the enrollments collection are never
    bound, whatever the payload contains.
    """

    MAX_NAME_LENGTH = 50

    def __init__(self, data=None, student=None):
        data = data or {}
        self.student = student
        self.last_name = _text(data, "last_name")
        self.first_mid_name = _text(data, "first_mid_name")
        self.enrollment_date = _text(data, "enrollment_date")
        self.errors = {}
        self.saved = False
        self._parsed_date = None

    @classmethod
    def from_student(cls, student):
        return cls({
            "last_name": student.last_name,
            "first_mid_name": student.first_mid_name,
            "enrollment_date": student.enrollment_date,
        }, student=student)

    @property
    def ok(self):
        return not self.errors

    def validate(self):
        for field, label in (("last_name", "Last name"),
                             ("first_mid_name", "First name")):
            value = getattr(self, field)
            if not value:
                self.errors[field] = f"{label} is required"
            elif len(value) > self.MAX_NAME_LENGTH:
                self.errors[field] = (f"{label} cannot be longer than "
                                      f"{self.MAX_NAME_LENGTH} characters")

        if not self.enrollment_date:
            self.errors["enrollment_date"] = "Enrollment date is required"
        else:
            try:
                self._parsed_date = datetime.strptime(self.enrollment_date, "%Y-%m-%d").date()
            except ValueError:
                self.errors["enrollment_date"] = "Enrollment date must be in YYYY-MM-DD format"
        return self.ok

    def apply_to(self, student):
        """Copy the allow-listed fields onto ``student``. Call ``validate`` first."""
        student.last_name = self.last_name
        student.first_mid_name = self.first_mid_name
        student.enrollment_date = self._parsed_date


def _text(data, key):
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


def _detach(session, *objects):
    # read-only results: keep them out of the unit of work
    for obj in objects:
        session.expunge(obj)


def _commit(session, action):
    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Failed to %s", action)
        return False
    return True


def list_students(session, sort_order=None, search_string=None,
                  current_filter=None, page=None, page_size=PAGE_SIZE):
    """Return one page of students, filtered and sorted.

    A submitted ``search_string`` (even an empty one) starts over at page 1.
    When it is absent, ``current_filter`` keeps the previous search active
    while the user pages or re-sorts.
    """
    if search_string is not None:
        page = 1
    else:
        search_string = current_filter

    query = session.query(Student)
    if search_string:
        query = query.filter(or_(
            Student.last_name.contains(search_string, autoescape=True),
            Student.first_mid_name.contains(search_string, autoescape=True),
        ))
    query = query.order_by(SORT_ORDERS.get(sort_order, DEFAULT_ORDER))

    students = PaginatedList.create(query, page, page_size)
    _detach(session, *students)
    return StudentListing(students, sort_order, search_string)


def get_student_detail(session, student_id):
    if student_id is None:
        return None
    student = (session.query(Student)
               .options(selectinload(Student.enrollments)
                        .selectinload(Enrollment.course))
               .filter(Student.id == student_id)
               .one_or_none())
    if student is None:
        return None
    _detach(session, student)
    return student


def create_student(session, data):
    form = StudentForm(data)
    if not form.validate():
        return form

    student = Student()
    form.apply_to(student)
    session.add(student)
    if not _commit(session, "create student"):
        form.errors[""] = SAVE_ERROR_MESSAGE
        return form

    form.student = student
    form.saved = True
    logger.info("Created student %s", student.id)
    return form


def load_student_for_edit(session, student_id):
    if student_id is None:
        return None
    return session.get(Student, student_id)


def apply_student_edit(session, student_id, data):
    """Update a student from submitted data; ``None`` when it does not exist.

    Concurrent edits are not detected: the last commit wins.
    """
    if student_id is None:
        return None
    student = session.get(Student, student_id)
    if student is None:
        return None

    form = StudentForm(data, student=student)
    if not form.validate():
        return form

    form.apply_to(student)
    if not _commit(session, f"update student {student_id}"):
        form.errors[""] = SAVE_ERROR_MESSAGE
        return form

    form.saved = True
    logger.info("Updated student %s", student_id)
    return form


def confirm_delete(session, student_id, save_changes_error=False):
    if student_id is None:
        return None
    student = session.query(Student).filter(Student.id == student_id).one_or_none()
    if student is None:
        return None
    _detach(session, student)
    return DeleteConfirmation(student, DELETE_ERROR_MESSAGE if save_changes_error else None)


def execute_delete(session, student_id):
    """Delete a student. A student that is already gone counts as deleted."""
    student = session.get(Student, student_id) if student_id is not None else None
    if student is None:
        return True

    session.delete(student)
    if not _commit(session, f"delete student {student_id}"):
        return False
    logger.info("Deleted student %s", student_id)
    return True
