import logging
from datetime import date

import click

from .extensions import db
from .models import Course, Enrollment, Grade, Student

logger = logging.getLogger(__name__)

STUDENTS = [
    ("Alexander", "Carson", date(2005, 9, 1)),
    ("Alonso", "Meredith", date(2002, 9, 1)),
    ("Anand", "Arturo", date(2003, 9, 1)),
    ("Barzdukas", "Gytis", date(2002, 9, 1)),
    ("Li", "Yan", date(2002, 9, 1)),
    ("Justice", "Peggy", date(2001, 9, 1)),
    ("Norman", "Laura", date(2003, 9, 1)),
    ("Olivetto", "Nino", date(2005, 9, 1)),
]

COURSES = [
    (1050, "Chemistry", 3),
    (4022, "Microeconomics", 3),
    (4041, "Macroeconomics", 3),
    (1045, "Calculus", 4),
    (3141, "Trigonometry", 4),
    (2021, "Composition", 3),
    (2042, "Literature", 4),
]

# (student index into STUDENTS, course id, grade)
ENROLLMENTS = [
    (0, 1050, Grade.A),
    (0, 4022, Grade.C),
    (0, 4041, Grade.B),
    (1, 1045, Grade.B),
    (1, 3141, Grade.F),
    (1, 2021, Grade.F),
    (2, 1050, None),
    (3, 1050, None),
    (3, 4022, Grade.F),
    (4, 4041, Grade.C),
    (5, 1045, None),
    (6, 3141, Grade.A),
]


def seed_database(session):
    """Insert the sample school unless students already exist.

    Returns the number of students created.
    """
    if session.query(Student).first() is not None:
        logger.info("Database already has students, skipping seed")
        return 0

    students = [Student(last_name=last, first_mid_name=first, enrollment_date=enrolled)
                for last, first, enrolled in STUDENTS]
    courses = {cid: Course(id=cid, title=title, credits=credits)
               for cid, title, credits in COURSES}
    session.add_all(students)
    session.add_all(courses.values())
    for idx, course_id, grade in ENROLLMENTS:
        session.add(Enrollment(student=students[idx], course=courses[course_id], grade=grade))
    session.commit()
    logger.info("Seeded %d students, %d courses, %d enrollments",
                len(students), len(courses), len(ENROLLMENTS))
    return len(students)


def register_commands(app):
    @app.cli.command("seed-db")
    def seed_db():
        """Create the tables and load the sample students and courses."""
        db.create_all()
        created = seed_database(db.session)
        click.echo(f"Seeded {created} students")
