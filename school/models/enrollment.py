import enum
from ..extensions import db

class Grade(enum.Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"

class Enrollment(db.Model):
    __tablename__ = "enrollment"
    id = db.Column(db.Integer, primary_key=True)
    student_id = db.Column(db.Integer, db.ForeignKey("student.id"), nullable=False)
    course_id = db.Column(db.Integer, db.ForeignKey("course.id"), nullable=False)
    grade = db.Column(db.Enum(Grade, name="grade"))   # None = not graded yet

    student = db.relationship("Student", back_populates="enrollments")
    course = db.relationship("Course", back_populates="enrollments")
