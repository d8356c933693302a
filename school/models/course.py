from ..extensions import db

class Course(db.Model):
    __tablename__ = "course"
    # course numbers are assigned by the school, not generated
    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    title = db.Column(db.String(50), nullable=False)
    credits = db.Column(db.Integer, nullable=False, default=3)

    enrollments = db.relationship("Enrollment", back_populates="course")

    def __repr__(self):
        return f"<Course {self.id} {self.title}>"
