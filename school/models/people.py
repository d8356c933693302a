from ..extensions import db

class Student(db.Model):
    __tablename__ = "student"
    id = db.Column(db.Integer, primary_key=True)
    last_name = db.Column(db.String(50), nullable=False)
    first_mid_name = db.Column(db.String(50), nullable=False)
    enrollment_date = db.Column(db.Date, nullable=False)

    enrollments = db.relationship(
        "Enrollment", back_populates="student", cascade="all, delete-orphan"
    )

    @property
    def full_name(self):
        return f"{self.last_name}, {self.first_mid_name}"

    def __repr__(self):
        return f"<Student {self.id} {self.full_name}>"
