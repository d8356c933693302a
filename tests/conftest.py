from datetime import date
import pytest

from config import TestConfig
from school import create_app
from school.extensions import db
from school.models import Student


@pytest.fixture
def app(tmp_path):
    """Application bound to a fresh SQLite file per test."""
    class Config(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{(tmp_path / 'school.db').as_posix()}"

    app = create_app(Config)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def session(app):
    return db.session()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def add_student(session):
    def _add(last_name, first_mid_name, enrolled=date(2020, 9, 1)):
        s = Student(last_name=last_name, first_mid_name=first_mid_name, enrollment_date=enrolled)
        session.add(s)
        session.commit()
        return s.id
    return _add


@pytest.fixture
def seven_students(add_student):
    rows = [
        ("Alexander", "Carson", date(2005, 9, 1)),
        ("Alonso", "Meredith", date(2002, 9, 1)),
        ("Barzdukas", "Gytis", date(2002, 9, 1)),
        ("Li", "Yan", date(2002, 9, 1)),
        ("Justice", "Peggy", date(2001, 9, 1)),
        ("Nelson", "Laura", date(2003, 9, 1)),
        ("Olivetto", "Nino", date(2005, 9, 1)),
    ]
    return [add_student(*row) for row in rows]
