import os
from pathlib import Path
BASE_DIR = Path(__file__).resolve().parent

class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", f"sqlite:///{(BASE_DIR / 'school.db').as_posix()}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    STUDENTS_PAGE_SIZE = 3
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
