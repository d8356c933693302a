import logging
from flask import Flask, redirect, url_for
from .extensions import db, migrate

def register_filters(app):
    @app.template_filter("display_date")
    def display_date(value):
        if value is None:
            return ""
        return value.strftime("%d/%m/%Y")

def configure_logging(app):
    if not logging.getLogger().handlers:
        logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)

    from . import models  # noqa: F401

    from .blueprints.students import bp as students_bp
    app.register_blueprint(students_bp, url_prefix="/students")
    register_filters(app)

    from .seed import register_commands
    register_commands(app)

    @app.get("/")
    def home():
        return redirect(url_for("students.index"))

    return app
