from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


def init_app(app):
    """Bind the SQLAlchemy extension to ``app`` and make sure tables exist."""
    db.init_app(app)

    with app.app_context():
        # Import so the model is registered on the metadata before create_all
        from taskapi.models.task_model import Task  # noqa: F401

        db.create_all()
