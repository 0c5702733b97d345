from flask import Flask, jsonify
from flask_cors import CORS

from taskapi.logging_setup import setup_logging


def create_app(config_object="taskapi.config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)

    if not app.testing:
        setup_logging(app.config.get("LOG_LEVEL", "INFO"), app.config.get("LOG_DIR") or None)

    # Core extensions
    CORS(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # Initialize DB and create tables
    from taskapi.utils.db import init_app as init_db

    init_db(app)

    # Register blueprints
    from taskapi.routes.task_routes import tasks_bp

    app.register_blueprint(tasks_bp, url_prefix="/api/tasks")

    from taskapi.cli import register_commands

    register_commands(app)

    @app.get("/api/health")
    def health():
        return jsonify(status="ok", service="Task API"), 200

    @app.errorhandler(404)
    def not_found(_):
        return jsonify(success=False, message="Not Found"), 404

    @app.errorhandler(405)
    def method_not_allowed(_):
        return jsonify(success=False, message="Method Not Allowed"), 405

    @app.errorhandler(500)
    def server_error(_):
        return jsonify(success=False, message="Internal Server Error"), 500

    app.logger.info("Task API ready (database=%s)", app.config["SQLALCHEMY_DATABASE_URI"])
    return app
