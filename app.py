import os

from taskapi.app import create_app

# Expose a module-level `app` for WSGI servers (gunicorn expects `app:app`)
# and for `flask --app app ...` CLI commands.
app = create_app()


if __name__ == "__main__":
    # Local development only: run the built-in server.
    app.run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "5000")),
        debug=os.environ.get("FLASK_DEBUG", "1") == "1",
    )
