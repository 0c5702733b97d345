import os

from dotenv import load_dotenv

# Load .env from project root so local development DATABASE_URL is picked up
load_dotenv()


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///tasks.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = os.environ.get("SQL_ECHO", "0") == "1"

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    # Empty means console only
    LOG_DIR = os.environ.get("LOG_DIR", "")

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    ENV = os.environ.get("FLASK_ENV", "development")
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"
    JSON_SORT_KEYS = False


class TestConfig(Config):
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ECHO = False
    LOG_DIR = ""
