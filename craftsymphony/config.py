import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _env_float(name, default):
    try:
        return float(os.getenv(name, ""))
    except ValueError:
        return default


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "craftsymphony-dev-key-change-in-production")

    # Render/Heroku style URLs use postgres://, SQLAlchemy needs postgresql://
    DATABASE_URL = os.getenv("DATABASE_URL")

    if DATABASE_URL:
        if DATABASE_URL.startswith("postgres://"):
            DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)
        SQLALCHEMY_DATABASE_URI = DATABASE_URL
    else:
        SQLALCHEMY_DATABASE_URI = "sqlite:///" + os.path.join(BASE_DIR, "instance", "app.db")

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")

    # Public images live under static/ so they are served as /static/images/...
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(BASE_DIR, "static", "images", "uploads"))
    UPLOAD_URL_PREFIX = "/static/images/uploads"
    PREVIEW_FOLDER = os.getenv("PREVIEW_FOLDER", os.path.join(BASE_DIR, "static", "images", "previews"))
    PREVIEW_URL_PREFIX = "/static/images/previews"
    MAX_UPLOAD_MB = _env_float("MAX_UPLOAD_MB", 300.0)
    MAX_CONTENT_LENGTH = int(MAX_UPLOAD_MB * 1024 * 1024) + 1024 * 1024

    SMTP_HOST = os.getenv("SMTP_HOST", "")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
    SMTP_SECURE = os.getenv("SMTP_SECURE", "false").lower() == "true"
    SMTP_USER = os.getenv("SMTP_USER", "")
    SMTP_PASS = os.getenv("SMTP_PASS", "")
    SMTP_TIMEOUT = 10
    INQUIRY_FROM = os.getenv("INQUIRY_FROM", "")
    INQUIRY_TO = os.getenv("INQUIRY_TO", "")

    VISITS_FILE = os.getenv("VISITS_FILE", os.path.join(BASE_DIR, "data", "visits.json"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "testing"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ADMIN_PASSWORD = "s3cret"
    MAX_UPLOAD_MB = 1.0
    SMTP_HOST = "smtp.example.com"
    SMTP_PORT = 587
    SMTP_SECURE = False
    SMTP_USER = "shop@example.com"
    SMTP_PASS = "pass"
    INQUIRY_FROM = ""
    INQUIRY_TO = "owner@example.com"
    LOG_LEVEL = "WARNING"
