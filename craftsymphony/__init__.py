from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from logging.config import dictConfig
import os

db = SQLAlchemy()
login_manager = LoginManager()


def configure_logging(level):
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": "[%(asctime)s] %(levelname)s in %(name)s: %(message)s"},
        },
        "handlers": {
            "wsgi": {
                "class": "logging.StreamHandler",
                "stream": "ext://flask.logging.wsgi_errors_stream",
                "formatter": "default",
            },
        },
        "loggers": {
            "craftsymphony": {"level": level, "handlers": ["wsgi"], "propagate": False},
        },
    })


def create_app(config_object="craftsymphony.config.Config", overrides=None):
    basedir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

    template_dir = os.path.join(basedir, 'templates')
    static_dir = os.path.join(basedir, 'static')

    app = Flask(__name__,
                template_folder=template_dir,
                static_folder=static_dir)

    app.config.from_object(config_object)
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    for key in ("UPLOAD_FOLDER", "PREVIEW_FOLDER"):
        os.makedirs(app.config[key], exist_ok=True)
    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite:///"):
        os.makedirs(os.path.join(basedir, "instance"), exist_ok=True)

    db.init_app(app)
    login_manager.init_app(app)

    login_manager.login_view = 'auth.login'
    login_manager.login_message_category = 'info'

    from craftsymphony import auth
    auth.init_auth(login_manager)

    from craftsymphony.errors import register_error_handlers
    register_error_handlers(app)

    from craftsymphony.i18n import init_i18n
    init_i18n(app)

    from craftsymphony.routes.public import public_bp
    from craftsymphony.routes.auth import auth_bp
    from craftsymphony.routes.dashboard import dashboard_bp
    from craftsymphony.routes.api import api_bp
    from craftsymphony.routes.admin_api import admin_api_bp
    from craftsymphony.routes.inquiry import inquiry_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(admin_api_bp)
    app.register_blueprint(inquiry_bp)

    from craftsymphony.cli import init_db_command
    app.cli.add_command(init_db_command)

    # Models must be imported before create_all sees them
    from craftsymphony.models import category, item, wood_item  # noqa: F401

    return app
