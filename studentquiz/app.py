"""Base Flask application class, used by tests or to be extended in real
applications."""
import logging
import logging.config
import sys
from importlib.resources import files
from pathlib import Path
from typing import Any, Optional

import sqlalchemy as sa
import sqlalchemy.orm
import yaml
from flask import Flask, jsonify
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

import studentquiz.i18n
from studentquiz import notification
from studentquiz.config import default_config
from studentquiz.core import extensions, signals

logger = logging.getLogger(__name__)
db = extensions.db
__all__ = ["create_app", "Application"]


class Application(Flask):
    """Base application class.

    Extend it in your own app.
    """

    default_config = default_config

    def __init__(self, name: Optional[Any] = None, *args: Any, **kwargs: Any) -> None:
        name = name or __name__
        Flask.__init__(self, name, *args, **kwargs)

    def setup(self, config: Optional[type]) -> None:
        self.configure(config)

        # At this point we have loaded all config: SQLALCHEMY_DATABASE_URI
        # and LOGGING_CONFIG_FILE are definitively fixed.
        self.setup_logging()

        self.init_extensions()
        self.register_blueprints()
        self.install_default_handlers()
        self.register_commands()

        # At this point all models should have been imported: time to
        # configure mappers, so that a misconfiguration shows up now rather
        # than as a laconic "model is not mapped" later.
        sa.orm.configure_mappers()

        signals.components_registered.send(self)

    def configure(self, config: Optional[type]) -> None:
        if config:
            self.config.from_object(config)

        if not self.debug and not self.testing and self.config["SECRET_KEY"] == "CHANGEME":
            logger.error("You must change the default secret config ('SECRET_KEY')")
            sys.exit()

    def setup_logging(self) -> None:
        # Force flask to create application logger before logging
        # configuration; else, flask will overwrite our settings
        self.logger  # noqa

        log_level = self.config.get("LOG_LEVEL")
        if log_level:
            self.logger.setLevel(log_level)

        logging_file = self.config.get("LOGGING_CONFIG_FILE")
        if logging_file:
            logging_file = (Path(self.instance_path) / logging_file).resolve()
        else:
            logging_file = Path(str(files("studentquiz") / "default_logging.yml"))

        if logging_file.suffix == ".ini":
            # old standard 'ini' file config
            logging.config.fileConfig(str(logging_file), disable_existing_loggers=False)
        elif logging_file.suffix in (".yml", ".yaml"):
            # yaml config file
            with logging_file.open() as fd:
                logging_cfg = yaml.safe_load(fd)
            logging_cfg.setdefault("version", 1)
            logging_cfg.setdefault("disable_existing_loggers", False)
            logging.config.dictConfig(logging_cfg)

    def init_extensions(self) -> None:
        """Initialize flask extensions, helpers and services."""
        # models must be imported before tables are created or mappers
        # configured
        import studentquiz.core.models  # noqa

        db.init_app(self)
        extensions.mail.init_app(self)
        extensions.login_manager.init_app(self)

        # Babel (for i18n)
        extensions.babel.init_app(
            self, locale_selector=studentquiz.i18n.localeselector
        )

        # Flask-Migrate
        Migrate(self, db)

        # CSRF by default
        if self.config.get("WTF_CSRF_ENABLED"):
            extensions.csrf.init_app(self)

        notification.init_app(self)

    def register_blueprints(self) -> None:
        from studentquiz.web import csrf
        from studentquiz.web.views import bp as service_bp

        self.register_blueprint(csrf.blueprint)

        # web services check the session key themselves, per call
        extensions.csrf.exempt(service_bp)
        self.register_blueprint(service_bp)

    def register_commands(self) -> None:
        from studentquiz import cli

        cli.register_commands(self)

    def install_default_handlers(self) -> None:
        for http_error_code in (400, 403, 404, 500):
            logger.debug(
                "Set Default HTTP error handler for status code %d", http_error_code
            )
            self.register_error_handler(http_error_code, self.handle_http_error)

    def handle_http_error(self, error: Exception):
        """Render HTTP errors as JSON: `{"error": code, "message": ...}`."""
        if isinstance(error, HTTPException):
            code = error.code
            message = error.description
        else:
            code = 500
            message = "Internal Server Error"
        response = jsonify({"error": code, "message": message})
        response.status_code = code
        return response

    def handle_user_exception(self, e):
        # Inconditionally forget all DB changes, and ensure clean session
        # during exception handling.
        session = db.session()
        if session.is_active:
            session.rollback()

        return Flask.handle_user_exception(self, e)

    def handle_exception(self, e):
        session = db.session()
        if not session.is_active:
            # Something happened in error handlers and session is not usable
            # anymore.
            db.session.remove()

        return Flask.handle_exception(self, e)


def create_app(
    config: Optional[type] = None, app_class: type = Application, **kw: Any
) -> Application:
    app = app_class(**kw)
    app.setup(config=config)
    return app
