from typing import Any, Dict

from flask import Flask
from werkzeug.datastructures import ImmutableDict


class DefaultConfig:
    # Seriously: this need to be changed in production
    SECRET_KEY = "CHANGEME"

    # Need to be explicitly defined in production configs
    PRODUCTION = False

    # Session key (CSRF token) required by web services
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600

    # Babel
    BABEL_ACCEPT_LANGUAGES = ["en"]
    BABEL_DEFAULT_LOCALE = "en"
    BABEL_DEFAULT_TIMEZONE = "UTC"

    # SQLAlchemy
    SQLALCHEMY_DATABASE_URI = "sqlite:///studentquiz.db"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_recycle": 1800}  # 30min

    # Mail
    MAIL_SENDER = "noreply@example.com"

    # Logging: LOGGING_CONFIG_FILE is relative to instance folder (.yml or
    # .ini), LOG_LEVEL overrides application logger level
    LOGGING_CONFIG_FILE = None
    LOG_LEVEL = None

    # StudentQuiz
    STUDENTQUIZ_COMMENT_SHORTCONTENT_LENGTH = 75


default_config: Dict[str, Any] = dict(Flask.default_config)
default_config.update(
    {k: v for k, v in vars(DefaultConfig).items() if not k.startswith("_")}
)
default_config = ImmutableDict(default_config)
