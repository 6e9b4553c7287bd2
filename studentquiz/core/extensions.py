"""Create all standard extensions."""
import sqlite3
from typing import Any

import flask_mail
import sqlalchemy as sa
import sqlalchemy.event
from flask import current_app
from flask_babel import Babel
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from sqlalchemy.engine import Engine

from .login import login_manager

__all__ = (
    "db",
    "mail",
    "babel",
    "login_manager",
    "csrf",
)


class Message(flask_mail.Message):
    """Message that always sets the `Sender` header to the configured mail
    sender."""

    def send(self, connection: flask_mail.Connection) -> None:
        sender = current_app.config["MAIL_SENDER"]
        if not self.extra_headers:
            self.extra_headers = {}
        self.extra_headers["Sender"] = sender
        connection.send(self, sender)


mail = flask_mail.Mail()

db = SQLAlchemy()

babel = Babel()

csrf = CSRFProtect()


#
# Make Sqlite a bit more well-behaved.
#
@sa.event.listens_for(Engine, "connect")
def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):  # pragma: no cover
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON;")
        cursor.close()
