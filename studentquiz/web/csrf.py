"""Session key handling.

The session key is the Flask-WTF CSRF token: pages hand it to JavaScript
(see :func:`token` and the `/csrf/token` view), which sends it back with
each web service request.
"""
import logging
from typing import Optional

from flask import Blueprint, current_app, request
from flask_wtf.csrf import generate_csrf, validate_csrf
from wtforms import ValidationError

from studentquiz.exceptions import InvalidSesskeyException

logger = logging.getLogger(__name__)

blueprint = Blueprint("csrf", __name__, url_prefix="/csrf")


@blueprint.route("/token", endpoint="json_token")
def json_token_view():
    return {"token": token()}


def time_limit():
    """Return current time limit for CSRF token."""
    return current_app.config.get("WTF_CSRF_TIME_LIMIT", 3600)


def name() -> str:
    """Request argument expected to have the session key.

    Useful for passing it to JavaScript for instance.
    """
    return "sesskey"


def token() -> str:
    """Value of current session key.

    Useful for passing it to JavaScript for instance.
    """
    return generate_csrf()


def submitted_sesskey() -> Optional[str]:
    """Session key sent with current request: `sesskey` argument, or
    `X-CSRFToken` header."""
    return request.args.get(name()) or request.headers.get("X-CSRFToken")


def confirm_sesskey(sesskey: Optional[str] = None) -> bool:
    """Check `sesskey` (default: the one sent with the request).

    Always `True` if `config.WTF_CSRF_ENABLED` is not set.
    """
    if not current_app.config.get("WTF_CSRF_ENABLED", True):
        return True

    if sesskey is None:
        sesskey = submitted_sesskey()

    try:
        validate_csrf(sesskey, time_limit=time_limit())
    except ValidationError as e:
        logger.warning("Invalid session key: %s", e)
        return False
    return True


def require_sesskey(sesskey: Optional[str] = None) -> None:
    """Raise :class:`InvalidSesskeyException` if session key is not valid."""
    if not confirm_sesskey(sesskey):
        raise InvalidSesskeyException()
