"""I18n.

Strings shown to users come from the language string tables in
:mod:`studentquiz.lang`. To get one::

    from studentquiz.i18n import get_string
    get_string("invalidcomment")
    get_string("emailchangesubject", a={"quizname": "Week 1"})

Placeholders follow the table format: `{$a}` is replaced by `a` itself,
`{$a->name}` by the `name` key (or attribute) of `a`.

The table is picked from the current Flask-Babel locale, falling back to
English when no table exists for the locale or when it lacks the
identifier.

Use :data:`_` for gettext, :data:`_l` for lazy_gettext on strings that are
not part of the tables (framework messages, WTForms).
"""
import importlib
import importlib.util
import re
from functools import lru_cache
from typing import Any, Dict, Optional

import flask_babel
from flask import current_app, has_request_context, request
from flask_babel import LazyString, gettext, lazy_gettext
from flask_login import current_user

__all__ = [
    "_",
    "_l",
    "get_string",
    "lazy_string",
    "string_exists",
    "localeselector",
    "current_language",
    "DEFAULT_LANGUAGE",
]

#: gettext alias
_ = gettext

#: lazy_gettext alias
_l = lazy_gettext

DEFAULT_LANGUAGE = "en"

#: components whose strings live in :mod:`studentquiz.lang`. Core components
#: ("moodle", "error", "webservice") share the same tables.
COMPONENTS = frozenset({"studentquiz", "moodle", "error", "webservice"})

_PLACEHOLDER_RE = re.compile(r"\{\$a->([A-Za-z0-9_]+)\}")


@lru_cache(maxsize=None)
def _load_table(language: str) -> Optional[Dict[str, str]]:
    name = f"studentquiz.lang.{language}"
    if importlib.util.find_spec(name) is None:
        return None
    module = importlib.import_module(name)
    return module.string


def current_language() -> str:
    """Language code of current locale, default language outside of an
    application context."""
    if not current_app:
        return DEFAULT_LANGUAGE
    locale = flask_babel.get_locale()
    if locale is None:
        return DEFAULT_LANGUAGE
    return locale.language


def _lookup(identifier: str, language: str) -> Optional[str]:
    for lang in (language, DEFAULT_LANGUAGE):
        table = _load_table(lang)
        if table is not None and identifier in table:
            return table[identifier]
    return None


def string_exists(identifier: str, component: str = "studentquiz") -> bool:
    if component not in COMPONENTS:
        return False
    return _lookup(identifier, DEFAULT_LANGUAGE) is not None


def _placeholder_value(a: Any, name: str) -> str:
    if isinstance(a, dict):
        value = a.get(name)
    else:
        value = getattr(a, name, None)
    return "" if value is None else str(value)


def format_string(text: str, a: Any = None) -> str:
    """Substitute `{$a}` / `{$a->name}` placeholders in `text`."""
    if a is None:
        return text

    if isinstance(a, (str, int, float)):
        return text.replace("{$a}", str(a))

    return _PLACEHOLDER_RE.sub(lambda m: _placeholder_value(a, m.group(1)), text)


def get_string(identifier: str, component: str = "studentquiz", a: Any = None) -> str:
    """Return localized string `identifier` of `component`.

    :raises: :class:`studentquiz.exceptions.CodingException` if the string
        doesn't exist.
    """
    from studentquiz.exceptions import CodingException

    if component not in COMPONENTS:
        raise CodingException(f"Invalid component: {component!r}")

    text = _lookup(identifier, current_language())
    if text is None:
        raise CodingException(f"Invalid get_string() identifier: {identifier!r}")

    return format_string(text, a)


def lazy_string(identifier: str, component: str = "studentquiz", a: Any = None):
    """Lazy version of :func:`get_string`, resolved when rendered."""
    return LazyString(get_string, identifier, component, a)


def localeselector() -> Optional[str]:
    """Locale selector: user preference, then browser preference."""
    if not has_request_context():
        return None

    # if a user is logged in, use the locale from the user settings
    user = current_user
    if user and getattr(user, "lang", None):
        return user.lang

    # Otherwise, try to guess the language from the user accept header the
    # browser transmits.
    return request.accept_languages.best_match(
        current_app.config["BABEL_ACCEPT_LANGUAGES"]
    )
