"""Base classes for web service functions.

A web service function is described by a parameter description, a return
description, and its implementation. Descriptions are trees of
:class:`ExternalValue`, :class:`ExternalSingleStructure` and
:class:`ExternalMultipleStructure`; :meth:`ExternalApi.validate_parameters`
checks and cleans incoming arguments against them, and
:meth:`ExternalApi.clean_returnvalue` does the same for results.

.. code-block:: python

    class MyApi(ExternalApi):
        @staticmethod
        def do_it_parameters():
            return ExternalFunctionParameters(
                {"id": ExternalValue(PARAM_INT, "Item ID")}
            )

        @staticmethod
        def do_it_returns():
            return ExternalValue(PARAM_BOOL, "Success")

        @classmethod
        def do_it(cls, id):
            params = cls.validate_parameters(cls.do_it_parameters(), {"id": id})
            ...
"""
import logging
import re
from typing import Any, Dict, List, Optional

from flask import g
from flask_login import current_user

from studentquiz.core.models.course import CourseModule
from studentquiz.core.util import html_to_text
from studentquiz.exceptions import CodingException, \
    InvalidParameterException, RequireLoginException
from studentquiz.security import VIEW, VIEW_HIDDEN, has_capability, \
    require_capability

__all__ = [
    "PARAM_INT",
    "PARAM_RAW",
    "PARAM_TEXT",
    "PARAM_NOTAGS",
    "PARAM_BOOL",
    "PARAM_ALPHANUMEXT",
    "VALUE_REQUIRED",
    "VALUE_OPTIONAL",
    "VALUE_DEFAULT",
    "ExternalValue",
    "ExternalSingleStructure",
    "ExternalMultipleStructure",
    "ExternalFunctionParameters",
    "ExternalApi",
    "clean_param",
]

logger = logging.getLogger(__name__)

PARAM_INT = "int"
PARAM_RAW = "raw"
PARAM_TEXT = "text"
PARAM_NOTAGS = "notags"
PARAM_BOOL = "bool"
PARAM_ALPHANUMEXT = "alphanumext"

VALUE_REQUIRED = 1
VALUE_OPTIONAL = 2
VALUE_DEFAULT = 0

_INT_RE = re.compile(r"^-?\d+$")
_ALPHANUMEXT_RE = re.compile(r"[^A-Za-z0-9_-]")


def clean_param(value: Any, type: str) -> Any:
    """Clean `value` according to `type`.

    Returns the cleaned value, which may differ from `value`: callers
    compare both to detect invalid input.
    """
    if type == PARAM_INT:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _INT_RE.match(value.strip()):
            return int(value)
        return None

    if type == PARAM_BOOL:
        if isinstance(value, bool):
            return value
        if value in (0, 1):
            return bool(value)
        if isinstance(value, str) and value.lower() in ("0", "1", "true", "false"):
            return value.lower() in ("1", "true")
        return None

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)

    if not isinstance(value, str):
        return None

    if type == PARAM_RAW:
        return value

    if type in (PARAM_TEXT, PARAM_NOTAGS):
        return html_to_text(value)

    if type == PARAM_ALPHANUMEXT:
        return _ALPHANUMEXT_RE.sub("", value)

    raise CodingException(f"Unknown parameter type: {type!r}")


def _same(value: Any, cleaned: Any) -> bool:
    if cleaned is None:
        return False
    # integers were matched by clean_param, "01" is a valid 1
    if isinstance(cleaned, (bool, int)):
        return True
    return str(value).strip() == str(cleaned).strip()


class ExternalDescription:
    """Common ancestor of all description classes."""

    def __init__(
        self, desc: str, required: int = VALUE_REQUIRED, default: Any = None
    ) -> None:
        self.desc = desc
        self.required = required
        self.default = default


class ExternalValue(ExternalDescription):
    """Scalar value description."""

    def __init__(
        self,
        type: str,
        desc: str = "",
        required: int = VALUE_REQUIRED,
        default: Any = None,
        allownull: bool = True,
    ) -> None:
        super().__init__(desc, required, default)
        self.type = type
        self.allownull = allownull


class ExternalSingleStructure(ExternalDescription):
    """Associative array description: a dict of named descriptions."""

    def __init__(
        self,
        keys: Dict[str, ExternalDescription],
        desc: str = "",
        required: int = VALUE_REQUIRED,
        default: Any = None,
    ) -> None:
        super().__init__(desc, required, default)
        for key, value in keys.items():
            if not isinstance(value, ExternalDescription):
                raise CodingException(f"Invalid description of key {key!r}")
        self.keys = keys


class ExternalMultipleStructure(ExternalDescription):
    """List description: all items match `content`."""

    def __init__(
        self,
        content: ExternalDescription,
        desc: str = "",
        required: int = VALUE_REQUIRED,
        default: Any = None,
    ) -> None:
        super().__init__(desc, required, default)
        self.content = content


class ExternalFunctionParameters(ExternalSingleStructure):
    """Description of the parameters of a web service function."""

    def __init__(self, keys: Dict[str, ExternalDescription], desc: str = "") -> None:
        super().__init__(keys, desc, VALUE_REQUIRED, None)


class ExternalApi:
    """Base class for web service functions."""

    @classmethod
    def validate_parameters(cls, description: ExternalDescription, params: Any) -> Any:
        """Validate `params` against `description`.

        :returns: cleaned parameters, with defaults filled in.
        :raises: :class:`InvalidParameterException`
        """
        if isinstance(description, ExternalValue):
            if isinstance(params, (dict, list, tuple)):
                raise InvalidParameterException(
                    "Scalar type expected, array or object received."
                )
            return cls._validate_param(
                params, description.type, description.allownull, "Invalid external api parameter"
            )

        if isinstance(description, ExternalSingleStructure):
            if not isinstance(params, dict):
                raise InvalidParameterException(
                    "Only arrays accepted. The bad value is: '{}'".format(params)
                )
            result = {}
            for key, subdesc in description.keys.items():
                if key not in params:
                    if subdesc.required == VALUE_DEFAULT:
                        result[key] = subdesc.default
                        continue
                    if subdesc.required == VALUE_REQUIRED:
                        raise InvalidParameterException(
                            f"Missing required key in single structure: {key}"
                        )
                    continue

                try:
                    result[key] = cls.validate_parameters(subdesc, params[key])
                except InvalidParameterException as e:
                    # add the key name to the debug info
                    raise InvalidParameterException(f"{key} => {e.debuginfo}")

            unexpected = [key for key in params if key not in description.keys]
            if unexpected:
                raise InvalidParameterException(
                    "Unexpected keys ({}) detected in parameter array.".format(
                        ", ".join(unexpected)
                    )
                )
            return result

        if isinstance(description, ExternalMultipleStructure):
            if not isinstance(params, (list, tuple)):
                raise InvalidParameterException(
                    "Only arrays accepted. The bad value is: '{}'".format(params)
                )
            return [cls.validate_parameters(description.content, p) for p in params]

        raise InvalidParameterException("Invalid external api description")

    @classmethod
    def clean_returnvalue(cls, description: Optional[ExternalDescription], response: Any) -> Any:
        """Validate a function result against its return description.

        Keys that are not described are dropped.
        """
        if description is None:
            return None

        if isinstance(description, ExternalValue):
            if isinstance(response, (dict, list, tuple)):
                raise InvalidParameterException(
                    "Scalar type expected, array or object received."
                )
            return cls._validate_param(
                response, description.type, description.allownull, "Invalid external api response"
            )

        if isinstance(description, ExternalSingleStructure):
            if not isinstance(response, dict):
                response = vars(response) if hasattr(response, "__dict__") else None
            if response is None:
                raise InvalidParameterException(
                    "Only arrays/objects accepted. The bad value is: '{}'".format(response)
                )
            result = {}
            for key, subdesc in description.keys.items():
                if key not in response:
                    if subdesc.required == VALUE_REQUIRED:
                        raise InvalidParameterException(
                            f"Error in response - Missing following required key in a "
                            f"single structure: {key}"
                        )
                    if subdesc.required == VALUE_DEFAULT:
                        result[key] = cls.clean_returnvalue(subdesc, subdesc.default)
                    continue

                try:
                    result[key] = cls.clean_returnvalue(subdesc, response[key])
                except InvalidParameterException as e:
                    raise InvalidParameterException(f"{key} => {e.debuginfo}")
            return result

        if isinstance(description, ExternalMultipleStructure):
            if not isinstance(response, (list, tuple)):
                raise InvalidParameterException(
                    "Only arrays accepted. The bad value is: '{}'".format(response)
                )
            return [cls.clean_returnvalue(description.content, r) for r in response]

        raise InvalidParameterException("Invalid external api response description")

    @staticmethod
    def _validate_param(value: Any, type: str, allownull: bool, debuginfo: str) -> Any:
        if value is None:
            if allownull:
                return None
            raise InvalidParameterException(f"{debuginfo}: null value not allowed")

        cleaned = clean_param(value, type)
        if not _same(value, cleaned):
            raise InvalidParameterException(f"{debuginfo}: invalid {type} value {value!r}")
        return cleaned

    @classmethod
    def validate_context(cls, context: CourseModule) -> None:
        """Check current user may work in `context` and make it the current
        context.

        :raises: :class:`RequireLoginException` if user is not logged in or
            the activity is not visible to them,
            :class:`RequirePermissionException` if they can't view it.
        """
        if context is None:
            raise InvalidParameterException("Context does not exist")

        user = current_user
        if not user or not user.is_authenticated:
            raise RequireLoginException("Not logged in")

        if not user.is_admin and user.enrolment_role(context.course) is None:
            raise RequireLoginException("Not enrolled")

        if not context.visible and not has_capability(VIEW_HIDDEN, context, user):
            raise RequireLoginException("Activity is hidden")

        require_capability(VIEW, context, user)

        logger.debug("Context validated: cm %r for user %r", context.id, user.id)
        g.context = context
