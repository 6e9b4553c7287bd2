"""Exceptions raised by StudentQuiz services.

All of them carry an error code, which is also the identifier of the
localized message in the string table, a component, and optional debug
information. They abort the current request; the web service layer
serializes them with :meth:`ModuleException.to_dict`.
"""
from typing import Any, Dict, Optional

__all__ = (
    "ModuleException",
    "CodingException",
    "InvalidParameterException",
    "RequireLoginException",
    "RequirePermissionException",
    "InvalidSesskeyException",
    "ServiceNotAvailableException",
)


class ModuleException(Exception):
    """Base exception.

    :param errorcode: identifier of the message in the string table of
        `module`. Text that is not an identifier (e.g. an already localized
        message) is used as message as is.
    :param a: placeholder values for the message.
    :param debuginfo: extra information for developers, e.g. JSON-encoded
        validation errors.
    """

    def __init__(
        self,
        errorcode: str,
        module: str = "studentquiz",
        link: str = "",
        a: Any = None,
        debuginfo: Optional[str] = None,
    ) -> None:
        from studentquiz.i18n import get_string, string_exists

        self.errorcode = errorcode
        self.module = module
        self.link = link
        self.a = a
        self.debuginfo = debuginfo

        if string_exists(errorcode, module):
            message = get_string(errorcode, module, a)
        else:
            message = errorcode
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "errorcode": self.errorcode,
            "module": self.module,
            "link": self.link,
            "debuginfo": self.debuginfo,
        }

    def __repr__(self) -> str:
        return "<{} errorcode={!r} module={!r}>".format(
            self.__class__.__name__, self.errorcode, self.module
        )


class CodingException(ModuleException):
    """A programming error, to be fixed by a developer."""

    def __init__(self, hint: str, debuginfo: Optional[str] = None) -> None:
        super().__init__("codingerror", "moodle", a=hint, debuginfo=debuginfo)


class InvalidParameterException(ModuleException):
    def __init__(self, debuginfo: Optional[str] = None) -> None:
        super().__init__("invalidparameter", "moodle", debuginfo=debuginfo)


class RequireLoginException(ModuleException):
    def __init__(self, debuginfo: Optional[str] = None) -> None:
        super().__init__("requireloginerror", "moodle", debuginfo=debuginfo)


class RequirePermissionException(ModuleException):
    def __init__(self, capability: str, debuginfo: Optional[str] = None) -> None:
        self.capability = capability
        super().__init__("nopermissions", "error", a=capability, debuginfo=debuginfo)


class InvalidSesskeyException(ModuleException):
    def __init__(self, debuginfo: Optional[str] = None) -> None:
        super().__init__("invalidsesskey", "error", debuginfo=debuginfo)


class ServiceNotAvailableException(ModuleException):
    def __init__(self, methodname: str) -> None:
        super().__init__("servicenotavailable", "webservice", debuginfo=methodname)
