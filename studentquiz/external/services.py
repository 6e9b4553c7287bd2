"""Registry of web service functions, and how to call them."""
import logging
from typing import Any, Callable, Dict, NamedTuple, Type

from flask_login import current_user

from studentquiz.core.extensions import db
from studentquiz.exceptions import ModuleException, RequireLoginException, \
    ServiceNotAvailableException

from .api import ExternalApi
from .edit_comment import EditCommentApi

logger = logging.getLogger(__name__)


class ServiceFunction(NamedTuple):
    classname: Type[ExternalApi]
    methodname: str
    description: str
    type: str = "read"
    ajax: bool = True
    loginrequired: bool = True

    @property
    def implementation(self) -> Callable:
        return getattr(self.classname, self.methodname)

    @property
    def parameters_desc(self):
        return getattr(self.classname, self.methodname + "_parameters")()

    @property
    def returns_desc(self):
        return getattr(self.classname, self.methodname + "_returns")()


FUNCTIONS: Dict[str, ServiceFunction] = {
    "mod_studentquiz_edit_comment": ServiceFunction(
        classname=EditCommentApi,
        methodname="edit_comment",
        description="Edit comment",
        type="write",
        ajax=True,
        loginrequired=True,
    ),
}


def get_function(methodname: str, ajax_only: bool = True) -> ServiceFunction:
    """Return function `methodname`.

    :raises: :class:`ServiceNotAvailableException` if the function doesn't
        exist, or is not available via ajax when `ajax_only` is set.
    """
    function = FUNCTIONS.get(methodname)
    if function is None or (ajax_only and not function.ajax):
        raise ServiceNotAvailableException(methodname)
    return function


def call_external_function(methodname: str, args: Dict[str, Any]) -> Dict[str, Any]:
    """Call web service function `methodname` with `args`, in its own
    transaction.

    Returns a response item: `{"error": False, "data": ...}` on success, or
    `{"error": True, "exception": ...}` when the function raised a
    :class:`ModuleException`. Other exceptions propagate.
    """
    try:
        function = get_function(methodname)
        if function.loginrequired and not current_user.is_authenticated:
            raise RequireLoginException(methodname)

        params = function.classname.validate_parameters(
            function.parameters_desc, args
        )
        result = function.implementation(**params)
        data = function.classname.clean_returnvalue(function.returns_desc, result)
    except ModuleException as e:
        db.session.rollback()
        logger.info(
            "Web service %r failed: %s (%s)", methodname, e.errorcode, e.debuginfo
        )
        return {"error": True, "exception": e.to_dict()}
    except Exception:
        db.session.rollback()
        raise

    db.session.commit()
    logger.debug("Web service %r called by user %r", methodname, current_user.get_id())
    return {"error": False, "data": data}
