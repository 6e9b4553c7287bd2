"""Capabilities granted to course roles.

Capability checks are done on a context, the
:class:`~studentquiz.core.models.CourseModule` of an activity. Site admins
have all capabilities; other users get those of their role in the course.
"""
import logging
from typing import Any, Dict, FrozenSet

from studentquiz.core.models.course import MANAGER, STUDENT, TEACHER, \
    CourseModule
from studentquiz.exceptions import RequirePermissionException

logger = logging.getLogger(__name__)

VIEW = "mod/studentquiz:view"
SUBMIT = "mod/studentquiz:submit"
ADD_INSTANCE = "mod/studentquiz:addinstance"
MANAGE_COMMENT = "mod/studentquiz:managecomment"
VIEW_HIDDEN = "moodle/course:viewhiddenactivities"

CAPABILITIES: Dict[str, FrozenSet[str]] = {
    STUDENT: frozenset({VIEW, SUBMIT}),
    TEACHER: frozenset({VIEW, SUBMIT, ADD_INSTANCE, MANAGE_COMMENT, VIEW_HIDDEN}),
    MANAGER: frozenset({VIEW, SUBMIT, ADD_INSTANCE, MANAGE_COMMENT, VIEW_HIDDEN}),
}


def has_capability(capability: str, context: CourseModule, user: Any) -> bool:
    if user is None or not user.is_authenticated:
        return False

    if user.is_admin:
        return True

    role = user.enrolment_role(context.course)
    if role is None:
        return False

    return capability in CAPABILITIES.get(role, frozenset())


def require_capability(capability: str, context: CourseModule, user: Any) -> None:
    """Raise :class:`RequirePermissionException` if `user` lacks
    `capability` in `context`."""
    if not has_capability(capability, context, user):
        logger.info(
            "Permission %r denied to user %r on cm %r",
            capability,
            getattr(user, "id", None),
            context.id,
        )
        raise RequirePermissionException(capability)
