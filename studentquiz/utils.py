"""Helpers shared by the comment area and the web services."""
import logging
from typing import Any, Dict

from flask_login import current_user

from studentquiz.core.extensions import db
from studentquiz.core.models.comment import COMMENT_HISTORY_CREATE, \
    COMMENT_HISTORY_DELETE, COMMENT_HISTORY_EDIT, COMMENT_TYPE_PRIVATE, \
    COMMENT_TYPE_PUBLIC, CommentHistory
from studentquiz.core.models.course import CourseModule, StudentQuizQuestion
from studentquiz.core.util import utcnow
from studentquiz.exceptions import ModuleException
from studentquiz.external.api import PARAM_BOOL, PARAM_INT, PARAM_RAW, \
    PARAM_TEXT, VALUE_OPTIONAL, ExternalDescription, ExternalSingleStructure, \
    ExternalValue

__all__ = [
    "COMMENT_TYPE_PUBLIC",
    "COMMENT_TYPE_PRIVATE",
    "COMMENT_HISTORY_CREATE",
    "COMMENT_HISTORY_EDIT",
    "COMMENT_HISTORY_DELETE",
    "get_data_for_comment_area",
    "create_comment_history",
    "get_comment_area_webservice_comment_reply_structure",
]

logger = logging.getLogger(__name__)


def get_data_for_comment_area(
    studentquizquestionid: int, cmid: int
) -> StudentQuizQuestion:
    """Load the studentquiz question `studentquizquestionid` hosted by course
    module `cmid`.

    :raises: :class:`ModuleException` if either doesn't exist, or if the
        question doesn't belong to the module's activity.
    """
    cm = db.session.get(CourseModule, cmid)
    if cm is None:
        raise ModuleException("invalidcoursemodule", "error", debuginfo=str(cmid))

    studentquizquestion = db.session.get(StudentQuizQuestion, studentquizquestionid)
    if (
        studentquizquestion is None
        or studentquizquestion.studentquiz_id != cm.studentquiz_id
    ):
        raise ModuleException(
            "invalidrecord",
            "error",
            a="studentquiz_question",
            debuginfo=f"id={studentquizquestionid} cmid={cmid}",
        )

    return studentquizquestion


def create_comment_history(comment: Any, action: int) -> CommentHistory:
    """Record `action` on `comment` (a comment area comment) in its history.

    The entry keeps the comment content as it is after the action.
    """
    data = comment.get_comment_data()
    history = CommentHistory(
        comment=data,
        content=data.comment,
        user_id=current_user.id,
        action=action,
        timemodified=utcnow(),
    )
    db.session.add(history)
    db.session.flush()
    logger.debug(
        "History %r recorded for comment %r (action=%d)", history.id, data.id, action
    )
    return history


def _user_structure(desc: str) -> ExternalSingleStructure:
    return ExternalSingleStructure(
        {
            "firstname": ExternalValue(PARAM_TEXT, "First name"),
            "lastname": ExternalValue(PARAM_TEXT, "Last name"),
        },
        desc,
        VALUE_OPTIONAL,
    )


def get_comment_area_webservice_comment_reply_structure() -> Dict[
    str, ExternalDescription
]:
    """Keys of the comment structure returned by comment area web services."""
    return {
        "id": ExternalValue(PARAM_INT, "Comment ID"),
        "studentquizquestionid": ExternalValue(PARAM_INT, "Studentquizquestion ID"),
        "parentid": ExternalValue(PARAM_INT, "Parent comment ID"),
        "content": ExternalValue(PARAM_RAW, "Comment content"),
        "shortcontent": ExternalValue(PARAM_RAW, "Comment short content"),
        "numberofreply": ExternalValue(PARAM_INT, "Number of replies"),
        "plural": ExternalValue(PARAM_TEXT, "Reply plural text"),
        "candelete": ExternalValue(PARAM_BOOL, "Can delete"),
        "canedit": ExternalValue(PARAM_BOOL, "Can edit"),
        "canreport": ExternalValue(PARAM_BOOL, "Can report"),
        "iscreator": ExternalValue(PARAM_BOOL, "Is creator"),
        "root": ExternalValue(PARAM_BOOL, "Is root comment"),
        "deleted": ExternalValue(PARAM_BOOL, "Is deleted"),
        "deleteuser": _user_structure("Delete user"),
        "deletedtime": ExternalValue(PARAM_INT, "Deleted time"),
        "authorname": ExternalValue(PARAM_TEXT, "Author name"),
        "posttime": ExternalValue(PARAM_INT, "Post time"),
        "lastedittime": ExternalValue(PARAM_INT, "Last edit time"),
        "edituser": _user_structure("Edit user"),
        "type": ExternalValue(PARAM_INT, "Comment type"),
        "status": ExternalValue(PARAM_INT, "Comment status"),
    }
