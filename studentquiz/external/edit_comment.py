"""Edit comment service implementation."""
import json
import logging
from typing import Any, Dict

from flask_login import current_user

from studentquiz import utils
from studentquiz.commentarea import Container
from studentquiz.commentarea.forms import ValidateCommentForm
from studentquiz.core.signals import comment_edited
from studentquiz.exceptions import ModuleException
from studentquiz.i18n import get_string

from .api import PARAM_INT, PARAM_RAW, PARAM_TEXT, VALUE_DEFAULT, \
    ExternalApi, ExternalFunctionParameters, ExternalSingleStructure, \
    ExternalValue

logger = logging.getLogger(__name__)


class EditCommentApi(ExternalApi):
    @staticmethod
    def edit_comment_parameters() -> ExternalFunctionParameters:
        return ExternalFunctionParameters(
            {
                "studentquizquestionid": ExternalValue(
                    PARAM_INT, "Studentquizquestion ID"
                ),
                "cmid": ExternalValue(PARAM_INT, "Cm ID"),
                "commentid": ExternalValue(PARAM_INT, "Comment ID to edit."),
                "message": ExternalFunctionParameters(
                    {
                        "text": ExternalValue(PARAM_RAW, "Message of the post"),
                        "format": ExternalValue(PARAM_TEXT, "Format of the message"),
                    }
                ),
                "type": ExternalValue(
                    PARAM_INT, "Comment type", VALUE_DEFAULT, utils.COMMENT_TYPE_PUBLIC
                ),
            }
        )

    @staticmethod
    def edit_comment_returns() -> ExternalSingleStructure:
        return ExternalSingleStructure(
            utils.get_comment_area_webservice_comment_reply_structure()
        )

    @classmethod
    def edit_comment(
        cls,
        studentquizquestionid: int,
        cmid: int,
        commentid: int,
        message: Dict[str, Any],
        type: int = utils.COMMENT_TYPE_PUBLIC,
    ) -> Dict[str, Any]:
        """Edit comment `commentid` of studentquiz question
        `studentquizquestionid`.

        :returns: the updated comment, as a comment reply structure.
        :raises: :class:`ModuleException` if the comment doesn't exist
            ("invalidcomment"), if the user may not edit it (message from the
            comment), or if the message doesn't validate
            ("error_form_validation", field errors JSON-encoded in
            `debuginfo`).
        """
        params = cls.validate_parameters(
            cls.edit_comment_parameters(),
            {
                "studentquizquestionid": studentquizquestionid,
                "cmid": cmid,
                "commentid": commentid,
                "message": message,
                "type": type,
            },
        )

        studentquizquestion = utils.get_data_for_comment_area(
            params["studentquizquestionid"], params["cmid"]
        )
        context = studentquizquestion.get_context()
        cls.validate_context(context)
        commentarea = Container(studentquizquestion, type=params["type"])

        comment = commentarea.query_comment_by_id(params["commentid"])
        if not comment:
            raise ModuleException(get_string("invalidcomment"), "studentquiz")

        # Check edit permission.
        if not comment.can_edit():
            raise ModuleException(comment.get_error(), "studentquiz")

        formdata = {"message": params["message"]}
        form = ValidateCommentForm(
            params={
                "questionid": params["studentquizquestionid"],
                "cmid": params["cmid"],
                "commentid": params["commentid"],
                "editmode": True,
                "type": params["type"],
            },
            data=formdata,
        )

        # Validate form data.
        validatedata = form.get_data()
        if not validatedata:
            errors = form.get_form_errors()
            raise ModuleException(
                "error_form_validation",
                "studentquiz",
                a=json.dumps(errors),
                debuginfo=json.dumps(errors),
            )

        comment.update_comment(validatedata)

        # Fetch db again to get full data.
        comment = commentarea.refresh_has_comment().query_comment_by_id(
            params["commentid"]
        )
        if not comment:
            raise ModuleException(get_string("invalidcomment"), "studentquiz")

        utils.create_comment_history(comment, utils.COMMENT_HISTORY_EDIT)

        comment_edited.send(
            commentarea, comment=comment.get_comment_data(), user=current_user
        )

        return comment.convert_to_object()
