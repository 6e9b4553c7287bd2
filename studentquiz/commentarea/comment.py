""""""
import logging
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from studentquiz.core.extensions import db
from studentquiz.core.models.comment import Comment as CommentModel
from studentquiz.core.util import html_to_text, shorten_text, timestamp, \
    utc_dt, utcnow
from studentquiz.i18n import get_string

if TYPE_CHECKING:
    from .container import Container

logger = logging.getLogger(__name__)


class Comment:
    """A comment of a :class:`~.container.Container`.

    Permission checks (`can_*` methods) record why an action is refused;
    :meth:`get_error` returns the localized reason.
    """

    def __init__(
        self,
        container: "Container",
        data: CommentModel,
        parent: Optional["Comment"] = None,
    ) -> None:
        self.container = container
        self.data = data
        self.parent = parent
        self.errors: List[str] = []

    @property
    def id(self) -> int:
        return self.data.id

    def get_comment_data(self) -> CommentModel:
        return self.data

    def is_creator(self) -> bool:
        user = self.container.get_user()
        return user is not None and user.id is not None and user.id == self.data.user_id

    def is_deleted(self) -> bool:
        return self.data.deleted is not None

    def is_root_comment(self) -> bool:
        return self.parent is None and self.data.is_root

    def is_in_edit_period(self) -> bool:
        period = self.container.get_studentquiz().commentdeletionperiod
        if not period:
            return True
        deadline = utc_dt(self.data.created) + timedelta(minutes=period)
        return utcnow() <= deadline

    def can_edit(self) -> bool:
        """Current user may edit this comment: they wrote it, it is not
        deleted, and it is recent enough."""
        self.errors = []
        if not self.is_creator():
            self.errors.append("describe_not_creator")
        elif self.is_deleted():
            self.errors.append("describe_already_deleted")
        elif not self.is_in_edit_period():
            self.errors.append("describe_out_of_time_edit")
        return not self.errors

    def can_delete(self) -> bool:
        """Like :meth:`can_edit`, but moderators can delete any comment at any
        time."""
        if self.container.is_moderator():
            self.errors = []
            if self.is_deleted():
                self.errors.append("describe_already_deleted")
            return not self.errors
        return self.can_edit()

    def can_report(self) -> bool:
        return not self.is_deleted() and not self.is_creator()

    def get_error(self) -> str:
        """Localized reason of last refused action, empty string if none."""
        if not self.errors:
            return ""
        return get_string(self.errors[-1])

    def update_comment(self, data: Dict[str, Any]) -> None:
        """Apply validated form data: only the message changes."""
        message = data["message"]
        user = self.container.get_user()
        self.data.comment = message["text"]
        self.data.edited = utcnow()
        self.data.edit_user_id = user.id
        db.session.flush()
        logger.info("Comment %r edited by user %r", self.data.id, user.id)

    def get_author_name(self) -> str:
        author = self.data.user
        studentquiz = self.container.get_studentquiz()
        if (
            studentquiz.anonymrank
            and not self.is_creator()
            and not self.container.is_moderator()
        ):
            return "{} {}".format(
                get_string("creator_anonym_firstname"),
                get_string("creator_anonym_lastname"),
            )
        return author.name

    def convert_to_object(self) -> Dict[str, Any]:
        """Comment as the comment reply structure of web services."""
        row = self.data
        deleted = self.is_deleted()
        moderator = self.container.is_moderator()

        content = row.comment
        if deleted and not moderator:
            content = ""

        numberofreply = self.container.get_reply_count(row.id)
        result = {
            "id": row.id,
            "studentquizquestionid": row.studentquizquestion_id,
            "parentid": row.parent_id,
            "content": content,
            "shortcontent": shorten_text(
                html_to_text(content), self.container.shortcontent_length
            ),
            "numberofreply": numberofreply,
            "plural": get_string("reply" if numberofreply == 1 else "replies"),
            "candelete": self.can_delete(),
            "canedit": self.can_edit(),
            "canreport": self.can_report(),
            "iscreator": self.is_creator(),
            "root": self.is_root_comment(),
            "deleted": deleted,
            "deletedtime": timestamp(row.deleted),
            "authorname": self.get_author_name(),
            "posttime": timestamp(row.created),
            "lastedittime": timestamp(row.edited),
            "type": row.type,
            "status": row.status,
        }
        # permission checks above are informative only
        self.errors = []

        if deleted and row.delete_user is not None:
            result["deleteuser"] = {
                "firstname": row.delete_user.first_name,
                "lastname": row.delete_user.last_name,
            }
        if row.edited is not None and row.edit_user is not None:
            result["edituser"] = {
                "firstname": row.edit_user.first_name,
                "lastname": row.edit_user.last_name,
            }
        return result

    def __repr__(self):
        return f"<commentarea.Comment id={self.data.id!r}>"
