""""""
import logging
from typing import Any, Dict, Optional

from flask import current_app
from flask_login import current_user

from studentquiz.core.extensions import db
from studentquiz.core.models.comment import COMMENT_TYPE_PUBLIC
from studentquiz.core.models.comment import Comment as CommentModel
from studentquiz.core.models.course import CourseModule, StudentQuiz, \
    StudentQuizQuestion
from studentquiz.security import MANAGE_COMMENT, has_capability

from .comment import Comment

logger = logging.getLogger(__name__)


class Container:
    """Comments on a studentquiz question, as seen by `user`.

    :param studentquizquestion: the commented question.
    :param user: the viewing user, defaults to current user.
    :param type: comment type handled by this container.
    """

    def __init__(
        self,
        studentquizquestion: StudentQuizQuestion,
        user: Any = None,
        type: int = COMMENT_TYPE_PUBLIC,
    ) -> None:
        self.studentquizquestion = studentquizquestion
        self.user = user if user is not None else current_user._get_current_object()
        self.type = type
        self._comments: Optional[Dict[int, CommentModel]] = None

    def get_studentquiz(self) -> StudentQuiz:
        return self.studentquizquestion.studentquiz

    def get_context(self) -> CourseModule:
        return self.studentquizquestion.get_context()

    def get_user(self) -> Any:
        return self.user

    def is_moderator(self) -> bool:
        return has_capability(MANAGE_COMMENT, self.get_context(), self.user)

    @property
    def shortcontent_length(self) -> int:
        return current_app.config.get("STUDENTQUIZ_COMMENT_SHORTCONTENT_LENGTH", 75)

    def _fetch(self) -> Dict[int, CommentModel]:
        if self._comments is None:
            query = CommentModel.query.filter(
                CommentModel.studentquizquestion_id == self.studentquizquestion.id,
                CommentModel.type == self.type,
            ).order_by(CommentModel.created, CommentModel.id)
            self._comments = {row.id: row for row in query.all()}
            logger.debug(
                "Loaded %d comments for studentquizquestion %r",
                len(self._comments),
                self.studentquizquestion.id,
            )
        return self._comments

    def query_comment_by_id(self, comment_id: int) -> Optional[Comment]:
        """Return comment `comment_id`, or `None` if it doesn't belong to this
        container."""
        row = self._fetch().get(comment_id)
        if row is None:
            return None
        return self._build(row)

    def refresh_has_comment(self) -> "Container":
        """Forget loaded comments: next queries hit the database again."""
        if self._comments:
            for row in self._comments.values():
                db.session.expire(row)
        self._comments = None
        return self

    def get_reply_count(self, comment_id: int) -> int:
        return sum(
            1
            for row in self._fetch().values()
            if row.parent_id == comment_id and row.deleted is None
        )

    def _build(self, row: CommentModel) -> Comment:
        parent = None
        if row.parent_id:
            parent_row = self._fetch().get(row.parent_id)
            if parent_row is not None:
                parent = Comment(self, parent_row)
        return Comment(self, row, parent)

    def __repr__(self):
        return "<Container studentquizquestion={!r} type={!r} user={!r}>".format(
            self.studentquizquestion.id, self.type, getattr(self.user, "id", None)
        )
