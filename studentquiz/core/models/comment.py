""""""
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, \
    UnicodeText
from sqlalchemy.orm import backref, relationship
from sqlalchemy.types import DateTime

from studentquiz.core.util import utcnow

from .base import IdMixin, Model
from .course import StudentQuizQuestion
from .subjects import User

COMMENT_TYPE_PUBLIC = 0
COMMENT_TYPE_PRIVATE = 1

COMMENT_HISTORY_CREATE = 0
COMMENT_HISTORY_EDIT = 1
COMMENT_HISTORY_DELETE = 2

COMMENT_STATUS_ACTIVE = 0


class Comment(IdMixin, Model):
    """A comment on a StudentQuiz question."""

    __tablename__ = "studentquiz_comment"

    studentquizquestion_id = Column(
        Integer, ForeignKey(StudentQuizQuestion.id), nullable=False
    )

    #: Commented question
    studentquizquestion = relationship(
        StudentQuizQuestion,
        backref=backref(
            "comments",
            lazy="select",
            order_by="Comment.created",
            cascade="all, delete-orphan",
        ),
    )

    user_id = Column(Integer, ForeignKey(User.id), nullable=False)
    user = relationship(User, foreign_keys=[user_id], lazy="joined")

    #: id of the comment replied to, 0 for a root comment
    parent_id = Column(Integer, nullable=False, default=0)

    #: comment's main content
    comment = Column(
        UnicodeText(), CheckConstraint("trim(comment) != ''"), nullable=False
    )

    type = Column(
        Integer,
        CheckConstraint("type IN (0, 1)"),
        nullable=False,
        default=COMMENT_TYPE_PUBLIC,
    )
    status = Column(Integer, nullable=False, default=COMMENT_STATUS_ACTIVE)

    created = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    edited = Column(DateTime(timezone=True), nullable=True)
    edit_user_id = Column(Integer, ForeignKey(User.id), nullable=True)
    edit_user = relationship(User, foreign_keys=[edit_user_id])

    deleted = Column(DateTime(timezone=True), nullable=True)
    delete_user_id = Column(Integer, ForeignKey(User.id), nullable=True)
    delete_user = relationship(User, foreign_keys=[delete_user_id])

    @property
    def is_root(self) -> bool:
        return self.parent_id == 0

    def __repr__(self):
        class_ = self.__class__
        mod_ = class_.__module__
        classname = class_.__name__
        return "<{}.{} instance at 0x{:x} question id={!r} date={}".format(
            mod_, classname, id(self), self.studentquizquestion_id, self.created
        )


class CommentHistory(IdMixin, Model):
    """Audit trail of a comment: one row per creation, edit or deletion."""

    __tablename__ = "studentquiz_comment_history"

    comment_id = Column(Integer, ForeignKey(Comment.id), nullable=False)
    comment = relationship(
        Comment,
        backref=backref(
            "history",
            order_by="CommentHistory.id",
            cascade="all, delete-orphan",
        ),
    )

    #: content of the comment after the action
    content = Column(UnicodeText(), nullable=False)

    user_id = Column(Integer, ForeignKey(User.id), nullable=False)
    user = relationship(User)

    action = Column(
        Integer,
        CheckConstraint("action IN (0, 1, 2)"),
        nullable=False,
        default=COMMENT_HISTORY_CREATE,
    )

    timemodified = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self):
        return "<CommentHistory id={!r} comment={!r} action={!r}>".format(
            self.id, self.comment_id, self.action
        )
