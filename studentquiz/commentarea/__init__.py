"""Comment area of a StudentQuiz question.

A :class:`~.container.Container` holds the comments of one question (of
one type, public or private) as seen by one user, and hands out
:class:`~.comment.Comment` objects that know what this user may do with
them.
"""
from .comment import Comment
from .container import Container

__all__ = ["Comment", "Container"]
