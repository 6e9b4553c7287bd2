"""Question change notification.

Authors are told by email when a teacher modifies one of their questions.
Sending is triggered by the :data:`~studentquiz.core.signals.question_changed`
signal, or directly with :func:`notify_question_change`.
"""
import logging
from typing import Any

from flask import Flask, current_app

from studentquiz.core.extensions import Message, mail
from studentquiz.core.models.course import StudentQuizQuestion
from studentquiz.core.signals import question_changed
from studentquiz.i18n import get_string

logger = logging.getLogger(__name__)


def notify_question_change(studentquizquestion: StudentQuizQuestion, url: str) -> Message:
    """Email the author of `studentquizquestion` that a teacher modified it.

    The returned message has a `smallmessage` attribute: the one line
    summary used for notification popups.
    """
    question = studentquizquestion.question
    studentquiz = studentquizquestion.studentquiz
    author = question.created_by

    a = {
        "username": author.name,
        "questionname": question.name,
        "coursename": studentquiz.course.fullname,
        "quizname": studentquiz.name,
        "questionurl": url,
    }
    msg = Message(
        subject=get_string("emailchangesubject", a=a),
        recipients=[author.email],
        body=get_string("emailchangebody", a=a),
        sender=current_app.config["MAIL_SENDER"],
    )
    msg.smallmessage = get_string("emailchangesmall", a=a)

    mail.send(msg)
    logger.info(
        "Question change notification sent to user %r for question %r",
        author.id,
        question.id,
    )
    return msg


def _on_question_changed(sender: Any, studentquizquestion=None, url="", **kwargs):
    notify_question_change(studentquizquestion, url)


def init_app(app: Flask) -> None:
    question_changed.connect(_on_question_changed, sender=app)
