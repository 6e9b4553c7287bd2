"""Courses, enrolments and the StudentQuiz activity they host."""
from sqlalchemy import Boolean, CheckConstraint, Column, ForeignKey, Integer, \
    UnicodeText, UniqueConstraint
from sqlalchemy.orm import backref, relationship
from sqlalchemy.types import String

from .base import IdMixin, Model, TimestampedMixin
from .subjects import User

STUDENT = "student"
TEACHER = "teacher"
MANAGER = "manager"


class Course(IdMixin, TimestampedMixin, Model):
    __tablename__ = "course"

    fullname = Column(UnicodeText, nullable=False)
    shortname = Column(UnicodeText, nullable=False)

    def __repr__(self):
        return f"<Course id={self.id!r} shortname={self.shortname!r}>"


class Enrolment(IdMixin, Model):
    __tablename__ = "enrolment"

    user_id = Column(Integer, ForeignKey(User.id), nullable=False)
    user = relationship(
        User, backref=backref("enrolments", cascade="all, delete-orphan")
    )

    course_id = Column(Integer, ForeignKey(Course.id), nullable=False)
    course = relationship(
        Course, backref=backref("enrolments", cascade="all, delete-orphan")
    )

    role = Column(
        String(20),
        CheckConstraint("role IN ('student', 'teacher', 'manager')"),
        nullable=False,
        default=STUDENT,
    )

    __table_args__ = (UniqueConstraint("user_id", "course_id"),)


class StudentQuiz(IdMixin, TimestampedMixin, Model):
    """An instance of the StudentQuiz activity."""

    __tablename__ = "studentquiz"

    course_id = Column(Integer, ForeignKey(Course.id), nullable=False)
    course = relationship(Course)

    name = Column(UnicodeText, nullable=False)

    #: anonymize the "created by" column and the ranking table for students
    anonymrank = Column(Boolean, nullable=False, default=True)

    #: minutes during which a comment can still be edited or deleted by its
    #: author. 0 means no limit.
    commentdeletionperiod = Column(Integer, nullable=False, default=10)

    #: allow private comments between authors and teachers
    privatecommenting = Column(Boolean, nullable=False, default=False)


class CourseModule(IdMixin, Model):
    """Placement of an activity instance in a course (the `cmid`)."""

    __tablename__ = "course_module"

    course_id = Column(Integer, ForeignKey(Course.id), nullable=False)
    course = relationship(Course)

    studentquiz_id = Column(Integer, ForeignKey(StudentQuiz.id), nullable=False)
    studentquiz = relationship(
        StudentQuiz, backref=backref("course_module", uselist=False)
    )

    visible = Column(Boolean, nullable=False, default=True)


class Question(IdMixin, TimestampedMixin, Model):
    __tablename__ = "question"

    name = Column(UnicodeText, nullable=False)
    questiontext = Column(UnicodeText, nullable=False, default="")

    created_by_id = Column(Integer, ForeignKey(User.id), nullable=False)
    created_by = relationship(User, foreign_keys=[created_by_id])


class StudentQuizQuestion(IdMixin, Model):
    """Pairs a question with the StudentQuiz instance hosting it."""

    __tablename__ = "studentquiz_question"

    studentquiz_id = Column(Integer, ForeignKey(StudentQuiz.id), nullable=False)
    studentquiz = relationship(
        StudentQuiz, backref=backref("questions", cascade="all, delete-orphan")
    )

    question_id = Column(Integer, ForeignKey(Question.id), nullable=False)
    question = relationship(Question, lazy="joined")

    #: 0 changed, 1 approved, 2 disapproved, 3 new...
    state = Column(Integer, nullable=False, default=3)
    hidden = Column(Boolean, nullable=False, default=False)

    __table_args__ = (UniqueConstraint("studentquiz_id", "question_id"),)

    def get_context(self) -> CourseModule:
        """The course module the question lives in."""
        return self.studentquiz.course_module

    def __repr__(self):
        return "<StudentQuizQuestion id={!r} studentquiz={!r} question={!r}>".format(
            self.id, self.studentquiz_id, self.question_id
        )
