"""Configuration and injectable fixtures for Pytest.

Can be reused (and overriden) by adding::

   pytest_plugins = ['studentquiz.testing.fixtures']

to your `conftest.py`.
"""
from datetime import timedelta
from typing import Any, Iterator

from flask import Flask
from flask.ctx import AppContext, RequestContext
from flask.testing import FlaskClient
from flask_sqlalchemy import SQLAlchemy
from pytest import fixture
from sqlalchemy.orm import Session

from studentquiz.app import create_app
from studentquiz.core.models import Comment, Course, CourseModule, Enrolment, \
    Question, StudentQuiz, StudentQuizQuestion, User
from studentquiz.core.models.course import STUDENT, TEACHER
from studentquiz.core.util import utcnow


class TestConfig:
    TESTING = True
    DEBUG = True
    SECRET_KEY = "SECRET"
    SERVER_NAME = "localhost.localdomain"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    MAIL_SENDER = "tester@example.com"
    WTF_CSRF_ENABLED = False
    BABEL_ACCEPT_LANGUAGES = ["en"]


@fixture
def config() -> type:
    return TestConfig


@fixture
def app(config: Any) -> Flask:
    # We currently return a fresh app for each test.
    return create_app(config=config)


@fixture
def app_context(app: Flask) -> Iterator[AppContext]:
    with app.app_context() as ctx:
        yield ctx


@fixture
def req_ctx(app: Flask, db: SQLAlchemy) -> Iterator[RequestContext]:
    with app.test_request_context() as _req_ctx:
        yield _req_ctx


@fixture
def db(app_context: AppContext) -> Iterator[SQLAlchemy]:
    """Return a fresh db for each test."""
    from studentquiz.core.extensions import db

    db.create_all()
    yield db

    db.session.remove()
    db.drop_all()


@fixture
def session(db: SQLAlchemy) -> Session:
    return db.session


@fixture
def client(app: Flask) -> FlaskClient:
    """Return a Web client, used for testing."""
    return app.test_client()


def _make_user(db: SQLAlchemy, username: str, first_name: str, **kw: Any) -> User:
    user = User(
        username=username,
        first_name=first_name,
        last_name="Test",
        email=f"{username}@example.com",
        can_login=True,
        **kw,
    )
    db.session.add(user)
    db.session.flush()
    return user


@fixture
def course(db: SQLAlchemy) -> Course:
    course = Course(fullname="Test course", shortname="TC1")
    db.session.add(course)
    db.session.flush()
    return course


@fixture
def user(db: SQLAlchemy, course: Course) -> User:
    """A student of `course`."""
    user = _make_user(db, "joe", "Joe")
    db.session.add(Enrolment(user=user, course=course, role=STUDENT))
    db.session.commit()
    return user


@fixture
def other_user(db: SQLAlchemy, course: Course) -> User:
    """Another student of `course`."""
    user = _make_user(db, "jane", "Jane")
    db.session.add(Enrolment(user=user, course=course, role=STUDENT))
    db.session.commit()
    return user


@fixture
def teacher(db: SQLAlchemy, course: Course) -> User:
    user = _make_user(db, "tom", "Tom")
    db.session.add(Enrolment(user=user, course=course, role=TEACHER))
    db.session.commit()
    return user


@fixture
def admin_user(db: SQLAlchemy) -> User:
    user = _make_user(db, "admin", "Jim", is_admin=True)
    db.session.commit()
    return user


@fixture
def studentquiz(db: SQLAlchemy, course: Course) -> StudentQuiz:
    studentquiz = StudentQuiz(course=course, name="Week 1", commentdeletionperiod=10)
    db.session.add(studentquiz)
    db.session.flush()
    return studentquiz


@fixture
def cm(db: SQLAlchemy, course: Course, studentquiz: StudentQuiz) -> CourseModule:
    cm = CourseModule(course=course, studentquiz=studentquiz, visible=True)
    db.session.add(cm)
    db.session.commit()
    return cm


@fixture
def studentquizquestion(
    db: SQLAlchemy, studentquiz: StudentQuiz, cm: CourseModule, other_user: User
) -> StudentQuizQuestion:
    question = Question(
        name="Capital of France",
        questiontext="What is the capital of France?",
        created_by=other_user,
    )
    sqq = StudentQuizQuestion(studentquiz=studentquiz, question=question)
    db.session.add(sqq)
    db.session.commit()
    return sqq


@fixture
def comment(
    db: SQLAlchemy, studentquizquestion: StudentQuizQuestion, user: User
) -> Comment:
    """A public root comment of `user`, posted a minute ago."""
    comment = Comment(
        studentquizquestion=studentquizquestion,
        user=user,
        comment="<p>First comment</p>",
        created=utcnow() - timedelta(minutes=1),
    )
    db.session.add(comment)
    db.session.commit()
    return comment


@fixture
def login_user(user: User, client: FlaskClient) -> User:
    with client.session_transaction() as session:
        session["_user_id"] = str(user.id)
        session["_fresh"] = True

    return user
