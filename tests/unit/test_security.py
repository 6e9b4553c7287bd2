from flask_sqlalchemy import SQLAlchemy
from pytest import raises

from studentquiz.core.login import AnonymousUser
from studentquiz.core.models import CourseModule, User
from studentquiz.exceptions import RequirePermissionException
from studentquiz.security import MANAGE_COMMENT, SUBMIT, VIEW, VIEW_HIDDEN, \
    has_capability, require_capability


def test_student_capabilities(cm: CourseModule, user: User):
    assert has_capability(VIEW, cm, user)
    assert has_capability(SUBMIT, cm, user)
    assert not has_capability(MANAGE_COMMENT, cm, user)
    assert not has_capability(VIEW_HIDDEN, cm, user)


def test_teacher_capabilities(cm: CourseModule, teacher: User):
    assert has_capability(MANAGE_COMMENT, cm, teacher)
    assert has_capability(VIEW_HIDDEN, cm, teacher)


def test_admin_has_all_capabilities(cm: CourseModule, admin_user: User):
    assert admin_user.enrolment_role(cm.course) is None
    assert has_capability(MANAGE_COMMENT, cm, admin_user)


def test_no_capability_without_enrolment(db: SQLAlchemy, cm: CourseModule):
    stranger = User(username="stranger", email="stranger@example.com")
    db.session.add(stranger)
    db.session.commit()

    assert not has_capability(VIEW, cm, stranger)
    assert not has_capability(VIEW, cm, AnonymousUser())
    assert not has_capability(VIEW, cm, None)


def test_require_capability(req_ctx, cm: CourseModule, user: User):
    require_capability(VIEW, cm, user)

    with raises(RequirePermissionException) as exc_info:
        require_capability(MANAGE_COMMENT, cm, user)

    e = exc_info.value
    assert e.errorcode == "nopermissions"
    assert e.module == "error"
    assert e.capability == MANAGE_COMMENT
    assert e.message == (
        "Sorry, but you do not currently have permissions to do that "
        "(mod/studentquiz:managecomment)."
    )
