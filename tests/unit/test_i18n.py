import flask_login
from flask_babel import force_locale
from pytest import raises

from studentquiz.exceptions import CodingException
from studentquiz.i18n import current_language, format_string, get_string, \
    lazy_string, localeselector, string_exists
from studentquiz.lang import en


class Person:
    username = "Joe"
    questionname = "Q1"


def test_get_string():
    assert get_string("pluginname") == "StudentQuiz"
    assert get_string("invalidcomment") == "Invalid comment"


def test_get_string_scalar_placeholder():
    text = get_string("approveselectedscheck", a="Q1, Q2")
    assert text.endswith("<br /><br />Q1, Q2")


def test_get_string_named_placeholders():
    a = {"quizname": "Week 1"}
    assert get_string("emailchangesubject", a=a) == "Question modification: Week 1"


def test_format_string_object():
    text = format_string("Dear {$a->username}, about {$a->questionname}.", Person())
    assert text == "Dear Joe, about Q1."


def test_format_string_missing_key():
    assert format_string("[{$a->nothere}]", {}) == "[]"


def test_format_string_without_a():
    assert format_string("{$a} stays", None) == "{$a} stays"


def test_unknown_identifier():
    with raises(CodingException):
        get_string("this_string_does_not_exist")


def test_unknown_component():
    with raises(CodingException):
        get_string("pluginname", "mod_forum")
    assert not string_exists("pluginname", "mod_forum")


def test_string_exists():
    assert string_exists("describe_not_creator")
    assert not string_exists("Invalid comment")


def test_lazy_string():
    label = lazy_string("reply")
    assert str(label) == "Reply"


def test_string_table_is_flat():
    assert all(isinstance(k, str) for k in en.string)
    assert all(isinstance(v, str) for v in en.string.values())


def test_localeselector_outside_request(app_context):
    assert localeselector() is None


def test_localeselector_accept_language(app):
    app.config["BABEL_ACCEPT_LANGUAGES"] = ["en", "fr"]

    with app.test_request_context(headers={"Accept-Language": "fr,en;q=0.5"}):
        assert localeselector() == "fr"


def test_localeselector_no_match(app):
    app.config["BABEL_ACCEPT_LANGUAGES"] = ["en", "fr"]

    with app.test_request_context(headers={"Accept-Language": "es"}):
        assert localeselector() is None
        assert current_language() == "en"


def test_localeselector_user_lang(app, db, user):
    app.config["BABEL_ACCEPT_LANGUAGES"] = ["en", "fr"]
    user.lang = "de"
    db.session.commit()

    with app.test_request_context(headers={"Accept-Language": "fr"}):
        flask_login.login_user(user)
        assert localeselector() == "de"


def test_get_string_falls_back_to_english(app_context):
    with force_locale("fr"):
        assert current_language() == "fr"
        assert get_string("pluginname") == "StudentQuiz"
