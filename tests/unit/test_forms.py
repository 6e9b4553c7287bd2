from flask.ctx import AppContext

from studentquiz.commentarea.forms import ValidateCommentForm

PARAMS = {"questionid": 1, "cmid": 2, "commentid": 3, "editmode": True, "type": 0}


def make_form(text, format="1") -> ValidateCommentForm:
    return ValidateCommentForm(
        params=PARAMS, data={"message": {"text": text, "format": format}}
    )


def test_valid_message(app_context: AppContext):
    form = make_form("  <p>Hello</p>  ")
    data = form.get_data()
    assert data is not None
    assert data["message"] == {"text": "<p>Hello</p>", "format": "1"}
    assert data["commentid"] == 3
    assert data["editmode"] is True


def test_empty_message(app_context: AppContext):
    form = make_form("")
    assert form.get_data() is None
    assert form.get_form_errors() == {"message": "Required"}


def test_html_only_message(app_context: AppContext):
    form = make_form("<p> </p><br/>")
    assert form.get_data() is None
    assert form.get_form_errors() == {"message": "Required"}


def test_invalid_format(app_context: AppContext):
    form = make_form("Hello", format="9")
    assert form.get_data() is None
    assert list(form.get_form_errors()) == ["message"]


def test_to_formdata():
    formdata = ValidateCommentForm.to_formdata(
        {"message": {"text": "a", "format": "1"}, "other": "b"}
    )
    assert formdata["message-text"] == "a"
    assert formdata["message-format"] == "1"
    assert formdata["other"] == "b"
