"""Forms of the comment area.

They are used to validate data submitted to web services, not to render
HTML.
"""
import logging
from typing import Any, Dict, Optional

from flask_wtf import FlaskForm
from werkzeug.datastructures import MultiDict
from wtforms import Form
from wtforms.fields import FormField, HiddenField, TextAreaField
from wtforms.validators import AnyOf, StopValidation

from studentquiz.core.util import html_to_text
from studentquiz.i18n import get_string, lazy_string

logger = logging.getLogger(__name__)

FORMAT_MOODLE = "0"
FORMAT_HTML = "1"
FORMAT_PLAIN = "2"
FORMAT_MARKDOWN = "4"

FORMATS = (FORMAT_MOODLE, FORMAT_HTML, FORMAT_PLAIN, FORMAT_MARKDOWN)


def strip(data):
    """Strip data if data is a string."""
    if data is None:
        return ""
    if not isinstance(data, str):
        return data
    return data.strip()


class TextRequired:
    """Field must contain some text once HTML tags are removed."""

    field_flags = {"required": True}

    def __call__(self, form, field):
        if not html_to_text(field.data).strip():
            field.errors[:] = []
            raise StopValidation(get_string("required"))


class MessageForm(Form):
    """Editor content: text and its format."""

    text = TextAreaField(
        label=lazy_string("editcomment"), validators=[TextRequired()], filters=(strip,)
    )
    format = HiddenField(default=FORMAT_HTML, validators=[AnyOf(FORMATS)])


class ValidateCommentForm(FlaskForm):
    """Validate a comment message, on creation or edition.

    :param params: the comment area parameters this form works with
        (`questionid`, `cmid`, `commentid`, `editmode`, `type`).
    :param data: submitted values, as a dict like `{"message": {"text":
        ..., "format": ...}}`.
    """

    message = FormField(MessageForm)

    class Meta:
        # session key is checked once per request by the web service layer
        csrf = False

    def __init__(
        self,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
        **kwargs: Any,
    ) -> None:
        self.params = params or {}
        if data is not None:
            kwargs["formdata"] = self.to_formdata(data)
        super().__init__(**kwargs)

    @staticmethod
    def to_formdata(data: Dict[str, Any]) -> MultiDict:
        """Flatten nested submitted values to WTForms' `prefix-name` keys."""
        formdata = MultiDict()
        for key, value in data.items():
            if isinstance(value, dict):
                for subkey, subvalue in value.items():
                    formdata.add(f"{key}-{subkey}", subvalue)
            else:
                formdata.add(key, value)
        return formdata

    def get_data(self) -> Optional[Dict[str, Any]]:
        """Validated data, `None` if validation fails."""
        if not self.validate():
            logger.warning(
                "Comment form validation failed (commentid=%r): %r",
                self.params.get("commentid"),
                self.errors,
            )
            return None

        data = dict(self.data)
        data.pop("csrf_token", None)
        data.update(self.params)
        return data

    def get_form_errors(self) -> Dict[str, str]:
        """Validation errors as `{field name: first message}`."""
        errors = {}
        for name, messages in self.errors.items():
            if isinstance(messages, dict):
                messages = [m for sub in messages.values() for m in sub]
            if messages:
                errors[name] = str(messages[0])
        return errors
