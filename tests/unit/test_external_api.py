from pytest import raises

from studentquiz.external.api import PARAM_ALPHANUMEXT, PARAM_BOOL, \
    PARAM_INT, PARAM_RAW, PARAM_TEXT, VALUE_DEFAULT, VALUE_OPTIONAL, \
    ExternalApi, ExternalFunctionParameters, ExternalMultipleStructure, \
    ExternalSingleStructure, ExternalValue, clean_param
from studentquiz.exceptions import CodingException, InvalidParameterException


def parameters():
    return ExternalFunctionParameters(
        {
            "id": ExternalValue(PARAM_INT, "ID"),
            "message": ExternalFunctionParameters(
                {
                    "text": ExternalValue(PARAM_RAW, "Text"),
                    "format": ExternalValue(PARAM_TEXT, "Format"),
                }
            ),
            "type": ExternalValue(PARAM_INT, "Type", VALUE_DEFAULT, 0),
            "tags": ExternalMultipleStructure(
                ExternalValue(PARAM_ALPHANUMEXT, "Tag"), "Tags", VALUE_OPTIONAL
            ),
        }
    )


def test_clean_param_int():
    assert clean_param(3, PARAM_INT) == 3
    assert clean_param("42", PARAM_INT) == 42
    assert clean_param("-1", PARAM_INT) == -1
    assert clean_param("4x", PARAM_INT) is None
    assert clean_param(True, PARAM_INT) is None
    assert clean_param(1.5, PARAM_INT) is None


def test_clean_param_bool():
    assert clean_param(True, PARAM_BOOL) is True
    assert clean_param(0, PARAM_BOOL) is False
    assert clean_param("true", PARAM_BOOL) is True
    assert clean_param("maybe", PARAM_BOOL) is None


def test_clean_param_text():
    assert clean_param("<b>bold</b>", PARAM_TEXT) == "bold"
    assert clean_param(1, PARAM_TEXT) == "1"
    assert clean_param("<b>bold</b>", PARAM_RAW) == "<b>bold</b>"
    assert clean_param("a b-c_d", PARAM_ALPHANUMEXT) == "ab-c_d"


def test_clean_param_unknown_type():
    with raises(CodingException):
        clean_param("x", "float")


def test_validate_parameters():
    params = ExternalApi.validate_parameters(
        parameters(),
        {"id": "12", "message": {"text": "<p>Hi</p>", "format": 1}},
    )
    assert params == {
        "id": 12,
        "message": {"text": "<p>Hi</p>", "format": "1"},
        "type": 0,
    }


def test_validate_parameters_list():
    params = ExternalApi.validate_parameters(
        parameters(),
        {"id": 1, "message": {"text": "", "format": "1"}, "tags": ["a", "b_2"]},
    )
    assert params["tags"] == ["a", "b_2"]


def test_validate_parameters_missing_key():
    with raises(InvalidParameterException) as exc_info:
        ExternalApi.validate_parameters(parameters(), {"id": 1})
    assert "message" in exc_info.value.debuginfo


def test_validate_parameters_unexpected_key():
    with raises(InvalidParameterException) as exc_info:
        ExternalApi.validate_parameters(
            parameters(),
            {"id": 1, "message": {"text": "", "format": "1"}, "foo": "bar"},
        )
    assert "foo" in exc_info.value.debuginfo


def test_validate_parameters_bad_type():
    with raises(InvalidParameterException) as exc_info:
        ExternalApi.validate_parameters(
            parameters(), {"id": "abc", "message": {"text": "", "format": "1"}}
        )
    assert exc_info.value.errorcode == "invalidparameter"
    assert exc_info.value.debuginfo.startswith("id => ")


def test_validate_parameters_nested_bad_type():
    with raises(InvalidParameterException):
        ExternalApi.validate_parameters(
            parameters(), {"id": 1, "message": {"text": "", "format": "<b>1</b>"}}
        )


def test_validate_parameters_scalar_expected():
    with raises(InvalidParameterException):
        ExternalApi.validate_parameters(
            parameters(), {"id": [1], "message": {"text": "", "format": "1"}}
        )


def test_validate_parameters_structure_expected():
    with raises(InvalidParameterException):
        ExternalApi.validate_parameters(parameters(), "not a dict")


def test_validate_parameters_null_not_allowed():
    description = ExternalValue(PARAM_INT, "ID", allownull=False)
    with raises(InvalidParameterException):
        ExternalApi.validate_parameters(description, None)


def test_clean_returnvalue_drops_unknown_keys():
    description = ExternalSingleStructure(
        {
            "id": ExternalValue(PARAM_INT, "ID"),
            "deleted": ExternalValue(PARAM_BOOL, "Deleted"),
            "edituser": ExternalSingleStructure(
                {"firstname": ExternalValue(PARAM_TEXT, "First name")},
                "Edit user",
                VALUE_OPTIONAL,
            ),
        }
    )
    result = ExternalApi.clean_returnvalue(
        description, {"id": 3, "deleted": False, "secret": "hidden"}
    )
    assert result == {"id": 3, "deleted": False}


def test_clean_returnvalue_missing_required():
    description = ExternalSingleStructure({"id": ExternalValue(PARAM_INT, "ID")})
    with raises(InvalidParameterException):
        ExternalApi.clean_returnvalue(description, {})


def test_clean_returnvalue_none_description():
    assert ExternalApi.clean_returnvalue(None, {"anything": 1}) is None


def test_single_structure_rejects_bad_description():
    with raises(CodingException):
        ExternalSingleStructure({"id": "not a description"})


def test_validate_parameters_int_with_leading_zero():
    description = ExternalValue(PARAM_INT, "ID")
    assert ExternalApi.validate_parameters(description, "01") == 1
    assert ExternalApi.validate_parameters(description, " 7 ") == 7

    with raises(InvalidParameterException):
        ExternalApi.validate_parameters(description, "1.0")
