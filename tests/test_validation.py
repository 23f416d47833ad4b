import pytest
from flask import Flask, request

from skincoach.config import MAX_IMAGE_BASE64_CHARS
from skincoach.errors import ValidationError
from skincoach.validation import (
    assert_post_json,
    read_json_body,
    require_image_base64,
    require_profile,
)

flask_app = Flask(__name__)


def test_assert_post_json_accepts_json_post():
    with flask_app.test_request_context("/", method="POST", json={"a": 1}):
        assert_post_json(request)


def test_assert_post_json_accepts_charset_suffix():
    with flask_app.test_request_context("/", method="POST", data="{}",
                                  content_type="Application/JSON; charset=utf-8"):
        assert_post_json(request)


def test_assert_post_json_rejects_other_methods():
    with flask_app.test_request_context("/", method="GET"):
        with pytest.raises(ValidationError) as exc_info:
            assert_post_json(request)
    assert exc_info.value.status_code == 405


def test_assert_post_json_rejects_other_content_types():
    with flask_app.test_request_context("/", method="POST", data="x=1",
                                  content_type="application/x-www-form-urlencoded"):
        with pytest.raises(ValidationError) as exc_info:
            assert_post_json(request)
    assert exc_info.value.status_code == 415


@pytest.mark.parametrize("data, expected", [
    ('{"profile": {}}', {"profile": {}}),
    ("[1, 2]", {}),
    ("not json", {}),
    ("", {}),
])
def test_read_json_body(data, expected):
    with flask_app.test_request_context("/", method="POST", data=data, content_type="application/json"):
        assert read_json_body(request) == expected


@pytest.mark.parametrize("body", [{}, {"profile": None}, {"profile": ""}, {"profile": False}, {"profile": 0}])
def test_require_profile_missing(body):
    with pytest.raises(ValidationError) as exc_info:
        require_profile(body)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Missing profile data."


def test_require_profile_accepts_empty_object():
    assert require_profile({"profile": {}}) == {}


@pytest.mark.parametrize("body", [{}, {"imageBase64": ""}, {"imageBase64": 123}, {"imageBase64": ["a"]}])
def test_require_image_base64_missing(body):
    with pytest.raises(ValidationError) as exc_info:
        require_image_base64(body)
    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "Missing imageBase64 (string)."


def test_require_image_base64_size_boundary():
    at_limit = "A" * MAX_IMAGE_BASE64_CHARS
    assert require_image_base64({"imageBase64": at_limit}) is at_limit

    with pytest.raises(ValidationError) as exc_info:
        require_image_base64({"imageBase64": at_limit + "A"})
    assert exc_info.value.status_code == 413
