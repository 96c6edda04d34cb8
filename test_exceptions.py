# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for error-message extraction from arbitrary backend error values.
"""

import pytest

from roster_panel.exceptions import (
    DEFAULT_ERROR_MESSAGE,
    BackendError,
    ValidationError,
    display_message,
)


class _WithMessage:
    def __init__(self, message):
        self.message = message


class _Plain:
    def __init__(self):
        self.code = 42


class TestDisplayMessage:
    def test_string_passes_through(self):
        assert display_message("Network down") == "Network down"

    def test_exception_text(self):
        assert display_message(BackendError("row locked")) == "row locked"
        assert display_message(ValidationError("ID is required for deletion")) == "ID is required for deletion"

    def test_exception_without_text_uses_type_name(self):
        assert display_message(RuntimeError()) == "RuntimeError"

    @pytest.mark.parametrize(
        "payload,expected",
        [
            ({"message": "JWT expired"}, "JWT expired"),
            ({"error_description": "Invalid login"}, "Invalid login"),
            ({"error": "invalid_grant"}, "invalid_grant"),
            ({"msg": "bad request"}, "bad request"),
            ({"details": "duplicate key"}, "duplicate key"),
            ({"hint": "check RLS"}, "check RLS"),
        ],
    )
    def test_mapping_fields(self, payload, expected):
        assert display_message(payload) == expected

    def test_mapping_field_priority(self):
        payload = {"details": "second", "message": "first", "hint": "third"}
        assert display_message(payload) == "first"

    def test_mapping_skips_empty_fields(self):
        assert display_message({"message": "", "details": "used"}) == "used"

    def test_nested_error_object(self):
        assert display_message({"error": {"message": "nested"}}) == "nested"

    def test_message_attribute(self):
        assert display_message(_WithMessage("from attribute")) == "from attribute"

    def test_unknown_mapping_is_serialized(self):
        assert display_message({"code": "PGRST301"}) == '{"code": "PGRST301"}'

    def test_plain_object_is_serialized(self):
        assert display_message(_Plain()) == '{"code": 42}'

    @pytest.mark.parametrize("value", [None, "", {}, []])
    def test_fallback(self, value):
        assert display_message(value) == DEFAULT_ERROR_MESSAGE

    def test_backend_error_keeps_payload(self):
        err = BackendError("denied", payload={"code": "42501"}, status_code=403)
        assert err.payload == {"code": "42501"}
        assert err.status_code == 403
