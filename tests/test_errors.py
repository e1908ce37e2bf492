"""Tests for error definitions."""

from jsondelta.errors import (
    BridgeError,
    BridgeTimeoutError,
    DiffFailedError,
    InvalidJsonError,
    JsonDeltaError,
    PatchFailedError,
    UsageError,
)


class TestErrors:
    """Test error codes, messages and details."""

    def test_base_error_to_dict(self):
        """Test base error serialization."""
        error = JsonDeltaError("SOME_CODE", "Something failed", {"key": "value"})

        assert str(error) == "Something failed"
        assert error.to_dict() == {
            "code": "SOME_CODE",
            "message": "Something failed",
            "details": {"key": "value"},
        }

    def test_base_error_without_details(self):
        """Test details are omitted when empty."""
        error = JsonDeltaError("SOME_CODE", "Something failed")

        assert error.details == {}
        assert "details" not in error.to_dict()

    def test_usage_error(self):
        """Test UsageError."""
        error = UsageError("the following arguments are required: json2")

        assert error.code == "USAGE"
        assert error.details["reason"] == "the following arguments are required: json2"

    def test_invalid_json_error_with_location(self):
        """Test InvalidJsonError with line and column."""
        error = InvalidJsonError("json1", "Expecting value", 1, 5)

        assert error.code == "INVALID_JSON"
        assert error.message == (
            "Argument json1 is not valid JSON: Expecting value (line 1, column 5)"
        )
        assert error.details == {
            "argument": "json1",
            "reason": "Expecting value",
            "line": 1,
            "column": 5,
        }

    def test_invalid_json_error_without_location(self):
        """Test InvalidJsonError without a location."""
        error = InvalidJsonError("json2", "maximum nesting depth exceeded")

        assert error.message == "Argument json2 is not valid JSON: maximum nesting depth exceeded"
        assert "line" not in error.details

    def test_diff_and_patch_errors(self):
        """Test DiffFailedError and PatchFailedError."""
        assert DiffFailedError("too deep").code == "DIFF_FAILED"

        error = PatchFailedError("unpatch", "'a'")
        assert error.code == "PATCH_FAILED"
        assert error.message == "Failed to unpatch value: 'a'"

    def test_bridge_errors(self):
        """Test bridge errors keep the process details."""
        error = BridgeError(1, "usage: jsondelta <json1> <json2>\n")
        assert error.code == "BRIDGE_FAILED"
        assert error.details["returncode"] == 1

        timeout = BridgeTimeoutError(5)
        assert isinstance(timeout, BridgeError)
        assert timeout.code == "BRIDGE_TIMEOUT"
        assert timeout.details == {"timeout_seconds": 5}
