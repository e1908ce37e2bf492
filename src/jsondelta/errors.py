"""Error definitions and handling for JSON Delta."""

from typing import Any, Dict, Optional


class JsonDeltaError(Exception):
    """Base exception for JSON Delta errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class UsageError(JsonDeltaError):
    """Command line did not supply both JSON arguments."""

    def __init__(self, reason: str):
        super().__init__(
            code="USAGE",
            message=f"Invalid usage: {reason}",
            details={"reason": reason},
        )


class InvalidJsonError(JsonDeltaError):
    """An argument is not valid JSON text."""

    def __init__(
        self,
        argument: str,
        reason: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        details: Dict[str, Any] = {"argument": argument, "reason": reason}
        location = ""
        if line is not None and column is not None:
            details["line"] = line
            details["column"] = column
            location = f" (line {line}, column {column})"
        super().__init__(
            code="INVALID_JSON",
            message=f"Argument {argument} is not valid JSON: {reason}{location}",
            details=details,
        )


class DiffFailedError(JsonDeltaError):
    """The diff library could not compute a delta."""

    def __init__(self, reason: str):
        super().__init__(
            code="DIFF_FAILED",
            message=f"Failed to compute delta: {reason}",
            details={"reason": reason},
        )


class PatchFailedError(JsonDeltaError):
    """A delta could not be applied to a value."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            code="PATCH_FAILED",
            message=f"Failed to {operation} value: {reason}",
            details={"operation": operation, "reason": reason},
        )


class BridgeError(JsonDeltaError):
    """The bridge subprocess exited with an error."""

    def __init__(self, returncode: int, stderr: str):
        super().__init__(
            code="BRIDGE_FAILED",
            message=f"Bridge exited with code {returncode}",
            details={"returncode": returncode, "stderr": stderr},
        )


class BridgeTimeoutError(BridgeError):
    """The bridge subprocess did not finish in time."""

    def __init__(self, timeout_seconds: float):
        JsonDeltaError.__init__(
            self,
            code="BRIDGE_TIMEOUT",
            message=f"Bridge timed out after {timeout_seconds}s",
            details={"timeout_seconds": timeout_seconds},
        )
