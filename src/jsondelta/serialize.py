"""JSON parsing and serialization for JSON Delta."""

import json
import logging
import math
import re
from typing import Any, Dict

from .errors import InvalidJsonError

logger = logging.getLogger(__name__)

# Unpaired surrogates cannot be encoded as UTF-8 and are written as \u escapes
LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def load_json_argument(text: str, name: str) -> Any:
    """Parse one command line argument as a JSON value.

    ``NaN``, ``Infinity`` and ``-Infinity`` are not JSON and are rejected.
    """

    def reject_constant(constant: str) -> None:
        raise InvalidJsonError(name, f"invalid constant {constant}")

    try:
        value = json.loads(text, parse_constant=reject_constant)
    except json.JSONDecodeError as e:
        raise InvalidJsonError(name, e.msg, e.lineno, e.colno) from e
    except RecursionError as e:
        raise InvalidJsonError(name, "maximum nesting depth exceeded") from e

    logger.debug("Parsed JSON argument", extra={"argument": name, "length": len(text)})
    return value


def finite_numbers(value: Any) -> Any:
    """Replace non-finite floats with None.

    A number literal too large for a float (``1e400``) parses as infinity,
    which JSON cannot represent; it is written as ``null``.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: finite_numbers(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [finite_numbers(item) for item in value]
    return value


def _escape_surrogate(match: "re.Match") -> str:
    return "\\u%04x" % ord(match.group())


class DeltaSerializer:
    """Renders deltas and error envelopes as JSON text."""

    def to_json_string(self, delta: Any) -> str:
        """Convert delta to compact JSON without a trailing newline."""
        logger.debug("Rendering delta to JSON string")
        text = json.dumps(
            finite_numbers(delta),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
        return LONE_SURROGATE.sub(_escape_surrogate, text)

    def create_error_envelope(
        self, error_code: str, error_message: str, details: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        """Create error envelope."""
        logger.debug("Creating error envelope", extra={"code": error_code})
        error_data = {
            "code": error_code,
            "message": error_message,
        }
        if details:
            error_data["details"] = details

        return {"ok": False, "error": error_data}

    def to_error_line(self, envelope: Dict[str, Any]) -> str:
        """Render an error envelope as a single line for stderr."""
        text = json.dumps(envelope, ensure_ascii=False, sort_keys=True)
        return LONE_SURROGATE.sub(_escape_surrogate, text) + "\n"
