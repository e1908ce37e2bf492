"""Structural diff and patch of JSON values for JSON Delta."""

import logging
from typing import Any, Optional

from jsondiff import JsonDiffer
from jsondiff.symbols import Symbol, delete, insert

from .config import DiffConfig
from .errors import DiffFailedError, PatchFailedError
from .syntax import TextDiffSyntax

logger = logging.getLogger(__name__)


def json_type(value: Any) -> str:
    """Return the JSON type name of a parsed value."""
    if value is None:
        return "null"
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def to_plain_json(value: Any) -> Any:
    """Turn tuples into lists and dict keys into strings."""
    if isinstance(value, dict):
        return {str(key): to_plain_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain_json(item) for item in value]
    return value


class StrictJsonDiffer(JsonDiffer):
    """JsonDiffer that never treats values of different JSON types as equal.

    Python compares ``True == 1`` and ``False == 0``; JSON does not.
    """

    def _obj_diff(self, a, b, exclude_paths=None, path=""):
        if json_type(a) != json_type(b):
            return self.options.syntax.emit_value_diff(a, b, 0.0), 0.0
        return super()._obj_diff(a, b, exclude_paths, path)

    def marshal(self, d):
        """Name the symbols and escape delta keys, leaving values alone.

        Only keys of a delta object can be confused with a symbol. Values, and
        the keys of inserted or deleted objects, are user data.
        """
        if not isinstance(d, dict):
            return d
        escape = self.options.escape_str
        marshalled = {}
        for key, value in d.items():
            if isinstance(key, Symbol):
                marshalled[escape + key.label] = value
            elif isinstance(key, str) and key.startswith(escape):
                marshalled[escape + key] = self.marshal(value)
            else:
                marshalled[key] = self.marshal(value)
        return marshalled

    def unmarshal(self, d):
        if not isinstance(d, dict):
            return d
        escape = self.options.escape_str
        symbols = {escape + symbol.label: symbol for symbol in (insert, delete)}
        unmarshalled = {}
        for key, value in d.items():
            if key in symbols:
                unmarshalled[symbols[key]] = value
            elif isinstance(key, str) and key.startswith(escape):
                unmarshalled[key[len(escape):]] = self.unmarshal(value)
            else:
                unmarshalled[key] = self.unmarshal(value)
        return unmarshalled


class DeltaEngine:
    """Computes and applies structural deltas between JSON values."""

    def __init__(self, config: Optional[DiffConfig] = None):
        """Initialize with configuration."""
        self.config = config or DiffConfig()
        self.syntax = TextDiffSyntax(min_length=self.config.text_diff_min_length)
        self._differ = StrictJsonDiffer(
            syntax=self.syntax,
            marshal=True,
            escape_str=self.config.escape_str,
        )

    def diff(self, a: Any, b: Any) -> Any:
        """Return the delta that turns ``a`` into ``b``; ``{}`` when equal."""
        logger.debug(
            "Computing delta",
            extra={
                "left_type": json_type(a),
                "right_type": json_type(b),
                "config": self.config.to_provenance_dict(),
            },
        )
        try:
            delta = self._differ.diff(a, b)
        except RecursionError as e:
            raise DiffFailedError("maximum nesting depth exceeded") from e
        except (TypeError, ValueError) as e:
            raise DiffFailedError(str(e)) from e

        return to_plain_json(delta)

    def patch(self, a: Any, delta: Any) -> Any:
        """Apply ``delta`` to ``a`` and return the new value."""
        logger.debug("Applying delta", extra={"target_type": json_type(a)})
        try:
            return self._differ.patch(a, delta)
        except RecursionError as e:
            raise PatchFailedError("patch", "maximum nesting depth exceeded") from e
        except Exception as e:
            raise PatchFailedError("patch", str(e) or type(e).__name__) from e

    def unpatch(self, b: Any, delta: Any) -> Any:
        """Reverse ``delta`` on ``b`` and return the original value."""
        logger.debug("Reverting delta", extra={"target_type": json_type(b)})
        try:
            return self._differ.unpatch(b, delta)
        except RecursionError as e:
            raise PatchFailedError("unpatch", "maximum nesting depth exceeded") from e
        except Exception as e:
            raise PatchFailedError("unpatch", str(e) or type(e).__name__) from e
