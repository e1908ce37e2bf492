"""Delta syntax with line-level deltas for long strings."""

import difflib
import logging
from typing import Any, List

from jsondiff import SymmetricJsonDiffSyntax

from .config import DEFAULT_TEXT_DIFF_MIN_LENGTH

logger = logging.getLogger(__name__)

# Third element of a text delta: [lines, 0, TEXT_DIFF_MARKER]
TEXT_DIFF_MARKER = 2


def text_delta_lines(old: str, new: str) -> List[str]:
    """Return the ndiff lines that turn ``old`` into ``new``."""
    return list(
        difflib.ndiff(old.splitlines(keepends=True), new.splitlines(keepends=True))
    )


def is_text_delta(delta: Any) -> bool:
    """Check whether a delta is a long-text delta."""
    return (
        isinstance(delta, list)
        and len(delta) == 3
        and isinstance(delta[0], list)
        and delta[1] == 0
        and delta[2] == TEXT_DIFF_MARKER
    )


def restore_text(delta: Any, which: int) -> str:
    """Rebuild one side of a text delta (1 = old, 2 = new)."""
    return "".join(difflib.restore(delta[0], which))


class TextDiffSyntax(SymmetricJsonDiffSyntax):
    """Symmetric jsondiff syntax that diffs long strings line by line.

    Changed strings that are both at least ``min_length`` characters long are
    emitted as ``[ndiff_lines, 0, 2]`` instead of ``[old, new]``. Every other
    change keeps the symmetric form, so deltas stay reversible.
    """

    def __init__(self, min_length: int = DEFAULT_TEXT_DIFF_MIN_LENGTH):
        self.min_length = min_length

    def _is_long_text(self, a: Any, b: Any) -> bool:
        return (
            isinstance(a, str)
            and isinstance(b, str)
            and len(a) >= self.min_length
            and len(b) >= self.min_length
        )

    def emit_value_diff(self, a, b, s):
        if s < 1.0 and self._is_long_text(a, b):
            lines = text_delta_lines(a, b)
            logger.debug(
                "Emitting text delta",
                extra={"old_length": len(a), "new_length": len(b), "lines": len(lines)},
            )
            return [lines, 0, TEXT_DIFF_MARKER]
        return super().emit_value_diff(a, b, s)

    def patch(self, a, d):
        if is_text_delta(d):
            return restore_text(d, 2)
        return super().patch(a, d)

    def unpatch(self, b, d):
        if is_text_delta(d):
            return restore_text(d, 1)
        return super().unpatch(b, d)
