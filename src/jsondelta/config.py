"""Configuration management for JSON Delta."""

from dataclasses import dataclass
from typing import Any, Dict

# Strings shorter than this are replaced as whole values.
DEFAULT_TEXT_DIFF_MIN_LENGTH = 10_000


@dataclass(frozen=True)
class DiffConfig:
    """Configuration for delta generation."""

    # Long-text diffing
    text_diff_min_length: int = DEFAULT_TEXT_DIFF_MIN_LENGTH

    # Marker for jsondiff symbols and escaped keys in the marshalled delta
    escape_str: str = "$"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.text_diff_min_length <= 0:
            raise ValueError("text_diff_min_length must be positive")
        if not self.escape_str:
            raise ValueError("escape_str cannot be empty")

    def to_provenance_dict(self) -> Dict[str, Any]:
        """Convert config to provenance dictionary for log records."""
        return {
            "syntax": "symmetric",
            "text_diff": {
                "min_length": self.text_diff_min_length,
            },
            "escape_str": self.escape_str,
        }
