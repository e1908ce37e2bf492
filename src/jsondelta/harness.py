"""Run the JSON Delta bridge as a subprocess.

This is the consumer side of the CLI contract: test suites in other projects
call :func:`run_bridge` with two JSON texts and get the parsed delta back.
"""

import json
import logging
import subprocess
import sys
from typing import Any, List, Optional, Sequence

from .errors import BridgeError, BridgeTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5


def bridge_command() -> List[str]:
    """Return the command that runs the bridge with the current interpreter."""
    return [sys.executable, "-m", "jsondelta"]


def run_bridge(
    json1: str,
    json2: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    command: Optional[Sequence[str]] = None,
) -> Any:
    """Diff two JSON texts through the bridge and return the parsed delta.

    Returns ``None`` when the bridge prints nothing or ``null``.
    """
    cmd = list(command or bridge_command()) + [json1, json2]
    logger.debug("Running bridge", extra={"command": cmd[0]})

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise BridgeTimeoutError(timeout) from e

    if result.returncode != 0:
        raise BridgeError(result.returncode, result.stderr)

    output = result.stdout
    if not output or output == "null":
        return None
    return json.loads(output)
