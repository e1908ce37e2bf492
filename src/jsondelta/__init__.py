"""JSON Delta bridge.

A command-line bridge that diffs two JSON documents passed as arguments and
prints the structural delta as compact JSON, for test harnesses that need
JSON diffing as a subprocess.
"""

__version__ = "1.0.0"
__author__ = "JSON Delta Team"
__email__ = "dev@jsondelta.dev"

from .config import DiffConfig
from .engine import DeltaEngine
from .harness import run_bridge

__all__ = ["DeltaEngine", "DiffConfig", "run_bridge"]
