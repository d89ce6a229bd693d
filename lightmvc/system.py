"""Process setup: resource limits, root path and the log directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path

try:
    import resource
except ImportError:  # not available on every platform
    resource = None  # type: ignore[assignment]

__all__ = ["System"]

DATA_LIMIT = 768000000


class System:
    """Knows the application's root directory and prepares it for running."""

    def __init__(self, root_path: str | None = None) -> None:
        self._root_path = root_path or ""

    def init(self) -> None:
        """Raise resource limits and make sure ``<root>/log`` exists."""
        self._core_dump()
        self._root_path = self.get_root_path()
        Path(self._root_path, "log").mkdir(mode=0o755, exist_ok=True)

    @staticmethod
    def _core_dump() -> None:
        if resource is None:
            return
        try:
            _, hard = resource.getrlimit(resource.RLIMIT_CORE)
            resource.setrlimit(resource.RLIMIT_CORE, (hard, hard))
        except (ValueError, OSError):
            pass
        try:
            _, hard = resource.getrlimit(resource.RLIMIT_DATA)
            resource.setrlimit(resource.RLIMIT_DATA, (DATA_LIMIT, hard))
        except (ValueError, OSError):
            pass

    def get_root_path(self) -> str:
        """The configured root, else the directory of the running program."""
        if self._root_path:
            return self._root_path
        program = sys.argv[0] if sys.argv else ""
        if not program:
            return ""
        return os.path.dirname(os.path.realpath(program))