from __future__ import annotations

from typing import Sequence


class FuzzMergeError(Exception):
    """Base class for all errors raised by fuzz_merge."""


class ConfigError(FuzzMergeError):
    pass


class GitCommandError(FuzzMergeError):
    def __init__(self, args: Sequence[str], returncode: int, stderr: str = ""):
        self.command = list(args)
        self.returncode = returncode
        self.stderr = (stderr or "").strip()
        msg = f"git {' '.join(self.command)} failed (rc={returncode})"
        if self.stderr:
            msg += f": {self.stderr}"
        super().__init__(msg)


class WorkingCopyError(FuzzMergeError):
    """The local working copy could not be created, updated or queried."""


class MarkerNotFoundError(FuzzMergeError):
    def __init__(self, marker: str):
        self.marker = marker
        super().__init__(f"Marker not found: {marker}")
