from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fuzz_merge.domain.errors import GitCommandError, WorkingCopyError

logger = logging.getLogger(__name__)


class VersionControl:
    """Port for the working copy the summaries are read from."""

    def ensure_working_copy(self) -> None:
        raise NotImplementedError

    def list_remote_branches(self) -> list[str]:
        raise NotImplementedError

    def checkout(self, branch: str) -> None:
        raise NotImplementedError


def parse_remote_branches(output: str, remote: str = "origin") -> list[str]:
    """
    Turns `git branch -r` output into bare branch names.
    Symbolic entries such as `origin/HEAD -> origin/main` are skipped.
    """
    prefix = f"{remote}/"
    branches: list[str] = []
    for line in (output or "").splitlines():
        b = line.strip()
        if not b or "->" in b or not b.startswith(prefix):
            continue
        branches.append(b[len(prefix):])
    return branches


@dataclass
class GitWorkingCopy(VersionControl):
    """
    Adapter: drives the git CLI via subprocess against a single local clone.
    """
    repo_url: str
    work_dir: Path
    remote: str = "origin"
    git_executable: str = "git"
    timeout_seconds: Optional[int] = None

    def _git(self, args: list[str], cwd: Optional[Path] = None) -> str:
        cmd = [self.git_executable, *args]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                cwd=str(cwd or self.work_dir),
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired as e:
            raise GitCommandError(args, -1, f"timed out after {self.timeout_seconds}s") from e
        except OSError as e:
            raise GitCommandError(args, -1, str(e)) from e

        if proc.returncode != 0:
            raise GitCommandError(args, proc.returncode, proc.stderr or "")
        return proc.stdout or ""

    def ensure_working_copy(self) -> None:
        try:
            if not self.work_dir.exists():
                logger.info("Cloning repository %s...", self.repo_url)
                self.work_dir.parent.mkdir(parents=True, exist_ok=True)
                self._git(["clone", self.repo_url, str(self.work_dir)], cwd=self.work_dir.parent)
            else:
                logger.info("Repository exists, fetching updates...")
                self._git(["fetch", "--all"])
        except (GitCommandError, OSError) as e:
            raise WorkingCopyError(f"Cannot set up working copy at {self.work_dir}: {e}") from e

    def list_remote_branches(self) -> list[str]:
        try:
            out = self._git(["branch", "-r"])
        except GitCommandError as e:
            raise WorkingCopyError(f"Cannot list remote branches: {e}") from e
        return parse_remote_branches(out, self.remote)

    def checkout(self, branch: str) -> None:
        # -B resets the local branch to the freshly fetched remote ref
        self._git(["checkout", "-f", "-B", branch, f"{self.remote}/{branch}"])
