from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

import pytest

from fuzz_merge.adapters import git_working_copy
from fuzz_merge.adapters.git_working_copy import GitWorkingCopy, parse_remote_branches
from fuzz_merge.domain.errors import GitCommandError, WorkingCopyError

REPO = "https://github.com/w3f/jam-conformance"


# -----------------------------
# Test doubles
# -----------------------------
@dataclass
class FakeCompletedProcess:
    returncode: int
    stdout: str = ""
    stderr: str = ""


class FakeRunner:
    """Records subprocess.run calls and replays scripted results."""

    def __init__(self, *results):
        self.calls: list[dict] = []
        self._results = list(results)

    def __call__(self, cmd, **kwargs):
        self.calls.append({"cmd": cmd, **kwargs})
        result = self._results.pop(0) if self._results else FakeCompletedProcess(0)
        if isinstance(result, BaseException):
            raise result
        return result


def _install(monkeypatch, runner: FakeRunner) -> FakeRunner:
    monkeypatch.setattr(git_working_copy.subprocess, "run", runner)
    return runner


# -----------------------------
# Branch listing
# -----------------------------
def test_parse_remote_branches():
    out = "  origin/HEAD -> origin/main\n  origin/main\n  origin/team/fix-1\n  upstream/other\n\n"
    assert parse_remote_branches(out) == ["main", "team/fix-1"]
    assert parse_remote_branches(out, remote="upstream") == ["other"]
    assert parse_remote_branches("") == []


def test_list_remote_branches_runs_git_branch_r(monkeypatch, tmp_path: Path):
    runner = _install(monkeypatch, FakeRunner(FakeCompletedProcess(0, stdout="  origin/a\n  origin/b\n")))
    wc = GitWorkingCopy(repo_url=REPO, work_dir=tmp_path)

    assert wc.list_remote_branches() == ["a", "b"]
    assert runner.calls[0]["cmd"] == ["git", "branch", "-r"]
    assert runner.calls[0]["cwd"] == str(tmp_path)


def test_list_remote_branches_failure_is_fatal(monkeypatch, tmp_path: Path):
    _install(monkeypatch, FakeRunner(FakeCompletedProcess(128, stderr="not a git repository")))
    with pytest.raises(WorkingCopyError):
        GitWorkingCopy(repo_url=REPO, work_dir=tmp_path).list_remote_branches()


# -----------------------------
# Working copy setup
# -----------------------------
def test_clones_when_work_dir_missing(monkeypatch, tmp_path: Path):
    runner = _install(monkeypatch, FakeRunner())
    work_dir = tmp_path / "repo"

    GitWorkingCopy(repo_url=REPO, work_dir=work_dir).ensure_working_copy()

    assert runner.calls[0]["cmd"] == ["git", "clone", REPO, str(work_dir)]
    assert runner.calls[0]["cwd"] == str(tmp_path)


def test_fetches_when_work_dir_exists(monkeypatch, tmp_path: Path):
    runner = _install(monkeypatch, FakeRunner())

    GitWorkingCopy(repo_url=REPO, work_dir=tmp_path, git_executable="/usr/bin/git").ensure_working_copy()

    assert runner.calls[0]["cmd"] == ["/usr/bin/git", "fetch", "--all"]


def test_clone_failure_is_fatal(monkeypatch, tmp_path: Path):
    _install(monkeypatch, FakeRunner(FakeCompletedProcess(128, stderr="could not resolve host")))
    with pytest.raises(WorkingCopyError, match="could not resolve host"):
        GitWorkingCopy(repo_url=REPO, work_dir=tmp_path / "repo").ensure_working_copy()


def test_missing_git_executable_is_fatal(monkeypatch, tmp_path: Path):
    _install(monkeypatch, FakeRunner(FileNotFoundError("git")))
    with pytest.raises(WorkingCopyError):
        GitWorkingCopy(repo_url=REPO, work_dir=tmp_path).ensure_working_copy()


# -----------------------------
# Checkout
# -----------------------------
def test_checkout_forces_branch_to_remote_ref(monkeypatch, tmp_path: Path):
    runner = _install(monkeypatch, FakeRunner())

    GitWorkingCopy(repo_url=REPO, work_dir=tmp_path).checkout("team/fix-1")

    assert runner.calls[0]["cmd"] == ["git", "checkout", "-f", "-B", "team/fix-1", "origin/team/fix-1"]


def test_checkout_failure_raises_git_command_error(monkeypatch, tmp_path: Path):
    _install(monkeypatch, FakeRunner(FakeCompletedProcess(1, stderr="pathspec did not match")))

    with pytest.raises(GitCommandError) as exc:
        GitWorkingCopy(repo_url=REPO, work_dir=tmp_path).checkout("gone")

    assert exc.value.returncode == 1
    assert "pathspec did not match" in str(exc.value)


def test_timeout_is_passed_and_reported(monkeypatch, tmp_path: Path):
    runner = _install(monkeypatch, FakeRunner(subprocess.TimeoutExpired(cmd="git", timeout=5)))
    wc = GitWorkingCopy(repo_url=REPO, work_dir=tmp_path, timeout_seconds=5)

    with pytest.raises(GitCommandError, match="timed out"):
        wc.checkout("main")
    assert runner.calls[0]["timeout"] == 5


def test_no_timeout_by_default(monkeypatch, tmp_path: Path):
    runner = _install(monkeypatch, FakeRunner())
    GitWorkingCopy(repo_url=REPO, work_dir=tmp_path).checkout("main")
    assert runner.calls[0]["timeout"] is None
