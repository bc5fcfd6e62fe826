########## ini_config.py

from __future__ import annotations

import logging
import os
from configparser import ConfigParser
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from fuzz_merge.domain.errors import ConfigError

INI_DEFAULT_NAME = "fuzz_merge.ini"
INI_ENV_VAR = "FUZZ_MERGE_INI"

DEFAULT_REPO_URL = "https://github.com/w3f/jam-conformance"
DEFAULT_START_MARKER = "<!-- CONFORMANCE_TABLE_START -->"
DEFAULT_END_MARKER = "<!-- CONFORMANCE_TABLE_END -->"

REPORT_STYLES = ("structured", "raw")


@dataclass(frozen=True)
class AppSettings:
    repo_url: str
    work_dir: Path
    remote: str
    git_executable: str
    timeout_seconds: Optional[int]

    report_root: str
    summaries_dir: str
    traces_dir: str
    summary_prefix: str
    summary_suffix: str

    merged_report: Path
    readme: Path
    start_marker: str
    end_marker: str
    report_style: str

    priority_team: str

    log_level: int


class IniConfig:
    """
    Adapter around ConfigParser and filesystem resolution.
    Every key has a fallback, so an empty config yields a working setup.
    """

    def __init__(self, ini_path: Optional[Path], *, required: bool = True, base_dir: Optional[Path] = None):
        self._ini_path = ini_path
        self._base_dir = base_dir or Path.cwd()
        self._cfg = ConfigParser(interpolation=None)
        if ini_path is None:
            return
        read_ok = self._cfg.read(str(ini_path), encoding="utf-8-sig")
        if not read_ok and required:
            raise FileNotFoundError(f"INI file not found or unreadable: {ini_path}")

    @staticmethod
    def from_env_or_default() -> "IniConfig":
        ini_raw = (os.getenv(INI_ENV_VAR) or "").strip()
        if ini_raw:
            return IniConfig(Path(ini_raw))
        # Without the env var, a fuzz_merge.ini in the working directory is optional
        return IniConfig(Path.cwd() / INI_DEFAULT_NAME, required=False)

    def _get(self, section: str, key: str, fallback: str) -> str:
        return (self._cfg.get(section, key, fallback=fallback) or "").strip() or fallback

    def _cfg_path(self, section: str, key: str, fallback: str) -> Path:
        """
        Reads a filesystem path and resolves it against the base directory.
        """
        raw = os.path.expandvars(os.path.expanduser(self._get(section, key, fallback)))
        p = Path(raw)
        if not p.is_absolute():
            p = self._base_dir / p
        return p.resolve()

    def _timeout(self) -> Optional[int]:
        raw = (self._cfg.get("repository", "timeout_seconds", fallback="") or "").strip()
        if not raw:
            return None
        try:
            value = int(raw)
        except ValueError as e:
            raise ConfigError(f"timeout_seconds must be an integer, got {raw!r}") from e
        if value <= 0:
            raise ConfigError(f"timeout_seconds must be positive, got {value}")
        return value

    def _log_level(self) -> int:
        name = self._get("logging", "level", "INFO").upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigError(f"Unknown log level: {name}")
        return level

    def load_settings(self) -> AppSettings:
        report_style = self._get("output", "style", "structured").lower()
        if report_style not in REPORT_STYLES:
            raise ConfigError(f"Unknown report style {report_style!r}; expected one of {', '.join(REPORT_STYLES)}")

        return AppSettings(
            repo_url=self._get("repository", "url", DEFAULT_REPO_URL).rstrip("/"),
            work_dir=self._cfg_path("repository", "work_dir", "repo"),
            remote=self._get("repository", "remote", "origin"),
            git_executable=self._get("repository", "git_executable", "git"),
            timeout_seconds=self._timeout(),
            report_root=self._get("reports", "root", "fuzz-reports/0.7.2").strip("/"),
            summaries_dir=self._get("reports", "summaries_dir", "summaries"),
            traces_dir=self._get("reports", "traces_dir", "traces"),
            summary_prefix=self._get("reports", "summary_prefix", "summary_"),
            summary_suffix=self._get("reports", "summary_suffix", ".txt"),
            merged_report=self._cfg_path("output", "merged_report", "merged_summary.md"),
            readme=self._cfg_path("output", "readme", "README.md"),
            start_marker=self._get("output", "start_marker", DEFAULT_START_MARKER),
            end_marker=self._get("output", "end_marker", DEFAULT_END_MARKER),
            report_style=report_style,
            priority_team=(self._cfg.get("table", "priority_team", fallback="") or "").strip(),
            log_level=self._log_level(),
        )
