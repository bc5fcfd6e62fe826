from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class SummaryRepository:
    """
    Repository pattern: encapsulates where summaries and trace folders live
    inside the currently checked-out working copy.
    """
    work_dir: Path
    report_root: str = "fuzz-reports/0.7.2"
    summaries_dir_name: str = "summaries"
    traces_dir_name: str = "traces"
    prefix: str = "summary_"
    suffix: str = ".txt"

    @property
    def summaries_dir(self) -> Path:
        return self.work_dir / self.report_root / self.summaries_dir_name

    @property
    def traces_dir(self) -> Path:
        return self.work_dir / self.report_root / self.traces_dir_name

    def _is_summary_name(self, name: str) -> bool:
        return (
            name.startswith(self.prefix)
            and name.endswith(self.suffix)
            and len(name) > len(self.prefix) + len(self.suffix)
        )

    def list_summary_files(self) -> list[Path]:
        base = self.summaries_dir
        if not base.is_dir():
            return []
        return sorted(
            (p for p in base.iterdir() if p.is_file() and self._is_summary_name(p.name)),
            key=lambda p: p.name,
        )

    def team_name(self, path: Path) -> str:
        name = path.name
        return name[len(self.prefix):len(name) - len(self.suffix)]

    def read_summary(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def list_trace_dirs(self) -> list[str]:
        base = self.traces_dir
        if not base.is_dir():
            return []
        return sorted(p.name for p in base.iterdir() if p.is_dir())
