######## models.py
########

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Status(str, Enum):
    PASS = "🟢"
    FAIL = "🔴"


UNKNOWN_GLYPH = "⚪"


@dataclass(frozen=True)
class TraceResult:
    trace_id: str
    status: Status


@dataclass(frozen=True)
class TeamSummary:
    team: str
    file_name: str
    content: str
    results: tuple[TraceResult, ...] = ()


@dataclass(frozen=True)
class BranchSummaries:
    branch: str
    summaries: tuple[TeamSummary, ...] = ()
    trace_dirs: tuple[str, ...] = ()     # subdirectory names under the traces folder

    @property
    def teams(self) -> list[str]:
        return [s.team for s in self.summaries]


@dataclass(frozen=True)
class TeamCounts:
    failing: int = 0
    passing: int = 0
    unknown: int = 0


@dataclass(frozen=True)
class MergeResult:
    branches_seen: int
    branches_processed: int
    failed_branches: list[str]
    teams: list[str]
    trace_count: int
    interesting_traces: list[str]
    boring_traces: list[str]
    merged_report: Path
    readme: Path
    readme_updated: bool
    report_written: bool = True
    table_markdown: str = ""
