from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from fuzz_merge.domain.models import UNKNOWN_GLYPH, BranchSummaries, Status
from fuzz_merge.services.result_table import ResultTable

BANNER = "=" * 80


def escape_cell(text: str) -> str:
    return text.replace("|", "\\|")


def heading_anchor(text: str) -> str:
    """GitHub-style anchor for a Markdown heading."""
    slug = re.sub(r"[^\w\- ]", "", text.strip().lower())
    return slug.replace(" ", "-")


@dataclass(frozen=True)
class TraceLinks:
    """Builds browse URLs into the remote repository."""
    repo_url: str
    report_root: str = "fuzz-reports/0.7.2"
    traces_dir_name: str = "traces"

    def traces_url(self, branch: str, trace_id: Optional[str] = None) -> str:
        url = f"{self.repo_url.rstrip('/')}/tree/{branch}/{self.report_root}/{self.traces_dir_name}"
        return f"{url}/{trace_id}" if trace_id else url


class MergedReportRenderer:
    """Strategy interface for the merged report document."""
    def render(self, branches: Iterable[BranchSummaries]) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class RawMergedReportRenderer(MergedReportRenderer):
    """Concatenates raw summary files under a banner per branch."""

    def render(self, branches: Iterable[BranchSummaries]) -> str:
        out: list[str] = []
        for b in branches:
            if not b.summaries:
                continue
            out.append(f"\n\n{BANNER}\nBRANCH: {b.branch}\n{BANNER}\n")
            for s in b.summaries:
                out.append(f"\n--- FILE: {s.file_name} ---\n")
                out.append(s.content)
        return "".join(out)


@dataclass(frozen=True)
class StructuredMergedReportRenderer(MergedReportRenderer):
    """
    Markdown document: table of contents, then one section per branch with
    a link to its traces folder and a normalized bullet list per team.
    """
    links: TraceLinks
    title: str = "Merged fuzz summaries"

    def render(self, branches: Iterable[BranchSummaries]) -> str:
        branches = [b for b in branches if b.summaries]

        lines = [f"# {self.title}", "", "## Contents", ""]
        for b in branches:
            lines.append(f"- [{b.branch}](#{heading_anchor(f'Branch: {b.branch}')})")
            for team in b.teams:
                lines.append(f"  - {team}")
        if not branches:
            lines.append("_No summaries found._")

        for b in branches:
            lines += ["", f"## Branch: {b.branch}", ""]
            lines.append(f"Traces: [{self.links.report_root}/{self.links.traces_dir_name}]({self.links.traces_url(b.branch)})")
            for s in b.summaries:
                lines += ["", f"### {s.team}", ""]
                if not s.results:
                    lines.append("_No trace results._")
                for r in s.results:
                    lines.append(f"- {r.status.value} {r.trace_id}")

        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class ConformanceTableRenderer:
    """
    One row per trace with at least one failure, one column per team.
    The three leading rows hold per-team totals over all traces.
    """
    links: TraceLinks

    def _trace_cell(self, table: ResultTable, trace_id: str) -> str:
        branch = table.trace_branch(trace_id)
        if branch is None:
            return trace_id
        return f"[{trace_id}]({self.links.traces_url(branch, trace_id)})"

    def render(self, table: ResultTable) -> str:
        teams = table.teams()
        interesting, _ = table.partition()
        counts = {t: table.counts(t) for t in teams}

        def row(cells: list[str]) -> str:
            return "| " + " | ".join(escape_cell(c) for c in cells) + " |"

        lines = [
            row(["Trace", *teams]),
            "|" + "|".join("---" for _ in range(len(teams) + 1)) + "|",
            row([Status.FAIL.value, *(str(counts[t].failing) for t in teams)]),
            row([Status.PASS.value, *(str(counts[t].passing) for t in teams)]),
            row([UNKNOWN_GLYPH, *(str(counts[t].unknown) for t in teams)]),
        ]
        for trace_id in interesting:
            cells = []
            for t in teams:
                s = table.status(trace_id, t)
                cells.append(s.value if s is not None else UNKNOWN_GLYPH)
            lines.append(row([self._trace_cell(table, trace_id), *cells]))

        return "\n".join(lines) + "\n"
