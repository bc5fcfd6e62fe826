from __future__ import annotations

from typing import Optional

from fuzz_merge.domain.models import BranchSummaries, Status, TeamCounts


def trace_sort_key(trace_id: str) -> tuple:
    # numeric groups compare as integers so "20" sorts before "100"
    return tuple((0, int(p), "") if p.isdigit() else (1, 0, p) for p in trace_id.split("_"))


class ResultTable:
    """
    Trace -> (Team -> Status), filled branch by branch.
    A later record for the same (trace, team) replaces the earlier one.
    """

    def __init__(self, priority_team: str = ""):
        self.priority_team = (priority_team or "").strip()
        self._results: dict[str, dict[str, Status]] = {}
        self._teams: set[str] = set()
        self._trace_branch: dict[str, str] = {}

    def add_team(self, team: str) -> None:
        self._teams.add(team)

    def add_trace(self, trace_id: str) -> None:
        self._results.setdefault(trace_id, {})

    def record(self, team: str, trace_id: str, status: Status) -> None:
        self._teams.add(team)
        self._results.setdefault(trace_id, {})[team] = status

    def note_trace_location(self, trace_id: str, branch: str) -> None:
        """Remember the first branch a trace folder was seen on."""
        self._trace_branch.setdefault(trace_id, branch)

    def ingest(self, branch: BranchSummaries) -> None:
        for summary in branch.summaries:
            self.add_team(summary.team)
            for r in summary.results:
                self.record(summary.team, r.trace_id, r.status)
        for trace_id in branch.trace_dirs:
            self.note_trace_location(trace_id, branch.branch)

    def status(self, trace_id: str, team: str) -> Optional[Status]:
        return self._results.get(trace_id, {}).get(team)

    def trace_branch(self, trace_id: str) -> Optional[str]:
        return self._trace_branch.get(trace_id)

    def trace_ids(self) -> list[str]:
        return sorted(self._results, key=trace_sort_key)

    def teams(self) -> list[str]:
        return sorted(self._teams, key=lambda t: (t != self.priority_team, t))

    def partition(self) -> tuple[list[str], list[str]]:
        interesting: list[str] = []
        boring: list[str] = []
        for trace_id in self.trace_ids():
            if Status.FAIL in self._results[trace_id].values():
                interesting.append(trace_id)
            else:
                boring.append(trace_id)
        return interesting, boring

    def counts(self, team: str) -> TeamCounts:
        failing = passing = unknown = 0
        for statuses in self._results.values():
            s = statuses.get(team)
            if s is Status.FAIL:
                failing += 1
            elif s is Status.PASS:
                passing += 1
            else:
                unknown += 1
        return TeamCounts(failing=failing, passing=passing, unknown=unknown)
