from __future__ import annotations

import re
from typing import Optional

from fuzz_merge.domain.models import Status, TraceResult

# status glyph, whitespace, then a trace id such as 1754982630 or 1754982630_1
SUMMARY_LINE_RE = re.compile(r"([\U0001F534\U0001F7E2])\s+([0-9]+(?:_[0-9]+)*)")


class SummaryParser:
    """Extracts (status, trace id) pairs from summary file text."""

    def __init__(self, pattern: re.Pattern[str] = SUMMARY_LINE_RE):
        self._pattern = pattern

    def parse_line(self, line: str) -> Optional[TraceResult]:
        m = self._pattern.search(line or "")
        if not m:
            return None
        glyph, trace_id = m.groups()
        return TraceResult(trace_id=trace_id, status=Status(glyph))

    def parse(self, text: str) -> list[TraceResult]:
        results: list[TraceResult] = []
        for line in (text or "").splitlines():
            r = self.parse_line(line)
            if r is not None:
                results.append(r)
        return results
