from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from fuzz_merge.adapters.git_working_copy import GitWorkingCopy
from fuzz_merge.app_factory import create_app
from fuzz_merge.config.ini_config import IniConfig
from fuzz_merge.services.report_renderer import RawMergedReportRenderer, StructuredMergedReportRenderer


def test_create_app_wires_settings(tmp_path: Path):
    settings = replace(IniConfig(None, base_dir=tmp_path).load_settings(), priority_team="alice", timeout_seconds=30)

    service = create_app(settings)

    assert isinstance(service.vcs, GitWorkingCopy)
    assert service.vcs.work_dir == settings.work_dir
    assert service.vcs.timeout_seconds == 30
    assert service.summary_repo.summaries_dir == settings.work_dir / "fuzz-reports/0.7.2" / "summaries"
    assert isinstance(service.report_renderer, StructuredMergedReportRenderer)
    assert service.template_updater.start_marker == settings.start_marker
    assert service.merged_report == settings.merged_report
    assert service.readme == settings.readme
    assert service.priority_team == "alice"


def test_create_app_raw_style(tmp_path: Path):
    settings = replace(IniConfig(None, base_dir=tmp_path).load_settings(), report_style="raw")
    assert isinstance(create_app(settings).report_renderer, RawMergedReportRenderer)
