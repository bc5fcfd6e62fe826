#############################
#
# Composition root: builds settings-driven collaborators and hands back
# a ready-to-run MergeService.
#   GitWorkingCopy      -> clone / fetch / list / checkout
#   SummaryRepository   -> summary files + trace folders in the checkout
#   SummaryParser       -> status glyph + trace id per line
#   renderers           -> merged report + conformance table
#   TemplateUpdater     -> README splice between markers
######################################################################
from __future__ import annotations

from typing import Optional

from fuzz_merge.adapters.git_working_copy import GitWorkingCopy
from fuzz_merge.config.ini_config import AppSettings, IniConfig
from fuzz_merge.repositories.summary_repository import SummaryRepository
from fuzz_merge.services.merge_service import MergeService
from fuzz_merge.services.report_renderer import (
    ConformanceTableRenderer,
    MergedReportRenderer,
    RawMergedReportRenderer,
    StructuredMergedReportRenderer,
    TraceLinks,
)
from fuzz_merge.services.summary_parser import SummaryParser
from fuzz_merge.services.template_updater import TemplateUpdater


def create_app(settings: Optional[AppSettings] = None) -> MergeService:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    vcs = GitWorkingCopy(
        repo_url=settings.repo_url,
        work_dir=settings.work_dir,
        remote=settings.remote,
        git_executable=settings.git_executable,
        timeout_seconds=settings.timeout_seconds,
    )

    summary_repo = SummaryRepository(
        work_dir=settings.work_dir,
        report_root=settings.report_root,
        summaries_dir_name=settings.summaries_dir,
        traces_dir_name=settings.traces_dir,
        prefix=settings.summary_prefix,
        suffix=settings.summary_suffix,
    )

    links = TraceLinks(
        repo_url=settings.repo_url,
        report_root=settings.report_root,
        traces_dir_name=settings.traces_dir,
    )

    report_renderer: MergedReportRenderer
    if settings.report_style == "raw":
        report_renderer = RawMergedReportRenderer()
    else:
        report_renderer = StructuredMergedReportRenderer(links=links)

    return MergeService(
        vcs=vcs,
        summary_repo=summary_repo,
        parser=SummaryParser(),
        report_renderer=report_renderer,
        table_renderer=ConformanceTableRenderer(links=links),
        template_updater=TemplateUpdater(
            start_marker=settings.start_marker,
            end_marker=settings.end_marker,
        ),
        merged_report=settings.merged_report,
        readme=settings.readme,
        priority_team=settings.priority_team,
    )
