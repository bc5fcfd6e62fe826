from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from fuzz_merge.adapters.git_working_copy import VersionControl
from fuzz_merge.domain.errors import GitCommandError, MarkerNotFoundError
from fuzz_merge.domain.models import BranchSummaries, MergeResult, TeamSummary
from fuzz_merge.repositories.summary_repository import SummaryRepository
from fuzz_merge.services.report_renderer import ConformanceTableRenderer, MergedReportRenderer
from fuzz_merge.services.result_table import ResultTable
from fuzz_merge.services.summary_parser import SummaryParser
from fuzz_merge.services.template_updater import TemplateUpdater

logger = logging.getLogger(__name__)


@dataclass
class MergeService:
    """
    Service layer: walks every remote branch, merges the summaries and
    publishes the merged report plus the README table.
    """
    vcs: VersionControl
    summary_repo: SummaryRepository
    parser: SummaryParser
    report_renderer: MergedReportRenderer
    table_renderer: ConformanceTableRenderer
    template_updater: TemplateUpdater
    merged_report: Path
    readme: Path
    priority_team: str = ""

    def read_branch(self, branch: str) -> BranchSummaries:
        """Checks out `branch` and reads everything it contributes."""
        self.vcs.checkout(branch)

        summaries: list[TeamSummary] = []
        for path in self.summary_repo.list_summary_files():
            content = self.summary_repo.read_summary(path)
            summaries.append(
                TeamSummary(
                    team=self.summary_repo.team_name(path),
                    file_name=path.name,
                    content=content,
                    results=tuple(self.parser.parse(content)),
                )
            )

        return BranchSummaries(
            branch=branch,
            summaries=tuple(summaries),
            trace_dirs=tuple(self.summary_repo.list_trace_dirs()),
        )

    def collect(self) -> tuple[ResultTable, list[BranchSummaries], list[str], int]:
        """
        Returns (table, processed branches, failed branch names, branch count).
        WorkingCopyError from setup propagates to the caller.
        """
        self.vcs.ensure_working_copy()

        logger.info("Listing remote branches...")
        branches = self.vcs.list_remote_branches()
        logger.info("Found %d branches.", len(branches))

        table = ResultTable(priority_team=self.priority_team)
        processed: list[BranchSummaries] = []
        failed: list[str] = []

        for branch in branches:
            logger.info("Processing branch: %s", branch)
            try:
                data = self.read_branch(branch)
            except (GitCommandError, OSError, UnicodeDecodeError) as e:
                logger.error("Failed to process branch %s: %s", branch, e)
                failed.append(branch)
                continue

            if data.summaries:
                logger.debug("  %s: %s", branch, ", ".join(data.teams))
            table.ingest(data)
            processed.append(data)

        return table, processed, failed, len(branches)

    def run(self) -> MergeResult:
        table, processed, failed, branch_count = self.collect()

        logger.info("Writing merged summary to %s", self.merged_report)
        report_written = False
        try:
            self.merged_report.parent.mkdir(parents=True, exist_ok=True)
            self.merged_report.write_text(self.report_renderer.render(processed), encoding="utf-8")
            report_written = True
        except OSError as e:
            logger.error("Cannot write %s: %s", self.merged_report, e)

        logger.info("Generating Markdown table...")
        interesting, boring = table.partition()
        logger.info("Traces with failures: %d", len(interesting))
        logger.info("Traces without failures: %d", len(boring))
        table_md = self.table_renderer.render(table)

        readme_updated = False
        try:
            self.template_updater.update_file(self.readme, table_md)
            readme_updated = True
            logger.info("%s updated.", self.readme)
        except FileNotFoundError:
            logger.error("%s not found. Table not updated.", self.readme)
        except MarkerNotFoundError as e:
            logger.error("%s in %s. Table not updated.", e, self.readme)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot update %s: %s. Table not updated.", self.readme, e)

        if failed:
            logger.warning("%d branch(es) failed: %s", len(failed), ", ".join(failed))

        return MergeResult(
            branches_seen=branch_count,
            branches_processed=len(processed),
            failed_branches=failed,
            teams=table.teams(),
            trace_count=len(table.trace_ids()),
            interesting_traces=interesting,
            boring_traces=boring,
            merged_report=self.merged_report,
            readme=self.readme,
            readme_updated=readme_updated,
            report_written=report_written,
            table_markdown=table_md,
        )
