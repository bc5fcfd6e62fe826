from .merge_service import MergeService
from .report_renderer import (
    ConformanceTableRenderer,
    MergedReportRenderer,
    RawMergedReportRenderer,
    StructuredMergedReportRenderer,
    TraceLinks,
)
from .result_table import ResultTable
from .summary_parser import SummaryParser
from .template_updater import TemplateUpdater

__all__ = [
    "ConformanceTableRenderer",
    "MergeService",
    "MergedReportRenderer",
    "RawMergedReportRenderer",
    "ResultTable",
    "StructuredMergedReportRenderer",
    "SummaryParser",
    "TemplateUpdater",
    "TraceLinks",
]
