from .errors import (
    ConfigError,
    FuzzMergeError,
    GitCommandError,
    MarkerNotFoundError,
    WorkingCopyError,
)
from .models import (
    UNKNOWN_GLYPH,
    BranchSummaries,
    MergeResult,
    Status,
    TeamCounts,
    TeamSummary,
    TraceResult,
)

__all__ = [
    "BranchSummaries",
    "ConfigError",
    "FuzzMergeError",
    "GitCommandError",
    "MarkerNotFoundError",
    "MergeResult",
    "Status",
    "TeamCounts",
    "TeamSummary",
    "TraceResult",
    "UNKNOWN_GLYPH",
    "WorkingCopyError",
]
