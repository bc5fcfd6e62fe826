from .git_working_copy import GitWorkingCopy, VersionControl, parse_remote_branches

__all__ = ["GitWorkingCopy", "VersionControl", "parse_remote_branches"]
