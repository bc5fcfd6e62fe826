"""Merge per-branch fuzz summaries into one report and a README conformance table."""

__version__ = "0.1.0"
