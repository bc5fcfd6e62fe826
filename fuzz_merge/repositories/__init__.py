from .summary_repository import SummaryRepository

__all__ = ["SummaryRepository"]
