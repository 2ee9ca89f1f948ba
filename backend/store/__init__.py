from .reports import ReportStore, InMemoryReportStore
from .cache import AnalysisCache, CacheEntry

__all__ = [
    "ReportStore",
    "InMemoryReportStore",
    "AnalysisCache",
    "CacheEntry",
]
