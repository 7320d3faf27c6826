from models.domain import (
    AnalysisSummary,
    BrandCorpus,
    CleanableItem,
    CleanReason,
    CleanResult,
    KeywordEntry,
    KeywordFrequency,
    MarketKeywordResult,
    UniqueKeywordResult,
)

__all__ = [
    "AnalysisSummary",
    "BrandCorpus",
    "CleanableItem",
    "CleanReason",
    "CleanResult",
    "KeywordEntry",
    "KeywordFrequency",
    "MarketKeywordResult",
    "UniqueKeywordResult",
]
