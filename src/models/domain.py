"""
Data models for keyword corpus analysis.

Every object here is run-scoped: it is created when a set of brand keyword
exports is loaded and discarded when the run is reset. Nothing is persisted.
"""

import enum
from dataclasses import dataclass, field
from typing import List, Optional


class CleanReason(str, enum.Enum):
    DUPLICATE = "duplicate"
    BRAND = "brand"


def _require_text(value: object, name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string, got {value!r}")


@dataclass(frozen=True)
class KeywordEntry:
    """One keyword row as exported by a keyword research tool."""
    keyword: str
    source: str
    search_volume: Optional[float] = None
    cpc: Optional[float] = None
    kd: Optional[float] = None

    def __post_init__(self) -> None:
        _require_text(self.keyword, "KeywordEntry.keyword")
        _require_text(self.source, "KeywordEntry.source")


@dataclass
class BrandCorpus:
    """A brand's full keyword list, in file order."""
    brand_name: str
    keywords: List[KeywordEntry] = field(default_factory=list)
    original_count: int = 0

    def __post_init__(self) -> None:
        _require_text(self.brand_name, "BrandCorpus.brand_name")
        if self.original_count < 0:
            raise ValueError(
                f"BrandCorpus.original_count must be >= 0, got {self.original_count}"
            )


@dataclass
class CleanableItem:
    """A keyword flagged for removal; `selected` is toggled during review."""
    id: str
    keyword: str
    source: str
    reason: CleanReason
    selected: bool = True
    count: Optional[int] = None


@dataclass
class CleanResult:
    brand_name: str
    duplicates: List[CleanableItem] = field(default_factory=list)
    brand_keywords: List[CleanableItem] = field(default_factory=list)
    cleaned_keywords: List[KeywordEntry] = field(default_factory=list)

    def items(self) -> List[CleanableItem]:
        return [*self.duplicates, *self.brand_keywords]


@dataclass
class KeywordFrequency:
    """Cross-brand aggregate for one normalized keyword."""
    keyword: str
    frequency: int
    sources: List[str] = field(default_factory=list)
    search_volume: Optional[float] = None
    cpc: Optional[float] = None
    kd: Optional[float] = None


@dataclass
class MarketKeywordResult:
    common_keywords: List[KeywordFrequency]
    market_keywords: List[KeywordFrequency]
    threshold: int
    total_common_count: int


@dataclass
class UniqueKeywordResult:
    brand_name: str
    unique_keywords: List[KeywordEntry] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisSummary:
    total_brands: int
    total_original_keywords: int
    total_cleaned_keywords: int
    total_common_keywords: int
    total_market_keywords: int
    used_threshold: int
