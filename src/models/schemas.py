from typing import List, Optional, Union

from pydantic import BaseModel, Field

from constants.analysis import AnalysisConfig
from models.domain import (
    BrandCorpus,
    CleanableItem,
    CleanReason,
    CleanResult,
    KeywordEntry,
    KeywordFrequency,
    MarketKeywordResult,
)


class KeywordEntrySchema(BaseModel):
    keyword: str = Field(..., min_length=1)
    source: str = Field(..., min_length=1, description="Brand the keyword was exported for")
    search_volume: Optional[float] = None
    cpc: Optional[float] = None
    kd: Optional[float] = None

    model_config = {"from_attributes": True}

    def to_domain(self) -> KeywordEntry:
        return KeywordEntry(**self.model_dump())


class BrandCorpusSchema(BaseModel):
    brand_name: str = Field(..., min_length=1)
    keywords: List[KeywordEntrySchema] = Field(default_factory=list)
    original_count: Optional[int] = Field(
        None, ge=0, description="Defaults to the number of keywords"
    )

    model_config = {"from_attributes": True}

    def to_domain(self) -> BrandCorpus:
        keywords = [k.to_domain() for k in self.keywords]
        count = len(keywords) if self.original_count is None else self.original_count
        return BrandCorpus(brand_name=self.brand_name, keywords=keywords, original_count=count)


class CleanableItemSchema(BaseModel):
    id: str
    keyword: str
    source: str
    reason: CleanReason
    selected: bool = True
    count: Optional[int] = None

    model_config = {"from_attributes": True}

    def to_domain(self) -> CleanableItem:
        return CleanableItem(**self.model_dump())


class CleanResultSchema(BaseModel):
    brand_name: str = Field(..., min_length=1)
    duplicates: List[CleanableItemSchema] = Field(default_factory=list)
    brand_keywords: List[CleanableItemSchema] = Field(default_factory=list)
    cleaned_keywords: List[KeywordEntrySchema] = Field(default_factory=list)

    model_config = {"from_attributes": True}

    def to_domain(self) -> CleanResult:
        return CleanResult(
            brand_name=self.brand_name,
            duplicates=[i.to_domain() for i in self.duplicates],
            brand_keywords=[i.to_domain() for i in self.brand_keywords],
            cleaned_keywords=[k.to_domain() for k in self.cleaned_keywords],
        )


class KeywordFrequencySchema(BaseModel):
    keyword: str = Field(..., min_length=1)
    frequency: int = Field(..., ge=1)
    sources: List[str] = Field(default_factory=list)
    search_volume: Optional[float] = None
    cpc: Optional[float] = None
    kd: Optional[float] = None

    model_config = {"from_attributes": True}

    def to_domain(self) -> KeywordFrequency:
        return KeywordFrequency(**self.model_dump())


class MarketKeywordResultSchema(BaseModel):
    common_keywords: List[KeywordFrequencySchema]
    market_keywords: List[KeywordFrequencySchema]
    threshold: int
    total_common_count: int

    model_config = {"from_attributes": True}

    def to_domain(self) -> MarketKeywordResult:
        return MarketKeywordResult(
            common_keywords=[k.to_domain() for k in self.common_keywords],
            market_keywords=[k.to_domain() for k in self.market_keywords],
            threshold=self.threshold,
            total_common_count=self.total_common_count,
        )


class UniqueKeywordResultSchema(BaseModel):
    brand_name: str
    unique_keywords: List[KeywordEntrySchema]

    model_config = {"from_attributes": True}


class AnalysisSummarySchema(BaseModel):
    total_brands: int
    total_original_keywords: int
    total_cleaned_keywords: int
    total_common_keywords: int
    total_market_keywords: int
    used_threshold: int

    model_config = {"from_attributes": True}


class AnalysisConfigSchema(BaseModel):
    common_threshold_high: int = Field(4, ge=2)
    common_threshold_low: int = Field(2, ge=2)
    big_data_limit: int = Field(700, ge=0)

    def to_domain(self) -> AnalysisConfig:
        return AnalysisConfig(**self.model_dump())


class DetectRequest(BaseModel):
    corpora: List[BrandCorpusSchema]


class CleanRequest(BaseModel):
    corpora: List[BrandCorpusSchema]
    clean_results: List[CleanResultSchema]


class AnalyzeRequest(BaseModel):
    clean_results: List[CleanResultSchema]
    config: AnalysisConfigSchema = Field(default_factory=AnalysisConfigSchema)


class AnalyzeResponse(BaseModel):
    market_result: MarketKeywordResultSchema
    unique_results: List[UniqueKeywordResultSchema]
    summary: AnalysisSummarySchema


class UniqueRequest(BaseModel):
    clean_results: List[CleanResultSchema]
    market_result: MarketKeywordResultSchema


class ExportRequest(BaseModel):
    keywords: List[Union[KeywordFrequencySchema, KeywordEntrySchema]]
    filename: str = Field("keywords", min_length=1)
