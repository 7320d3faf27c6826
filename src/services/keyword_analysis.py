"""
Cross-brand keyword analysis.

Cleaned keyword lists from every brand are merged and counted
case-insensitively. Keywords seen at least twice are "common"; common
keywords that also meet the volume-adaptive threshold are "market" keywords.
Whatever a brand has left after removing all common keywords is its unique
(domain) vocabulary.
"""

import logging
from typing import Iterable, List, Sequence

from constants.analysis import ANALYSIS_CONFIG, AnalysisConfig
from models.domain import (
    AnalysisSummary,
    CleanResult,
    KeywordEntry,
    KeywordFrequency,
    MarketKeywordResult,
    UniqueKeywordResult,
)
from services.keyword_keys import FirstSeenIndex, fill_missing_metrics, normalize_keyword

logger = logging.getLogger(__name__)

COMMON_MIN_FREQUENCY = 2


def _all_cleaned_keywords(results: Sequence[CleanResult]) -> Iterable[KeywordEntry]:
    for result in results:
        yield from result.cleaned_keywords


def aggregate_keyword_frequencies(results: Sequence[CleanResult]) -> List[KeywordFrequency]:
    """Count every cleaned keyword across brands, in discovery order.

    The first occurrence fixes the displayed casing. Metrics missing on the
    first occurrence are taken from the next occurrence that has them.
    """
    index: FirstSeenIndex[KeywordFrequency] = FirstSeenIndex()
    for entry in _all_cleaned_keywords(results):
        record, _ = index.first_seen(
            entry.keyword,
            lambda: KeywordFrequency(keyword=entry.keyword, frequency=0),
        )
        record.frequency += 1
        if entry.source not in record.sources:
            record.sources.append(entry.source)
        fill_missing_metrics(record, entry)
    return index.values()


def _by_frequency_desc(keywords: Iterable[KeywordFrequency]) -> List[KeywordFrequency]:
    return sorted(keywords, key=lambda kf: -kf.frequency)


def _validate_config(config: AnalysisConfig) -> None:
    if config.common_threshold_low < COMMON_MIN_FREQUENCY:
        raise ValueError(
            f"common_threshold_low must be >= {COMMON_MIN_FREQUENCY}, "
            f"got {config.common_threshold_low}"
        )
    if config.common_threshold_high < config.common_threshold_low:
        raise ValueError(
            f"common_threshold_high ({config.common_threshold_high}) must be >= "
            f"common_threshold_low ({config.common_threshold_low})"
        )


def select_threshold(common_count: int, config: AnalysisConfig = ANALYSIS_CONFIG) -> int:
    if common_count > config.big_data_limit:
        return config.common_threshold_high
    return config.common_threshold_low


def analyze_market_keywords(
    results: Sequence[CleanResult], config: AnalysisConfig = ANALYSIS_CONFIG
) -> MarketKeywordResult:
    _validate_config(config)
    frequencies = aggregate_keyword_frequencies(results)

    common = [kf for kf in frequencies if kf.frequency >= COMMON_MIN_FREQUENCY]
    threshold = select_threshold(len(common), config)
    market = [kf for kf in common if kf.frequency >= threshold]

    logger.info(
        f"[Analysis] {len(frequencies)} distinct keywords, {len(common)} common, "
        f"{len(market)} market (threshold={threshold})"
    )
    return MarketKeywordResult(
        common_keywords=_by_frequency_desc(common),
        market_keywords=_by_frequency_desc(market),
        threshold=threshold,
        total_common_count=len(common),
    )


def extract_unique_keywords(
    results: Sequence[CleanResult], market_result: MarketKeywordResult
) -> List[UniqueKeywordResult]:
    # Every common keyword is excluded, not only the market tier.
    excluded = {normalize_keyword(kf.keyword) for kf in market_result.common_keywords}
    unique = [
        UniqueKeywordResult(
            brand_name=result.brand_name,
            unique_keywords=[
                entry
                for entry in result.cleaned_keywords
                if normalize_keyword(entry.keyword) not in excluded
            ],
        )
        for result in results
    ]
    for item in unique:
        logger.debug(f"[Analysis] {item.brand_name}: {len(item.unique_keywords)} unique keywords")
    return unique


def generate_summary(
    results: Sequence[CleanResult], market_result: MarketKeywordResult
) -> AnalysisSummary:
    total_original = sum(
        len(r.duplicates) + len(r.brand_keywords) + len(r.cleaned_keywords) for r in results
    )
    return AnalysisSummary(
        total_brands=len(results),
        total_original_keywords=total_original,
        total_cleaned_keywords=sum(len(r.cleaned_keywords) for r in results),
        total_common_keywords=market_result.total_common_count,
        total_market_keywords=len(market_result.market_keywords),
        used_threshold=market_result.threshold,
    )
