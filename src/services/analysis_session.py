"""
Step-by-step driver for one keyword analysis run.

The session holds the run-scoped state that the UI walks through:
uploaded corpora, the reviewable cleanup candidates, and the final
market / unique results. Nothing survives a `reset()`.
"""

import enum
import logging
from typing import List, Optional, Sequence

from constants.analysis import ANALYSIS_CONFIG, AnalysisConfig
from models.domain import (
    AnalysisSummary,
    BrandCorpus,
    CleanReason,
    CleanResult,
    MarketKeywordResult,
    UniqueKeywordResult,
)
from services.keyword_analysis import (
    analyze_market_keywords,
    extract_unique_keywords,
    generate_summary,
)
from services.keyword_cleaning import (
    check_unique_brand_names,
    detect_all_cleanable_items,
    execute_all_clean,
    set_all_selected,
    set_selection,
)
from services.keyword_keys import IdSequence

logger = logging.getLogger(__name__)


class AnalysisStep(str, enum.Enum):
    UPLOAD = "upload"
    CLEAN = "clean"
    ANALYZE = "analyze"
    RESULT = "result"


class AnalysisSession:
    def __init__(self, config: AnalysisConfig = ANALYSIS_CONFIG) -> None:
        self.config = config
        self._reset_state()

    def _reset_state(self) -> None:
        self.step = AnalysisStep.UPLOAD
        self.ids = IdSequence()
        self.corpora: List[BrandCorpus] = []
        self.clean_results: List[CleanResult] = []
        self.market_result: Optional[MarketKeywordResult] = None
        self.unique_results: List[UniqueKeywordResult] = []

    def _require_step(self, *allowed: AnalysisStep) -> None:
        if self.step not in allowed:
            names = ", ".join(s.value for s in allowed)
            raise ValueError(f"Session is at step '{self.step.value}', expected one of: {names}")

    def load(self, corpora: Sequence[BrandCorpus]) -> List[CleanResult]:
        corpora = list(corpora)
        check_unique_brand_names([c.brand_name for c in corpora])
        self._reset_state()
        self.corpora = corpora
        self.clean_results = detect_all_cleanable_items(self.corpora, self.ids)
        self.step = AnalysisStep.CLEAN
        return self.clean_results

    def _replace_result(self, brand_name: str, updated: CleanResult) -> None:
        self.clean_results = [
            updated if r.brand_name == brand_name else r for r in self.clean_results
        ]

    def _result_for(self, brand_name: str) -> CleanResult:
        for result in self.clean_results:
            if result.brand_name == brand_name:
                return result
        raise ValueError(f"Unknown brand '{brand_name}'")

    def toggle(self, brand_name: str, item_id: str, selected: bool) -> CleanResult:
        self._require_step(AnalysisStep.CLEAN)
        updated = set_selection(self._result_for(brand_name), item_id, selected)
        self._replace_result(brand_name, updated)
        return updated

    def select_all(self, brand_name: str, reason: CleanReason, selected: bool) -> CleanResult:
        self._require_step(AnalysisStep.CLEAN)
        updated = set_all_selected(self._result_for(brand_name), reason, selected)
        self._replace_result(brand_name, updated)
        return updated

    def execute_clean(self) -> MarketKeywordResult:
        """Clean every brand, then classify and extract unique keywords."""
        self._require_step(AnalysisStep.CLEAN)
        self.step = AnalysisStep.ANALYZE
        try:
            self.clean_results = execute_all_clean(self.corpora, self.clean_results)
            self.market_result = analyze_market_keywords(self.clean_results, self.config)
            self.unique_results = extract_unique_keywords(self.clean_results, self.market_result)
        except Exception:
            self.step = AnalysisStep.CLEAN
            raise
        self.step = AnalysisStep.RESULT
        logger.info(f"[Session] Analysis finished for {len(self.corpora)} brands")
        return self.market_result

    def summary(self) -> AnalysisSummary:
        self._require_step(AnalysisStep.RESULT)
        return generate_summary(self.clean_results, self.market_result)

    def go_back(self) -> None:
        self._require_step(AnalysisStep.RESULT)
        self.market_result = None
        self.unique_results = []
        self.step = AnalysisStep.CLEAN

    def reset(self) -> None:
        self._reset_state()
