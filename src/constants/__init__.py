from constants.analysis import ANALYSIS_CONFIG, MIN_BRAND_FRAGMENT_LENGTH, AnalysisConfig
from constants.column_patterns import (
    BRAND_FRAGMENT_SEPARATORS,
    COLUMN_PATTERNS,
    SUPPORTED_EXTENSIONS,
)

__all__ = [
    "ANALYSIS_CONFIG",
    "AnalysisConfig",
    "MIN_BRAND_FRAGMENT_LENGTH",
    "BRAND_FRAGMENT_SEPARATORS",
    "COLUMN_PATTERNS",
    "SUPPORTED_EXTENSIONS",
]
