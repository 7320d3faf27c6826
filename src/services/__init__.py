from .analysis_session import AnalysisSession, AnalysisStep
from .keyword_analysis import (
    analyze_market_keywords,
    extract_unique_keywords,
    generate_summary,
)
from .keyword_cleaning import (
    detect_all_cleanable_items,
    detect_cleanable_items,
    execute_all_clean,
    execute_clean,
)
from .keyword_export import keywords_to_csv
from .keyword_import import parse_keyword_file, parse_keyword_files

__all__ = [
    "AnalysisSession",
    "AnalysisStep",
    "analyze_market_keywords",
    "detect_all_cleanable_items",
    "detect_cleanable_items",
    "execute_all_clean",
    "execute_clean",
    "extract_unique_keywords",
    "generate_summary",
    "keywords_to_csv",
    "parse_keyword_file",
    "parse_keyword_files",
]
