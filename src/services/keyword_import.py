"""
Keyword export parsing.

Reads the first sheet of a keyword research export (xlsx, xls or csv) into
a BrandCorpus. The brand is named after the file, and the keyword / metric
columns are located by matching header names.
"""

import logging
import math
from pathlib import Path
from typing import IO, Any, Dict, List, Optional, Sequence, Union

import pandas as pd

from constants.column_patterns import (
    BRAND_NAME_SUFFIX_PATTERN,
    COLUMN_PATTERNS,
    SUPPORTED_EXTENSIONS,
)
from models.domain import BrandCorpus, KeywordEntry

logger = logging.getLogger(__name__)

FileSource = Union[str, Path, IO[bytes]]


def extract_brand_name(file_name: str) -> str:
    return BRAND_NAME_SUFFIX_PATTERN.sub("", Path(file_name).name).strip()


def detect_columns(header_row: Sequence[Any]) -> Dict[str, Optional[int]]:
    """Map each known column to the index of the first header matching it."""
    columns: Dict[str, Optional[int]] = {name: None for name in COLUMN_PATTERNS}
    for index, header in enumerate(header_row):
        text = _cell_text(header).lower()
        for name, patterns in COLUMN_PATTERNS.items():
            if columns[name] is None and any(p.search(text) for p in patterns):
                columns[name] = index
    return columns


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def _cell_text(value: Any) -> str:
    if _is_missing(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def parse_number(value: Any) -> Optional[float]:
    if _is_missing(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _cell(row: Sequence[Any], index: Optional[int]) -> Any:
    if index is None or index >= len(row):
        return None
    return row[index]


def parse_keyword_rows(rows: Sequence[Sequence[Any]], brand_name: str) -> List[KeywordEntry]:
    """Turn a header row plus data rows into keyword entries."""
    if len(rows) < 2:
        return []

    columns = detect_columns(rows[0])
    if columns["keyword"] is None:
        logger.warning(f"[Import] No keyword column found for {brand_name}, using first column")
        columns["keyword"] = 0

    keywords: List[KeywordEntry] = []
    skipped = 0
    for row in rows[1:]:
        keyword = _cell_text(_cell(row, columns["keyword"]))
        if not keyword:
            skipped += 1
            continue
        keywords.append(
            KeywordEntry(
                keyword=keyword,
                source=brand_name,
                search_volume=parse_number(_cell(row, columns["search_volume"])),
                cpc=parse_number(_cell(row, columns["cpc"])),
                kd=parse_number(_cell(row, columns["kd"])),
            )
        )

    if skipped:
        logger.warning(f"[Import] Skipped {skipped} blank rows for {brand_name}")
    return keywords


def _read_rows(source: FileSource, file_name: str) -> List[List[Any]]:
    suffix = Path(file_name).suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise ValueError(
            f"Failed to parse {file_name}: unsupported file type '{suffix or 'none'}'"
        )
    try:
        if suffix == ".csv":
            df = pd.read_csv(source, header=None, dtype=str, keep_default_na=False)
        else:
            df = pd.read_excel(source, sheet_name=0, header=None, dtype=object)
    except pd.errors.EmptyDataError:
        return []
    except Exception as e:
        raise ValueError(f"Failed to parse {file_name}: {e}") from e
    return df.values.tolist()


def parse_keyword_file(source: FileSource, file_name: Optional[str] = None) -> BrandCorpus:
    """Parse one export file. `file_name` is required for file-like sources
    that carry no `name` attribute."""
    name = file_name or getattr(source, "name", None) or str(source)
    brand_name = extract_brand_name(name)
    keywords = parse_keyword_rows(_read_rows(source, name), brand_name)
    logger.info(f"[Import] {brand_name}: {len(keywords)} keywords")
    return BrandCorpus(brand_name=brand_name, keywords=keywords, original_count=len(keywords))


def parse_keyword_files(sources: Sequence[FileSource]) -> List[BrandCorpus]:
    return [parse_keyword_file(source) for source in sources]
