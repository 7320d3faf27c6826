from dataclasses import asdict
from typing import List, Sequence, Union

import pandas as pd

from models.domain import (
    CleanableItem,
    KeywordEntry,
    KeywordFrequency,
    MarketKeywordResult,
    UniqueKeywordResult,
)

ENTRY_COLUMNS = ["keyword", "search_volume", "cpc", "kd", "source"]
FREQUENCY_COLUMNS = ["keyword", "frequency", "sources", "search_volume", "cpc", "kd"]
ITEM_COLUMNS = ["id", "selected", "keyword", "count"]

DISPLAY_NAMES = {
    "keyword": "Keyword",
    "search_volume": "Search Volume",
    "cpc": "CPC",
    "kd": "KD",
    "source": "Source",
    "frequency": "Frequency",
    "sources": "Brands",
    "selected": "Remove",
    "count": "Count",
}


def keywords_frame(keywords: Sequence[Union[KeywordEntry, KeywordFrequency]]) -> pd.DataFrame:
    if keywords and isinstance(keywords[0], KeywordFrequency):
        df = pd.DataFrame([asdict(k) for k in keywords], columns=FREQUENCY_COLUMNS)
        df["sources"] = df["sources"].apply(", ".join)
        return df
    return pd.DataFrame([asdict(k) for k in keywords], columns=ENTRY_COLUMNS)


def clean_items_frame(items: Sequence[CleanableItem]) -> pd.DataFrame:
    return pd.DataFrame(
        [{c: getattr(item, c) for c in ITEM_COLUMNS} for item in items],
        columns=ITEM_COLUMNS,
    )


def selection_changes(before: pd.DataFrame, after: pd.DataFrame) -> List[tuple[str, bool]]:
    """Ids whose `selected` flag differs between two item frames."""
    merged = before[["id", "selected"]].merge(
        after[["id", "selected"]], on="id", suffixes=("_before", "_after")
    )
    changed = merged[merged["selected_before"] != merged["selected_after"]]
    return [(row.id, bool(row.selected_after)) for row in changed.itertuples(index=False)]


def for_display(df: pd.DataFrame) -> pd.DataFrame:
    return df.rename(columns=DISPLAY_NAMES)


def result_tab_counts(
    market_result: MarketKeywordResult, unique_results: Sequence[UniqueKeywordResult]
) -> dict[str, int]:
    return {
        "market": len(market_result.market_keywords),
        "common": len(market_result.common_keywords),
        "unique": sum(len(r.unique_keywords) for r in unique_results),
    }
