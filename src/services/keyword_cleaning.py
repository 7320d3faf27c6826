"""
Intra-brand keyword cleanup.

Detection flags two kinds of candidates in one brand's keyword export:
keywords that occur more than once, and "vanity" keywords that contain a
fragment of the brand's own name. Execution applies the reviewed selection:
selected vanity keywords are removed entirely, everything else is reduced to
its first occurrence.
"""

import logging
from collections import Counter
from dataclasses import replace
from typing import List, Optional, Sequence

from constants.analysis import MIN_BRAND_FRAGMENT_LENGTH
from constants.column_patterns import BRAND_FRAGMENT_SEPARATORS
from models.domain import (
    BrandCorpus,
    CleanableItem,
    CleanReason,
    CleanResult,
    KeywordEntry,
)
from services.keyword_keys import FirstSeenIndex, IdSequence, normalize_keyword

logger = logging.getLogger(__name__)


def brand_fragments(brand_name: str) -> List[str]:
    parts = BRAND_FRAGMENT_SEPARATORS.split(brand_name.lower())
    return [p for p in parts if len(p) >= MIN_BRAND_FRAGMENT_LENGTH]


def _is_vanity_keyword(normalized: str, fragments: Sequence[str]) -> bool:
    return any(fragment in normalized for fragment in fragments)


def check_unique_brand_names(brand_names: Sequence[str]) -> None:
    """Brand names key every per-brand result in a run, so they must not repeat."""
    seen = set()
    for name in brand_names:
        if name in seen:
            raise ValueError(f"Duplicate brand name '{name}'")
        seen.add(name)


def detect_cleanable_items(
    corpus: BrandCorpus, ids: Optional[IdSequence] = None
) -> CleanResult:
    """Flag duplicate and brand-vanity keywords in one brand's corpus.

    Each normalized keyword is reported at most once per reason, using the
    casing of its first occurrence. The two reasons are evaluated
    independently, so a keyword can appear in both lists.
    """
    ids = ids or IdSequence()
    counts = Counter(normalize_keyword(entry.keyword) for entry in corpus.keywords)
    fragments = brand_fragments(corpus.brand_name)

    seen_duplicates: FirstSeenIndex[None] = FirstSeenIndex()
    seen_brand_keywords: FirstSeenIndex[None] = FirstSeenIndex()
    duplicates: List[CleanableItem] = []
    brand_keywords: List[CleanableItem] = []

    for entry in corpus.keywords:
        normalized = normalize_keyword(entry.keyword)

        count = counts[normalized]
        if count > 1 and seen_duplicates.mark(entry.keyword):
            duplicates.append(
                CleanableItem(
                    id=ids.next_id(),
                    keyword=entry.keyword,
                    source=corpus.brand_name,
                    reason=CleanReason.DUPLICATE,
                    count=count,
                )
            )

        if _is_vanity_keyword(normalized, fragments) and seen_brand_keywords.mark(entry.keyword):
            brand_keywords.append(
                CleanableItem(
                    id=ids.next_id(),
                    keyword=entry.keyword,
                    source=corpus.brand_name,
                    reason=CleanReason.BRAND,
                )
            )

    logger.debug(
        f"[Clean] {corpus.brand_name}: {len(duplicates)} duplicates, "
        f"{len(brand_keywords)} brand keywords out of {len(corpus.keywords)}"
    )
    return CleanResult(
        brand_name=corpus.brand_name,
        duplicates=duplicates,
        brand_keywords=brand_keywords,
    )


def detect_all_cleanable_items(
    corpora: Sequence[BrandCorpus], ids: Optional[IdSequence] = None
) -> List[CleanResult]:
    check_unique_brand_names([c.brand_name for c in corpora])
    ids = ids or IdSequence()
    results = [detect_cleanable_items(corpus, ids) for corpus in corpora]
    logger.info(
        f"[Clean] Scanned {len(results)} brands: "
        f"{sum(len(r.duplicates) for r in results)} duplicates, "
        f"{sum(len(r.brand_keywords) for r in results)} brand keywords"
    )
    return results


def _selected_keywords(items: Sequence[CleanableItem]) -> set[str]:
    return {normalize_keyword(item.keyword) for item in items if item.selected}


def execute_clean(corpus: BrandCorpus, result: CleanResult) -> List[KeywordEntry]:
    """Apply the reviewed selection to a corpus, preserving keyword order.

    Selected brand keywords are dropped at every occurrence. Every other
    keyword is kept at its first occurrence only, whether or not it was
    flagged as a duplicate, so the output never repeats a normalized keyword.

    Selected duplicate candidates need no set of their own: the same
    first-occurrence pass that covers deselected and unflagged repeats
    already drops their later occurrences.
    """
    brand_words_to_remove = _selected_keywords(result.brand_keywords)
    seen: FirstSeenIndex[None] = FirstSeenIndex()
    cleaned: List[KeywordEntry] = []

    for entry in corpus.keywords:
        if normalize_keyword(entry.keyword) in brand_words_to_remove:
            continue
        if seen.mark(entry.keyword):
            cleaned.append(entry)

    return cleaned


def _check_alignment(corpora: Sequence[BrandCorpus], results: Sequence[CleanResult]) -> None:
    check_unique_brand_names([c.brand_name for c in corpora])
    if len(corpora) != len(results):
        raise ValueError(
            f"Got {len(corpora)} corpora but {len(results)} clean results"
        )
    for corpus, result in zip(corpora, results):
        if corpus.brand_name != result.brand_name:
            raise ValueError(
                f"Clean result for '{result.brand_name}' does not match corpus '{corpus.brand_name}'"
            )


def execute_all_clean(
    corpora: Sequence[BrandCorpus], results: Sequence[CleanResult]
) -> List[CleanResult]:
    _check_alignment(corpora, results)
    cleaned = [
        replace(result, cleaned_keywords=execute_clean(corpus, result))
        for corpus, result in zip(corpora, results)
    ]
    before = sum(len(c.keywords) for c in corpora)
    after = sum(len(r.cleaned_keywords) for r in cleaned)
    logger.info(f"[Clean] Kept {after} of {before} keywords across {len(cleaned)} brands")
    return cleaned


def set_selection(result: CleanResult, item_id: str, selected: bool) -> CleanResult:
    """Return a copy of `result` with one candidate's selection changed."""
    found = False

    def _toggle(items: List[CleanableItem]) -> List[CleanableItem]:
        nonlocal found
        updated = []
        for item in items:
            if item.id == item_id:
                found = True
                item = replace(item, selected=selected)
            updated.append(item)
        return updated

    duplicates = _toggle(result.duplicates)
    brand_keywords = _toggle(result.brand_keywords)
    if not found:
        raise ValueError(f"No cleanable item with id '{item_id}' for brand '{result.brand_name}'")
    return replace(result, duplicates=duplicates, brand_keywords=brand_keywords)


def set_all_selected(result: CleanResult, reason: CleanReason, selected: bool) -> CleanResult:
    if reason == CleanReason.DUPLICATE:
        return replace(
            result, duplicates=[replace(i, selected=selected) for i in result.duplicates]
        )
    return replace(
        result, brand_keywords=[replace(i, selected=selected) for i in result.brand_keywords]
    )
