"""Shared fixtures for keyword analysis tests."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

from models.domain import BrandCorpus, CleanResult, KeywordEntry


def make_corpus(brand_name: str, keywords, **metrics) -> BrandCorpus:
    entries = [KeywordEntry(keyword=k, source=brand_name, **metrics) for k in keywords]
    return BrandCorpus(brand_name=brand_name, keywords=entries, original_count=len(entries))


def make_cleaned(brand_name: str, keywords) -> CleanResult:
    return CleanResult(
        brand_name=brand_name,
        cleaned_keywords=[KeywordEntry(keyword=k, source=brand_name) for k in keywords],
    )


@pytest.fixture
def corpus_factory():
    return make_corpus


@pytest.fixture
def cleaned_factory():
    return make_cleaned


@pytest.fixture(scope="function")
def client():
    from api.app import app

    with TestClient(app) as test_client:
        yield test_client
