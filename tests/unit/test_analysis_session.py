import pytest

from models.domain import CleanReason
from services.analysis_session import AnalysisSession, AnalysisStep


@pytest.fixture
def loaded_session(corpus_factory):
    session = AnalysisSession()
    session.load([
        corpus_factory("Acme", ["acme tent", "tent", "tent", "stove"]),
        corpus_factory("Zeta", ["tent", "lantern"]),
    ])
    return session


def test_new_session_starts_at_upload():
    session = AnalysisSession()

    assert session.step == AnalysisStep.UPLOAD
    assert session.clean_results == []
    assert session.market_result is None


def test_load_detects_candidates(loaded_session):
    assert loaded_session.step == AnalysisStep.CLEAN
    acme = loaded_session.clean_results[0]
    assert [i.keyword for i in acme.duplicates] == ["tent"]
    assert [i.keyword for i in acme.brand_keywords] == ["acme tent"]


def test_execute_clean_runs_full_pipeline(loaded_session):
    market = loaded_session.execute_clean()

    assert loaded_session.step == AnalysisStep.RESULT
    assert [(k.keyword, k.frequency) for k in market.common_keywords] == [("tent", 2)]
    unique = {u.brand_name: [k.keyword for k in u.unique_keywords] for u in loaded_session.unique_results}
    assert unique == {"Acme": ["stove"], "Zeta": ["lantern"]}
    assert loaded_session.summary().total_brands == 2


def test_toggle_keeps_brand_keyword(loaded_session):
    item = loaded_session.clean_results[0].brand_keywords[0]

    loaded_session.toggle("Acme", item.id, False)
    loaded_session.execute_clean()

    acme_unique = loaded_session.unique_results[0].unique_keywords
    assert [k.keyword for k in acme_unique] == ["acme tent", "stove"]


def test_select_all(loaded_session):
    updated = loaded_session.select_all("Acme", CleanReason.BRAND, False)

    assert all(not i.selected for i in updated.brand_keywords)
    assert loaded_session.clean_results[0] is updated


def test_toggle_unknown_brand(loaded_session):
    with pytest.raises(ValueError, match="Unknown brand"):
        loaded_session.toggle("Nope", "clean_1", False)


def test_go_back_clears_results(loaded_session):
    loaded_session.execute_clean()

    loaded_session.go_back()

    assert loaded_session.step == AnalysisStep.CLEAN
    assert loaded_session.market_result is None
    assert loaded_session.unique_results == []


def test_step_guards(loaded_session):
    with pytest.raises(ValueError, match="expected one of: result"):
        loaded_session.go_back()

    loaded_session.execute_clean()
    with pytest.raises(ValueError):
        loaded_session.execute_clean()


def test_reset_discards_everything(loaded_session):
    loaded_session.execute_clean()

    loaded_session.reset()

    assert loaded_session.step == AnalysisStep.UPLOAD
    assert loaded_session.corpora == []
    assert loaded_session.clean_results == []


def test_ids_restart_for_each_load(corpus_factory):
    session = AnalysisSession()
    corpora = [corpus_factory("Acme", ["acme", "acme"])]

    first = [i.id for i in session.load(corpora)[0].items()]
    second = [i.id for i in session.load(corpora)[0].items()]

    assert first == second == ["clean_1", "clean_2"]


def test_load_rejects_duplicate_brand_names(loaded_session, corpus_factory):
    before = list(loaded_session.clean_results)

    with pytest.raises(ValueError, match="Duplicate brand name 'acme'"):
        loaded_session.load([
            corpus_factory("acme", ["acme tent", "tent"]),
            corpus_factory("acme", ["acme stove"]),
        ])

    assert loaded_session.step == AnalysisStep.CLEAN
    assert loaded_session.clean_results == before


def test_toggle_leaves_other_brands_untouched(loaded_session):
    zeta_before = loaded_session.clean_results[1]
    acme_item = loaded_session.clean_results[0].brand_keywords[0]

    loaded_session.toggle("Acme", acme_item.id, False)

    assert loaded_session.clean_results[1] is zeta_before
