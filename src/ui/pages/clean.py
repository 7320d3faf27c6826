import streamlit as st

from models.domain import CleanReason
from services.analysis_session import AnalysisStep
from ui.state import get_session
from ui.utils.keyword_tables import clean_items_frame, for_display, selection_changes


def _review_table(brand_name: str, reason: CleanReason, items, key: str) -> None:
    session = get_session()
    if not items:
        st.caption("Nothing detected.")
        return

    if session.step != AnalysisStep.CLEAN:
        st.dataframe(for_display(clean_items_frame(items)), hide_index=True, use_container_width=True)
        return

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Select all", key=f"{key}_all"):
            session.select_all(brand_name, reason, True)
            st.rerun()
    with col2:
        if st.button("Select none", key=f"{key}_none"):
            session.select_all(brand_name, reason, False)
            st.rerun()

    before = clean_items_frame(items)
    edited = st.data_editor(
        for_display(before),
        key=key,
        hide_index=True,
        disabled=["id", "Keyword", "Count"],
        use_container_width=True,
    )
    after = edited.rename(columns={"Remove": "selected"})
    for item_id, selected in selection_changes(before, after):
        session.toggle(brand_name, item_id, selected)


def show():
    st.title("🧹 Review Cleanup")
    session = get_session()

    if session.step == AnalysisStep.UPLOAD:
        st.warning("⚠️ No keyword exports loaded yet. Start on the Upload page.")
        return

    st.write(
        "Duplicates keep one occurrence. Brand keywords are removed entirely. "
        "Untick a row to keep a brand keyword."
    )

    for result in session.clean_results:
        with st.expander(
            f"{result.brand_name}: {len(result.duplicates)} duplicates, "
            f"{len(result.brand_keywords)} brand keywords"
        ):
            tab_dup, tab_brand = st.tabs(["Duplicates", "Brand Keywords"])
            with tab_dup:
                _review_table(result.brand_name, CleanReason.DUPLICATE, result.duplicates, f"dup_{result.brand_name}")
            with tab_brand:
                _review_table(result.brand_name, CleanReason.BRAND, result.brand_keywords, f"brand_{result.brand_name}")

    st.markdown("---")

    if session.step == AnalysisStep.RESULT:
        st.info("ℹ️ Analysis already done. Go back from the Results page to change the selection.")
        return

    if st.button("🚀 Clean & Analyze", type="primary"):
        with st.spinner("Analyzing keywords..."):
            session.execute_clean()
        st.success("✅ Analysis complete. Open the Results page.")
