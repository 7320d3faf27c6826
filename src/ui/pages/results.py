import streamlit as st

from services.analysis_session import AnalysisStep
from services.keyword_export import export_filename, keywords_to_csv
from ui.components.charts import render_market_scatter
from ui.state import get_session
from ui.utils.keyword_tables import for_display, keywords_frame, result_tab_counts


def _download_button(keywords, label: str, key: str) -> None:
    st.download_button(
        "⬇️ Download CSV",
        data=keywords_to_csv(keywords, bom=True).encode("utf-8"),
        file_name=export_filename(label),
        mime="text/csv",
        key=key,
    )


def _show_summary(session) -> None:
    summary = session.summary()
    st.caption(f"Market keywords use freq >= {summary.used_threshold}")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Brands", summary.total_brands)
    with col2:
        st.metric("Cleaned Keywords", summary.total_cleaned_keywords)
    with col3:
        st.metric("Common Keywords", summary.total_common_keywords)
    with col4:
        st.metric("Market Keywords", summary.total_market_keywords)


def show():
    st.title("📊 Keyword Analysis Results")
    session = get_session()

    if session.step != AnalysisStep.RESULT:
        st.warning("⚠️ No results yet. Review the cleanup candidates and run the analysis first.")
        return

    _show_summary(session)

    col1, col2 = st.columns(2)
    with col1:
        if st.button("⬅️ Back to Cleanup"):
            session.go_back()
            st.rerun()
    with col2:
        if st.button("🔄 Start Over"):
            session.reset()
            st.rerun()

    market = session.market_result
    counts = result_tab_counts(market, session.unique_results)
    tab_market, tab_common, tab_unique = st.tabs([
        f"Market Keywords ({counts['market']})",
        f"Common Keywords ({counts['common']})",
        f"Unique Keywords ({counts['unique']})",
    ])

    with tab_market:
        market_df = keywords_frame(market.market_keywords)
        view = st.radio("View", ["Chart", "Table"], horizontal=True, key="market_view")
        if view == "Chart":
            render_market_scatter(market_df, session.config)
        else:
            st.dataframe(for_display(market_df), hide_index=True, use_container_width=True)
        _download_button(market.market_keywords, "market_keywords", "dl_market")

    with tab_common:
        st.dataframe(
            for_display(keywords_frame(market.common_keywords)),
            hide_index=True,
            use_container_width=True,
        )
        _download_button(market.common_keywords, "common_keywords", "dl_common")

    with tab_unique:
        if not session.unique_results:
            st.info("No brands analyzed.")
            return
        brand_names = [r.brand_name for r in session.unique_results]
        selected = st.selectbox("Brand", brand_names)
        unique = next(r for r in session.unique_results if r.brand_name == selected)
        if not unique.unique_keywords:
            st.info(f"ℹ️ {selected} has no keywords that no other brand shares.")
        else:
            st.dataframe(
                for_display(keywords_frame(unique.unique_keywords)),
                hide_index=True,
                use_container_width=True,
            )
            _download_button(unique.unique_keywords, f"{selected}_unique_keywords", f"dl_unique_{selected}")
