import pandas as pd
import plotly.express as px
import streamlit as st

from constants.analysis import ANALYSIS_CONFIG, AnalysisConfig


def render_market_scatter(df: pd.DataFrame, config: AnalysisConfig = ANALYSIS_CONFIG) -> None:
    chart_df = df.dropna(subset=["search_volume", "cpc"])
    if chart_df.empty:
        st.info("No keywords with both search volume and CPC to plot.")
        return

    fig = px.scatter(
        chart_df,
        x="cpc",
        y="search_volume",
        size="frequency",
        hover_name="keyword",
        hover_data=["frequency", "sources", "kd"],
        labels={
            "cpc": "CPC",
            "search_volume": "Search Volume",
            "frequency": "Frequency",
            "sources": "Brands",
            "kd": "KD",
        },
        size_max=30,
    )

    fig.add_hline(y=config.chart_sv_target, line_dash="dash", line_color="gray", opacity=0.5)
    fig.add_vline(x=config.chart_cpc_target, line_dash="dash", line_color="gray", opacity=0.5)

    fig.update_layout(
        title="Market Keywords: Search Volume vs CPC",
        xaxis_title="CPC",
        yaxis_title="Search Volume",
        height=500,
    )

    st.plotly_chart(fig, use_container_width=True)
