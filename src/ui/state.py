import streamlit as st

from services.analysis_session import AnalysisSession

SESSION_KEY = "analysis_session"


def get_session() -> AnalysisSession:
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = AnalysisSession()
    return st.session_state[SESSION_KEY]
