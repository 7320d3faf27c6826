import streamlit as st

st.set_page_config(
    page_title="SEO King - Competitor Keyword Analysis",
    page_icon="👑",
    layout="wide",
)

page = st.sidebar.radio(
    "Navigate",
    ["Upload", "Clean", "Results"],
)

if page == "Upload":
    from ui.pages import upload
    upload.show()
elif page == "Clean":
    from ui.pages import clean
    clean.show()
elif page == "Results":
    from ui.pages import results
    results.show()
