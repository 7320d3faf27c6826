import streamlit as st

from config import settings
from constants.column_patterns import SUPPORTED_EXTENSIONS
from services.keyword_import import extract_brand_name, parse_keyword_files
from ui.state import get_session


def show():
    st.title("👑 SEO King - Competitor Keyword Analysis")
    st.write("Upload one keyword export per brand. The file name becomes the brand name.")

    st.markdown("---")

    files = st.file_uploader(
        "Keyword exports",
        type=[ext.lstrip(".") for ext in SUPPORTED_EXTENSIONS],
        accept_multiple_files=True,
        help="First sheet only; columns are detected from the header row",
    )

    if not files:
        st.info("ℹ️ Upload at least two brands to find shared keywords.")
        return

    if len(files) > settings.max_upload_files:
        st.error(f"❌ At most {settings.max_upload_files} files can be analyzed at once.")
        return

    brand_names = [extract_brand_name(f.name) for f in files]
    if len(set(brand_names)) != len(brand_names):
        st.error("❌ Each file must be named after a different brand.")
        return

    if st.button("🔍 Detect Cleanup Candidates", type="primary"):
        try:
            with st.spinner("Parsing files..."):
                corpora = parse_keyword_files(files)
        except ValueError as e:
            st.error(f"❌ {e}")
            return

        get_session().load(corpora)
        st.success(f"✅ Loaded {len(corpora)} brands. Continue on the Clean page.")
        for corpus in corpora:
            st.caption(f"{corpus.brand_name}: {corpus.original_count} keywords")
