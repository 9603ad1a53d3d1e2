import streamlit as st

from fetcher import SERVER_ADDRESS, fetch_file_content, store_fetch_result


# ------------------------------------------------------------------------------
# Page Config:
# ------------------------------------------------------------------------------

st.set_page_config(
    page_title="File Viewer",
    page_icon="📄",
    layout='wide',
)


# ------------------------------------------------------------------------------
# Page consistent settings and initializations:
# ------------------------------------------------------------------------------

if "initialized" not in st.session_state:
    st.session_state.server_ip = SERVER_ADDRESS
    st.session_state.content = None
    st.session_state.error = None

    with st.spinner("Loading file..."):
        status, message = fetch_file_content(st.session_state.server_ip)
    store_fetch_result(st.session_state, status, message)

    # Set flag to true, reruns will not fetch again.
    # An interrupted run never gets here, so the next run fetches instead:
    st.session_state.initialized = True


# ------------------------------------------------------------------------------
# Main Page:
# ------------------------------------------------------------------------------

st.header("📄 :orange[File Viewer]")

if st.session_state.error:
    st.error(st.session_state.error, icon="🚫")
elif st.session_state.content is not None:
    # st.text keeps whitespace and never parses Markdown / HTML:
    st.text(st.session_state.content)
