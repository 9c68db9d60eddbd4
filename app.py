import logging

import streamlit as st

from profile_viewer import view
from profile_viewer.config import get_settings
from profile_viewer.search import ProfileSearch

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

st.set_page_config(page_title=view.TITLE, layout="centered")

# One controller per browser session; it owns the screen state
if "profile_search" not in st.session_state:
    st.session_state["profile_search"] = ProfileSearch()

search: ProfileSearch = st.session_state["profile_search"]
state = search.state


def _on_search():
    if search.search(st.session_state.get("username", "")):
        # profile fetch, then avatar fetch: allow a full timeout for each
        search.wait_idle(timeout=2 * settings.request_timeout + 1)


# Pick up anything that finished after the last run gave up waiting
search.poll()


@st.fragment(run_every=1.0)
def _watch_late_results():
    if search.poll():
        st.rerun()


st.title(view.TITLE)

if state.avatar is not None:
    st.image(state.avatar, width=view.AVATAR_WIDTH, channels="BGR")

st.text_input(
    view.INPUT_LABEL,
    key="username",
    placeholder=view.INPUT_PLACEHOLDER,
    label_visibility="collapsed",
)
st.button(view.SEARCH_LABEL, on_click=_on_search, type="primary")

if state.loading:
    st.caption(f"Searching for {state.username}...")

if search.busy:
    _watch_late_results()

if state.error_message:
    st.error(state.error_message)

if state.profile is not None:
    lines = view.profile_lines(state.profile)
    st.subheader(lines[0])
    for line in lines[1:]:
        st.text(line)
    st.link_button(view.LINK_LABEL, state.profile.html_url)
