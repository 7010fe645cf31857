import streamlit as st
from streamlit_option_menu import option_menu

from config import API_URL, APP_NAME, REQUEST_TIMEOUT
from utils.api import APIClient
from utils.session import get_state, init_session
from utils.state import TAB_BROWSE, TAB_QUERY
from utils.styles import inject_styles
from views import browse, connection, database_tree, query

TABS = [TAB_BROWSE, TAB_QUERY]


@st.fragment(run_every=1)
def render_notification():
    """Current notification; the periodic rerun lets it disappear on its own."""
    notification = get_state().active_notification()
    if notification is None:
        return
    if notification.kind == "error":
        st.error(notification.message)
    else:
        st.success(notification.message)


def main():
    st.set_page_config(page_title=APP_NAME, page_icon="🍃", layout="wide")
    inject_styles()
    init_session()

    state = get_state()
    api = APIClient(API_URL, timeout=REQUEST_TIMEOUT)

    # --- Backend may already hold a connection (reload, MONGO_URI)
    if not st.session_state["connection_restored"]:
        st.session_state["connection_restored"] = True
        connection.restore(api, state)

    # --- Sidebar: connection + database tree
    with st.sidebar:
        st.title(f"🍃 {APP_NAME}")
        connection.render(api, state)
        st.divider()
        database_tree.render(api, state)

    render_notification()

    # Key follows the active tab so selecting a collection can switch back to Browse
    selected = option_menu(
        menu_title=None,
        options=TABS,
        icons=["table", "terminal"],
        default_index=TABS.index(state.active_tab),
        orientation="horizontal",
        key=f"main_nav_{state.active_tab}",
    )
    if selected and selected != state.active_tab:
        state.active_tab = selected
        st.rerun()

    # --- Routing
    if state.active_tab == TAB_BROWSE:
        browse.render(api, state)
    else:
        query.render(api, state)


if __name__ == "__main__":
    main()
