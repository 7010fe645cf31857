import streamlit as st

from utils.state import ConsoleState

STATE_KEY = "console"


def init_session():
    defaults = {
        STATE_KEY: ConsoleState(),
        "connection_restored": False,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def get_state() -> ConsoleState:
    """The ConsoleState of this browser session."""
    return st.session_state[STATE_KEY]
