"""
Query tab: run find, findOne or count with a JSON filter.
"""

import streamlit as st

from utils.api import APIClient, error_message, is_success
from utils.formatters import format_json
from utils.state import ConsoleState

QUERY_OPERATIONS = ["find", "findOne", "count"]


def _collections_for(api: APIClient, state: ConsoleState, database: str) -> list[str]:
    """Collection names of the database picked in the query form, shared with the database tree."""
    if database not in state.collections_cache and database not in state.collection_errors:
        resp = api.list_collections(database)
        if is_success(resp):
            state.cache_collections(database, resp.get("data") or [])
        else:
            state.collections_failed(database, error_message(resp))
    return state.collection_names(database)


def _execute(api: APIClient, state: ConsoleState, database: str, collection: str, query: str, operation: str):
    if not database or not collection:
        state.notify_error("Please select database and collection")
        return

    with st.spinner("Executing query..."):
        resp = api.execute_query(database, collection, query.strip() or "{}", operation)

    if is_success(resp):
        state.query_succeeded(format_json((resp.get("data") or {}).get("result")))
    else:
        state.query_failed(error_message(resp))


def render(api: APIClient, state: ConsoleState):
    """Render the Query tab."""
    if not state.is_connected:
        st.info("Connect to MongoDB to run queries.")
        return

    db_names = [db.get("name", "") for db in state.databases]

    col_db, col_col, col_op = st.columns(3)
    with col_db:
        database = st.selectbox(
            "Database",
            ["", *db_names],
            format_func=lambda name: name or "Select Database",
            key="query_database",
        )
    with col_col:
        collections = _collections_for(api, state, database) if database else []
        collection = st.selectbox(
            "Collection",
            ["", *collections],
            format_func=lambda name: name or "Select Collection",
            key=f"query_collection_{database}",
        )
    with col_op:
        operation = st.selectbox("Operation", QUERY_OPERATIONS, key="query_operation")

    query = st.text_area(
        "Filter (JSON)",
        value="{}",
        height=160,
        key="query_input",
        help='Example: {"status": "active", "age": {"$gte": 18}}',
    )

    if st.button("▶ Execute Query", type="primary"):
        _execute(api, state, database, collection, query, operation)

    st.markdown("#### Results")
    if state.query_error:
        st.error(f"Error: {state.query_error}")
    elif state.query_result is not None:
        st.code(state.query_result, language="json")
    else:
        st.markdown("<p class='no-data'>Run a query to see results</p>", unsafe_allow_html=True)
