"""
Browse tab: paginated documents of the selected collection.

Features:
- JSON cards or flattened table display
- Edit / Duplicate / Delete per document, Add Document
- Page size selection and Previous/Next pagination
"""

import streamlit as st

from utils.api import APIClient, error_message, is_success
from utils.formatters import (
    DEFAULT_NEW_DOCUMENT,
    document_id,
    documents_to_dataframe,
    format_json,
    parse_document_text,
    strip_identifier,
)
from utils.state import PAGE_SIZE_OPTIONS, ConsoleState


# ==================== Mutations ====================


def _save_document(api: APIClient, state: ConsoleState, doc_id: str, text: str):
    """Replace a document; the dialog stays open on failure."""
    try:
        document = parse_document_text(text)
    except ValueError as e:
        state.notify_error(f"Failed to save document: {e}")
        st.error(str(e))
        return

    resp = api.update_document(state.current_database, state.current_collection, doc_id, document)
    if not is_success(resp):
        message = error_message(resp)
        state.notify_error(f"Failed to save document: {message}")
        st.error(message)
        return

    state.notify("Document updated successfully")
    st.rerun()


def _insert_document(api: APIClient, state: ConsoleState, text: str):
    """Insert a document; the dialog stays open on failure."""
    try:
        document = parse_document_text(text)
    except ValueError as e:
        state.notify_error(f"Failed to add document: {e}")
        st.error(str(e))
        return

    resp = api.insert_document(state.current_database, state.current_collection, document)
    if not is_success(resp):
        message = error_message(resp)
        state.notify_error(f"Failed to add document: {message}")
        st.error(message)
        return

    state.notify("Document added successfully")
    st.rerun()


def _delete_document(api: APIClient, state: ConsoleState, doc_id: str):
    resp = api.delete_document(state.current_database, state.current_collection, doc_id)
    state.cancel_delete()
    if not is_success(resp):
        message = error_message(resp)
        state.notify_error(f"Failed to delete document: {message}")
        st.error(message)
        return

    state.notify("Document deleted successfully")
    st.rerun()


# ==================== Dialogs ====================


@st.dialog("Edit Document", width="large")
def _edit_dialog(api: APIClient, state: ConsoleState, doc_id: str, current_json: str):
    text = st.text_area("Document (JSON)", value=current_json, height=360, key=f"edit_json_{doc_id}")
    col_cancel, col_save = st.columns(2)
    with col_cancel:
        if st.button("Cancel", key="edit_cancel", use_container_width=True):
            st.rerun()
    with col_save:
        if st.button("Save Changes", type="primary", use_container_width=True):
            _save_document(api, state, doc_id, text)


@st.dialog("Add New Document", width="large")
def _insert_dialog(api: APIClient, state: ConsoleState, prefill: dict):
    text = st.text_area("Document (JSON)", value=format_json(prefill), height=360, key="insert_json")
    col_cancel, col_add = st.columns(2)
    with col_cancel:
        if st.button("Cancel", key="insert_cancel", use_container_width=True):
            st.rerun()
    with col_add:
        if st.button("Add Document", type="primary", use_container_width=True):
            _insert_document(api, state, text)


# ==================== Rendering ====================


def _render_document(api: APIClient, state: ConsoleState, doc: dict, index: int):
    doc_id = document_id(doc)
    doc_json = format_json(doc)

    with st.container(border=True):
        col_edit, col_copy, col_delete, _ = st.columns([1, 1, 1, 4])
        with col_edit:
            if st.button("✏️ Edit", key=f"edit_{index}_{doc_id}", disabled=doc_id is None):
                _edit_dialog(api, state, doc_id, doc_json)
        with col_copy:
            if st.button("📋 Copy", key=f"copy_{index}_{doc_id}"):
                _insert_dialog(api, state, strip_identifier(doc))
        with col_delete:
            if st.button("🗑️ Delete", key=f"delete_{index}_{doc_id}", disabled=doc_id is None):
                state.request_delete(doc_id)
                st.rerun()

        if doc_id is not None and state.pending_delete == doc_id:
            st.warning("Are you sure you want to delete this document? This action cannot be undone.")
            col_confirm, col_cancel, _ = st.columns([1, 1, 4])
            with col_confirm:
                if st.button("Delete", key=f"confirm_delete_{index}", type="primary"):
                    _delete_document(api, state, doc_id)
            with col_cancel:
                if st.button("Cancel", key=f"cancel_delete_{index}"):
                    state.cancel_delete()
                    st.rerun()

        st.code(doc_json, language="json")


def _render_pagination(state: ConsoleState):
    view = state.pagination()
    if not view.visible:
        return

    col_prev, col_info, col_next = st.columns([1, 2, 1])
    with col_prev:
        if st.button("← Previous", disabled=view.prev_disabled, use_container_width=True):
            state.previous_page()
            st.rerun()
    with col_info:
        st.markdown(f"<p style='text-align: center; margin-top: 8px;'>{view.label}</p>", unsafe_allow_html=True)
    with col_next:
        if st.button("Next →", disabled=view.next_disabled, use_container_width=True):
            state.next_page()
            st.rerun()


def _on_limit_change(state: ConsoleState):
    state.change_limit(st.session_state["limit_select"])


def render(api: APIClient, state: ConsoleState):
    """Render the Browse tab."""
    if not state.is_connected:
        st.info("Connect to MongoDB to browse documents.")
        return
    if not state.has_collection:
        st.info("Select a collection in the database tree.")
        return

    st.markdown(
        f"<p class='current-path'><strong>{state.current_database}</strong> → "
        f"<strong>{state.current_collection}</strong></p>",
        unsafe_allow_html=True,
    )

    col_refresh, col_mode, col_spacer, col_limit = st.columns([1, 2, 2, 1])
    with col_refresh:
        if st.button("🔄 Refresh", use_container_width=True):
            st.rerun()
    with col_mode:
        mode = st.radio(
            "Display",
            ["json", "table"],
            index=0 if state.display_mode == "json" else 1,
            format_func=lambda m: "JSON" if m == "json" else "Table",
            horizontal=True,
            label_visibility="collapsed",
        )
        state.display_mode = mode
    with col_limit:
        st.selectbox(
            "Per page",
            PAGE_SIZE_OPTIONS,
            index=PAGE_SIZE_OPTIONS.index(state.limit) if state.limit in PAGE_SIZE_OPTIONS else 1,
            key="limit_select",
            on_change=_on_limit_change,
            args=(state,),
            label_visibility="collapsed",
        )

    with st.spinner("Loading documents..."):
        resp = api.list_documents(
            state.current_database,
            state.current_collection,
            page=state.page,
            limit=state.limit,
        )

    if not is_success(resp):
        st.error(f"Error loading documents: {error_message(resp)}")
        return

    data = resp.get("data") or {}
    documents = data.get("documents") or []
    state.page_loaded(
        data.get("page", state.page),
        data.get("totalPages", 0),
        data.get("totalCount", 0),
    )

    if not documents:
        st.markdown("<p class='no-data'>No documents found</p>", unsafe_allow_html=True)
        if st.button("Add First Document", type="primary"):
            _insert_dialog(api, state, DEFAULT_NEW_DOCUMENT)
        _render_pagination(state)
        return

    if st.button("+ Add Document", type="primary"):
        _insert_dialog(api, state, DEFAULT_NEW_DOCUMENT)

    if state.display_mode == "table":
        st.dataframe(documents_to_dataframe(documents), use_container_width=True, hide_index=True)
    else:
        for index, doc in enumerate(documents):
            _render_document(api, state, doc, index)

    _render_pagination(state)
