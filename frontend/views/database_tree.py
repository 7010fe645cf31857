"""
Database tree shown in the sidebar.

Collections of a database are fetched the first time it is expanded and kept
in the session state; collapsing and expanding again reuses them.
"""

import streamlit as st

from utils.api import APIClient, error_message, is_success
from utils.formatters import format_bytes
from utils.state import ConsoleState


def _load_collections(api: APIClient, state: ConsoleState, db_name: str):
	resp = api.list_collections(db_name)
	if is_success(resp):
		state.cache_collections(db_name, resp.get("data") or [])
	else:
		state.collections_failed(db_name, error_message(resp))


def _render_collections(state: ConsoleState, db_name: str):
	error = state.collection_errors.get(db_name)
	if error:
		st.error(f"Error: {error}")
		return

	collections = state.collections_cache.get(db_name, [])
	if not collections:
		st.markdown("<p class='no-data'>No collections</p>", unsafe_allow_html=True)
		return

	_, col_items = st.columns([1, 8])
	with col_items:
		for collection in collections:
			name = collection.get("name", "")
			icon = "👁️" if collection.get("type") == "view" else "📄"
			active = (state.current_database == db_name and state.current_collection == name)
			if st.button(
				f"{icon} {name}",
				key=f"col_{db_name}_{name}",
				type="primary" if active else "secondary",
				use_container_width=True,
			):
				state.select_collection(db_name, name)
				st.rerun()


def render(api: APIClient, state: ConsoleState):
	st.subheader("🗂️ Databases")

	if not state.is_connected:
		st.markdown("<p class='no-data'>Connect to MongoDB to see databases</p>", unsafe_allow_html=True)
		return

	if not state.databases:
		st.markdown("<p class='no-data'>No databases found</p>", unsafe_allow_html=True)
		return

	for db in state.databases:
		name = db.get("name", "")
		arrow = "▾" if state.is_expanded(name) else "▸"
		label = f"{arrow} 📁 {name} ({format_bytes(db.get('sizeOnDisk'))})"

		if st.button(label, key=f"db_{name}", use_container_width=True):
			if state.toggle_database(name):
				with st.spinner("Loading collections..."):
					_load_collections(api, state, name)
			st.rerun()

		if state.is_expanded(name):
			_render_collections(state, name)
