"""
UI state model of the console.

All state the views render from lives in one ConsoleState object kept in
st.session_state. Transitions are methods on the model; views call them and
rerun, they never mutate fields directly. Nothing here imports streamlit so
the model can be tested on its own.
"""
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

DEFAULT_PAGE_SIZE = 20
PAGE_SIZE_OPTIONS = [10, 20, 50, 100]
NOTIFICATION_SECONDS = 5.0

TAB_BROWSE = "Browse"
TAB_QUERY = "Query"


class ConnectionStatus(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


@dataclass
class Notification:
    """Transient success/error message."""
    message: str
    kind: str  # "success" or "error"
    created_at: float

    def is_expired(self, now: float, duration: float = NOTIFICATION_SECONDS) -> bool:
        return now - self.created_at >= duration


@dataclass
class PaginationView:
    """What the pagination bar shows for the current page."""
    visible: bool
    label: str = ""
    prev_disabled: bool = True
    next_disabled: bool = True


@dataclass
class ConsoleState:
    """Everything the console UI renders from."""

    status: ConnectionStatus = ConnectionStatus.DISCONNECTED
    connection_error: Optional[str] = None
    default_database: Optional[str] = None
    databases: list[dict] = field(default_factory=list)

    # Database tree
    expanded_databases: set[str] = field(default_factory=set)
    collections_cache: dict[str, list[dict]] = field(default_factory=dict)
    collection_errors: dict[str, str] = field(default_factory=dict)

    # Browsing
    active_tab: str = TAB_BROWSE
    current_database: Optional[str] = None
    current_collection: Optional[str] = None
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    total_pages: int = 0
    total_count: int = 0
    display_mode: str = "json"  # "json" or "table"
    pending_delete: Optional[str] = None

    # Query console
    query_result: Optional[str] = None
    query_error: Optional[str] = None

    notification: Optional[Notification] = None

    # ==================== Connection ====================

    @property
    def is_connected(self) -> bool:
        return self.status is ConnectionStatus.CONNECTED

    def start_connecting(self) -> None:
        self.status = ConnectionStatus.CONNECTING
        self.connection_error = None

    def connection_succeeded(self, databases: list[dict], default_database: Optional[str] = None) -> None:
        """Enter Connected with a fresh database list; anything browsed before is dropped."""
        self.status = ConnectionStatus.CONNECTED
        self.connection_error = None
        self.default_database = default_database or None
        self.databases = list(databases)
        self.expanded_databases = set()
        self.collections_cache = {}
        self.collection_errors = {}
        self.current_database = None
        self.current_collection = None
        self.page = 1
        self.total_pages = 0
        self.total_count = 0
        self.pending_delete = None
        self.query_result = None
        self.query_error = None

    def connection_failed(self, error: str) -> None:
        self.status = ConnectionStatus.DISCONNECTED
        self.connection_error = error
        self.databases = []
        self.expanded_databases = set()
        self.collections_cache = {}
        self.collection_errors = {}
        self.current_database = None
        self.current_collection = None

    # ==================== Database tree ====================

    def is_expanded(self, db_name: str) -> bool:
        return db_name in self.expanded_databases

    def toggle_database(self, db_name: str) -> bool:
        """
        Expand or collapse a database in the tree.

        Returns:
            True when the database was expanded and its collections have not
            been loaded yet, i.e. the caller has to fetch them.
        """
        if db_name in self.expanded_databases:
            self.expanded_databases.discard(db_name)
            return False
        self.expanded_databases.add(db_name)
        return db_name not in self.collections_cache

    def cache_collections(self, db_name: str, collections: list[dict]) -> None:
        self.collections_cache[db_name] = list(collections)
        self.collection_errors.pop(db_name, None)

    def collections_failed(self, db_name: str, error: str) -> None:
        # Not cached: the next expansion tries again
        self.collection_errors[db_name] = error

    def collection_names(self, db_name: str) -> list[str]:
        return [c.get("name", "") for c in self.collections_cache.get(db_name, [])]

    # ==================== Browsing ====================

    @property
    def has_collection(self) -> bool:
        return bool(self.current_database and self.current_collection)

    def select_collection(self, db_name: str, collection_name: str) -> bool:
        """Select a collection, back to page 1 on the Browse tab. Ignored unless connected."""
        if not self.is_connected:
            return False
        self.current_database = db_name
        self.current_collection = collection_name
        self.page = 1
        self.total_pages = 0
        self.total_count = 0
        self.pending_delete = None
        self.active_tab = TAB_BROWSE
        return True

    def change_limit(self, limit: int) -> None:
        self.limit = max(1, int(limit))
        self.page = 1

    def next_page(self) -> None:
        if self.page < self.total_pages:
            self.page += 1

    def previous_page(self) -> None:
        if self.page > 1:
            self.page -= 1

    def page_loaded(self, page: int, total_pages: int, total_count: int) -> None:
        self.page = page
        self.total_pages = total_pages
        self.total_count = total_count

    def pagination(self) -> PaginationView:
        if self.total_pages <= 1:
            return PaginationView(visible=False)
        return PaginationView(
            visible=True,
            label=f"Page {self.page} of {self.total_pages} ({self.total_count} total)",
            prev_disabled=self.page <= 1,
            next_disabled=self.page >= self.total_pages,
        )

    def request_delete(self, doc_id: str) -> None:
        self.pending_delete = doc_id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    # ==================== Query console ====================

    def query_succeeded(self, result_text: str) -> None:
        self.query_result = result_text
        self.query_error = None

    def query_failed(self, error: str) -> None:
        self.query_result = None
        self.query_error = error

    # ==================== Notifications ====================

    def notify(self, message: str, kind: str = "success", now: Optional[float] = None) -> None:
        """Show a notification, replacing the one currently shown."""
        self.notification = Notification(
            message=message,
            kind=kind,
            created_at=time.time() if now is None else now,
        )

    def notify_error(self, message: str, now: Optional[float] = None) -> None:
        self.notify(message, kind="error", now=now)

    def active_notification(self, now: Optional[float] = None) -> Optional[Notification]:
        """The notification to show right now; expired ones are dropped."""
        if self.notification is None:
            return None
        if self.notification.is_expired(time.time() if now is None else now):
            self.notification = None
        return self.notification
