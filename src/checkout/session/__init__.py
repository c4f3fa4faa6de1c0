"""Session store registry (in-memory by default)."""

from checkout.session.store import InMemorySessionStore, SessionStore

_session_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    global _session_store
    if _session_store is None:
        _session_store = InMemorySessionStore()
    return _session_store


def set_session_store(store: SessionStore) -> None:
    global _session_store
    _session_store = store


def reset_session_store() -> None:
    global _session_store
    _session_store = None
