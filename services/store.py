"""
services/store.py
────────────────────────────────────────────────────────────────────────
* Process-local, session-scoped store of `SessionState`
* FastAPI dependency used by the routers

Nothing is written to disk; state lives as long as the process.
"""
from __future__ import annotations

import logging

from core.session import SessionState

_LOG = logging.getLogger(__name__)

DEFAULT_SESSION = "default"


class SessionStore:
    def __init__(self) -> None:
        self._states: dict[str, SessionState] = {}

    def get(self, session_id: str = DEFAULT_SESSION) -> SessionState:
        return self._states.get(session_id, SessionState())

    def put(self, session_id: str, state: SessionState) -> SessionState:
        self._states[session_id] = state
        return state

    def clear(self) -> None:
        self._states.clear()


_STORE = SessionStore()


def get_store() -> SessionStore:
    return _STORE
