"""
Session storage abstraction and an in-memory implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging
import threading
import uuid

from ..constants import SESSION_ID
from .web import WebContext


logger = logging.getLogger(__name__)


class SessionStore(ABC):
    """
    Session backing store, addressed through the web context.
    """

    @abstractmethod
    def get_session_id(self, context: WebContext, create_session: bool) -> Optional[str]:
        """Get the current session identifier, creating a session if asked to."""
        pass

    @abstractmethod
    def get(self, context: WebContext, key: str) -> Any:
        pass

    @abstractmethod
    def set(self, context: WebContext, key: str, value: Any) -> None:
        """Store a value; a None value removes the key."""
        pass

    @abstractmethod
    def destroy_session(self, context: WebContext) -> bool:
        pass

    @abstractmethod
    def renew_session(self, context: WebContext) -> bool:
        """Move the session data under a fresh identifier."""
        pass


class MemorySessionStore(SessionStore):
    """
    In-memory session store.

    The session identifier travels in a request attribute of the web
    context. All data is lost when the process terminates.
    """

    def __init__(self):
        # Session storage: session_id -> values
        self._sessions: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.RLock()

    def get_session_id(self, context: WebContext, create_session: bool) -> Optional[str]:
        with self._lock:
            session_id = context.get_request_attribute(SESSION_ID)
            if session_id is not None and session_id in self._sessions:
                return session_id
            if not create_session:
                return None
            session_id = str(uuid.uuid4())
            self._sessions[session_id] = {}
            context.set_request_attribute(SESSION_ID, session_id)
            logger.debug("Created session: %s", session_id)
            return session_id

    def get(self, context: WebContext, key: str) -> Any:
        with self._lock:
            session_id = self.get_session_id(context, False)
            if session_id is None:
                return None
            return self._sessions[session_id].get(key)

    def set(self, context: WebContext, key: str, value: Any) -> None:
        with self._lock:
            if value is None:
                session_id = self.get_session_id(context, False)
                if session_id is not None:
                    self._sessions[session_id].pop(key, None)
                return
            session_id = self.get_session_id(context, True)
            self._sessions[session_id][key] = value

    def destroy_session(self, context: WebContext) -> bool:
        with self._lock:
            session_id = self.get_session_id(context, False)
            if session_id is None:
                return False
            del self._sessions[session_id]
            context.set_request_attribute(SESSION_ID, None)
            return True

    def renew_session(self, context: WebContext) -> bool:
        with self._lock:
            old_id = self.get_session_id(context, False)
            if old_id is None:
                return False
            data = self._sessions.pop(old_id)
            new_id = str(uuid.uuid4())
            self._sessions[new_id] = data
            context.set_request_attribute(SESSION_ID, new_id)
            logger.debug("Renewed session: %s -> %s", old_id, new_id)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
