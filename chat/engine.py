# chat/engine.py

import logging

from chat.context_handlers import ContextHandlers
from chat.controller import ConversationController
from session.access_gate import AccessGate
from session.context import ChatState
from session.gemini_transport import GeminiTransport
from session.session_manager import SessionManager
from storage.context_store import ContextStore, DocumentContext
from storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


class ChatEngine:
    """
    Conversation & context engine.

    Owns the application state and wires the components around it.
    Authorization changes are handled synchronously here: the session is
    recreated and the log reseeded only when the authorization state flips.
    """

    def __init__(self, *, store, transport, admin_email):
        self.state = ChatState()
        self.store = store
        self.transport = transport
        self.gate = AccessGate(admin_email)
        self.sessions = SessionManager(self.state, transport)
        self.controller = ConversationController(self.state, transport)
        self.context = ContextHandlers(self.state, store, self.gate)

    @classmethod
    def from_settings(cls, settings):
        return cls(
            store=ContextStore(KeyValueStore(settings.db_path)),
            transport=GeminiTransport(settings),
            admin_email=settings.admin_email,
        )

    # -------------------------------------------------
    # Lifecycle
    # -------------------------------------------------

    def start(self):
        content, names = self.store.load()
        self.state.document = DocumentContext.from_stored(content, names)
        if self.state.document.is_active:
            logger.info("Restored document context: %s", list(self.state.document.names))

        return self.sessions.start(authorized=self.gate.is_authorized())

    def retry_session(self):
        return self.sessions.start(authorized=self.gate.is_authorized())

    def shutdown(self):
        # Context stays in the store
        self.sessions.release()
        self.transport.close()

    # -------------------------------------------------
    # Access gate
    # -------------------------------------------------

    def login(self, candidate):
        was_authorized = self.gate.is_authorized()
        ok = self.gate.authorize(candidate)

        if ok and not was_authorized:
            self._on_authorization_changed()
        return ok

    def logout(self):
        was_authorized = self.gate.is_authorized()
        self.gate.deauthorize()

        if was_authorized:
            self._on_authorization_changed()

    def _on_authorization_changed(self):
        # New session on every privilege change; the log restarts with it
        self.sessions.start(authorized=self.gate.is_authorized())

    # -------------------------------------------------
    # Conversation + context
    # -------------------------------------------------

    def submit(self, input_text):
        return self.controller.submit(input_text)

    def apply_context(self, content, names):
        self.context.apply_context(content, names)

    def clear_context(self):
        self.context.clear_context()

    # -------------------------------------------------
    # View
    # -------------------------------------------------

    def view(self):
        authorized = self.gate.is_authorized()
        view = self.state.snapshot()
        view["auth"] = {
            "authorized": authorized,
            "error": self.gate.error,
        }
        # Context banner is admin-only
        view["context"] = {
            "names": list(self.state.document.names) if authorized else [],
        }
        return view
