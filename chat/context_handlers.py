import logging

from chat.messages import Message
from chat.notices import CONTEXT_CLEARED, context_uploaded
from session.errors import ContextValidationError
from storage.context_store import DocumentContext

logger = logging.getLogger(__name__)


class ContextHandlers:
    """
    The only writers of the shared document context.

    Mutations apply for everyone; the notification about them is only
    appended to the log while the admin is authorized.
    """

    def __init__(self, state, store, gate):
        self.state = state
        self.store = store
        self.gate = gate

    def apply_context(self, content, names):
        if not isinstance(content, str) or not content.strip():
            raise ContextValidationError("Document content is empty.")
        if not isinstance(names, (list, tuple)) or not names:
            raise ContextValidationError("At least one document name is required.")
        if not all(isinstance(n, str) and n.strip() for n in names):
            raise ContextValidationError("Document names must be non-empty strings.")
        names = list(names)

        with self.state.lock:
            # Store first so memory never holds what storage rejected
            self.store.save(content, names)
            self.state.document = DocumentContext(content=content, names=tuple(names))
            logger.info("Document context applied: %s (%d chars)", names, len(content))

            if self.gate.is_authorized():
                self.state.append(Message.context_notice(context_uploaded(names)))

    def clear_context(self):
        with self.state.lock:
            was_active = self.state.document.is_active

            self.store.clear()
            self.state.document = DocumentContext()

            if not was_active:
                return

            logger.info("Document context cleared")
            if self.gate.is_authorized():
                self.state.append(Message.context_notice(CONTEXT_CLEARED))
