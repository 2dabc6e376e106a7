import logging

from chat.messages import Message
from chat.notices import GREETING, context_restored
from session.errors import SessionInitializationError

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Owns the lifecycle of the one active remote-model session.

    A new session is created at startup and on every authorization change.
    Creating one resets the conversation log to the seed messages; the
    document context is left untouched.
    """

    def __init__(self, state, transport):
        self.state = state
        self.transport = transport

    def initialize_session(self, authorized: bool):
        """
        Create a fresh session handle.
        Raises SessionInitializationError when the transport cannot.
        """
        chat = self.transport.start_chat()
        logger.info("Chat session created (authorized=%s)", authorized)
        return chat

    def seed_messages(self, authorized: bool):
        messages = [Message.from_bot(GREETING)]

        # Unauthorized viewers must not learn that a context is active
        document = self.state.document
        if authorized and document.is_active:
            messages.append(Message.context_notice(context_restored(document.names)))

        return messages

    def start(self, authorized: bool) -> bool:
        """
        Replace the active session and reseed the log.
        On failure no session is active and the error banner is set.
        """
        self.release()

        try:
            chat = self.initialize_session(authorized)
        except SessionInitializationError as e:
            logger.error("Could not initialize chat session: %s", e)
            self.state.error = str(e)
            return False

        with self.state.lock:
            self.state.chat_session = chat
            self.state.reset_messages(self.seed_messages(authorized))
            self.state.error = None
        return True

    def release(self):
        with self.state.lock:
            self.state.chat_session = None
