import threading

from storage.context_store import DocumentContext


class ChatState:
    """
    Application-scoped state.
    Owned by the engine and shared by reference with the session manager,
    the conversation controller and the context handlers.
    """

    def __init__(self):
        # Guards the log and the session handle; held for check-then-append
        self.lock = threading.RLock()

        # Conversation log of the active session (append-only)
        self.messages = []

        # Remote-model chat handle, None when no session could be created
        self.chat_session = None

        # Turn state machine: Idle (False) / Sending (True)
        self.is_loading = False

        # Main error banner: session init failures and turn failures
        self.error = None

        # Shared across sessions and users
        self.document = DocumentContext()

    def append(self, message):
        with self.lock:
            self.messages.append(message)

    def reset_messages(self, messages):
        # The log is replaced, never edited in place
        with self.lock:
            self.messages = list(messages)

    def snapshot(self):
        with self.lock:
            return {
                "messages": [m.to_dict() for m in self.messages],
                "is_loading": self.is_loading,
                "error": self.error,
                "has_session": self.chat_session is not None,
            }
