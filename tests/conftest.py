import pytest

from chat.engine import ChatEngine
from session.errors import SessionInitializationError
from storage.context_store import ContextStore
from storage.kv_store import KeyValueStore

ADMIN = "admin@x.com"


class FakeChat:
    def __init__(self, number):
        self.number = number


class FakeTransport:
    """Stands in for GeminiTransport; records every outbound call."""

    def __init__(self):
        self.calls = []
        self.replies = []
        self.fail_with = None
        self.fail_start = False
        self.chats_started = 0
        self.on_send = None
        self.closed = False

    def start_chat(self):
        if self.fail_start:
            raise SessionInitializationError("Could not start the chat session.")
        self.chats_started += 1
        return FakeChat(self.chats_started)

    def send_message(self, chat, user_text, context=None):
        self.calls.append((chat, user_text, context))
        if self.on_send:
            self.on_send()
        if self.fail_with is not None:
            raise self.fail_with
        if self.replies:
            return self.replies.pop(0)
        return f"reply to {user_text}"

    def close(self):
        self.closed = True


@pytest.fixture
def kv(tmp_path):
    return KeyValueStore(tmp_path / "chatbot.db")


@pytest.fixture
def store(kv):
    return ContextStore(kv)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def make_engine(store, transport):
    def _make(start=True):
        engine = ChatEngine(store=store, transport=transport, admin_email=ADMIN)
        if start:
            engine.start()
        return engine
    return _make


@pytest.fixture
def engine(make_engine):
    return make_engine()
