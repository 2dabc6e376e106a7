import pytest

from session.errors import ContextValidationError
from storage.context_store import DocumentContext

ADMIN = "admin@x.com"


def notices(engine):
    return [m for m in engine.state.messages if m.is_context_notification]


def test_apply_unauthorized_mutates_silently(engine, store):
    engine.apply_context("doc text", ["a.pdf", "b.pdf"])

    assert engine.state.document == DocumentContext("doc text", ("a.pdf", "b.pdf"))
    assert store.load() == ("doc text", ["a.pdf", "b.pdf"])
    assert notices(engine) == []


def test_apply_authorized_appends_one_notice(engine):
    engine.login(ADMIN)
    before = len(engine.state.messages)

    engine.apply_context("doc text", ["a.pdf", "b.pdf"])

    assert len(engine.state.messages) == before + 1
    notice = engine.state.messages[-1]
    assert notice.is_context_notification
    assert '"a.pdf, b.pdf"' in notice.text


def test_clear_unauthorized_mutates_silently(engine, store):
    engine.apply_context("doc text", ["a.pdf"])
    engine.clear_context()

    assert not engine.state.document.is_active
    assert store.load() == (None, [])
    assert notices(engine) == []


def test_clear_authorized_appends_one_notice(engine):
    engine.apply_context("doc text", ["a.pdf"])
    engine.login(ADMIN)
    before = len(engine.state.messages)

    engine.clear_context()

    assert len(engine.state.messages) == before + 1
    assert engine.state.messages[-1].is_context_notification


def test_clear_twice_notifies_once(engine, store):
    engine.login(ADMIN)
    engine.apply_context("doc text", ["a.pdf"])
    engine.clear_context()
    after_first = len(engine.state.messages)

    engine.clear_context()

    assert len(engine.state.messages) == after_first
    assert engine.state.document.content is None
    assert store.load() == (None, [])


def test_clear_keeps_session(engine):
    chat = engine.state.chat_session
    engine.apply_context("doc text", ["a.pdf"])
    engine.clear_context()

    assert engine.state.chat_session is chat


@pytest.mark.parametrize("content, names", [
    ("", ["a.pdf"]),
    ("   ", ["a.pdf"]),
    ("doc text", []),
    ("doc text", None),
    ("doc text", [""]),
    ("doc text", "a.pdf"),
    ("doc text", {"a.pdf": 1}),
    (None, ["a.pdf"]),
])
def test_apply_rejects_incomplete_context(engine, store, content, names):
    with pytest.raises(ContextValidationError):
        engine.apply_context(content, names)

    assert not engine.state.document.is_active
    assert store.load() == (None, [])


def test_failed_save_leaves_memory_unchanged(engine, store, monkeypatch):
    import sqlite3

    engine.apply_context("old", ["old.pdf"])

    def broken_save(content, names):
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(store, "save", broken_save)

    with pytest.raises(sqlite3.OperationalError):
        engine.apply_context("new", ["new.pdf"])
    assert engine.state.document == DocumentContext("old", ("old.pdf",))
