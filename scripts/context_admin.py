"""
Operator tool:
Inspect or remove the persisted document context without starting the app.
"""
import argparse

from settings import load_settings
from storage.context_store import ContextStore
from storage.kv_store import KeyValueStore


def show_context(store):
    content, names = store.load()

    if not content and not names:
        print("No document context stored.")
        return

    print("Documents:", ", ".join(names) if names else "(none)")
    print("Content length:", len(content or ""))


def clear_context(store):
    store.clear()
    print("✅ Document context removed.")


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=["show", "clear"])
    parser.add_argument("--db", help="sqlite file (defaults to CHATBOT_DB_PATH)")
    args = parser.parse_args(argv)

    db_path = args.db or load_settings().db_path
    store = ContextStore(KeyValueStore(db_path))

    if args.command == "show":
        show_context(store)
    else:
        clear_context(store)


if __name__ == "__main__":
    main()
