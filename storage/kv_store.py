# storage/kv_store.py

import sqlite3
from pathlib import Path


class KeyValueStore:
    """
    Durable key-value storage on a single sqlite `meta` table.
    """

    def __init__(self, db_path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.init_db()

    def get_conn(self):
        return sqlite3.connect(self.db_path)

    def init_db(self):
        conn = self.get_conn()
        cur = conn.cursor()

        cur.execute("""
        CREATE TABLE IF NOT EXISTS meta (
            key TEXT PRIMARY KEY,
            value TEXT
        )
        """)

        conn.commit()
        conn.close()

    # -------------------------------------------------
    # Read
    # -------------------------------------------------

    def get(self, key):
        conn = self.get_conn()
        cur = conn.cursor()

        cur.execute("SELECT value FROM meta WHERE key = ?", (key,))
        row = cur.fetchone()
        conn.close()

        return row[0] if row else None

    # -------------------------------------------------
    # Write
    # -------------------------------------------------

    def set(self, key, value):
        self.set_many({key: value})

    def remove(self, key):
        self.remove_many([key])

    def set_many(self, items: dict):
        """
        Write all items in one transaction: either every key is updated
        or none is.
        """
        conn = self.get_conn()
        try:
            cur = conn.cursor()
            for key, value in items.items():
                cur.execute("""
                    INSERT INTO meta (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                """, (key, value))
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    def remove_many(self, keys):
        conn = self.get_conn()
        try:
            cur = conn.cursor()
            cur.executemany("DELETE FROM meta WHERE key = ?", [(k,) for k in keys])
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()
