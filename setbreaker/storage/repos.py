# storage/repos.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from typing import Dict

from setbreaker.storage.db import Database


class AppStateRepo:
    def __init__(self, db: Database):
        self.db = db

    def get_all(self) -> Dict[str, str]:
        rows = self.db.conn.execute("SELECT key, value FROM app_state").fetchall()
        return {r["key"]: r["value"] for r in rows}

    def set_many(self, values: Dict[str, str]) -> None:
        self.db.conn.executemany(
            """
            INSERT INTO app_state(key, value) VALUES(?, ?)
            ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """,
            list(values.items()),
        )
        self.db.conn.commit()
