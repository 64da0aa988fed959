from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from main import app
from posts import repository


class FakePostStore:
    """
    In-memory stand-in for the posts table.

    Ids and timestamps are assigned the way Postgres would: serial ids and a
    strictly increasing `created_at`.
    """

    def __init__(self):
        self.rows = {}
        self.next_id = 1
        self.clock = datetime(2026, 1, 1, tzinfo=timezone.utc)
        self.fail = False
        self.delete_calls = []

    def _check(self):
        if self.fail:
            raise ConnectionError("database unreachable at 10.0.0.5")

    def add(self, content, *, image_url=None, user_id=None, created_at=None):
        if created_at is None:
            self.clock += timedelta(seconds=1)
            created_at = self.clock
        row = {
            "id": self.next_id,
            "content": content,
            "image_url": image_url,
            "user_id": user_id,
            "created_at": created_at,
        }
        self.rows[row["id"]] = row
        self.next_id += 1
        return dict(row)

    async def list_posts(self):
        self._check()
        ordered = sorted(self.rows.values(), key=lambda r: (r["created_at"], r["id"]), reverse=True)
        return [dict(r) for r in ordered]

    async def create_post(self, *, content, image_url=None, user_id=None):
        self._check()
        return self.add(content, image_url=image_url, user_id=user_id)

    async def delete_post(self, post_id):
        self.delete_calls.append(post_id)
        self._check()
        row = self.rows.pop(post_id, None)
        return dict(row) if row is not None else None


@pytest.fixture
def store(monkeypatch):
    fake = FakePostStore()
    monkeypatch.setattr(repository, "list_posts", fake.list_posts)
    monkeypatch.setattr(repository, "create_post", fake.create_post)
    monkeypatch.setattr(repository, "delete_post", fake.delete_post)
    return fake


@pytest.fixture
def client(store):
    # No `with` block: the lifespan (and its real DB pool) is not started.
    return TestClient(app)
