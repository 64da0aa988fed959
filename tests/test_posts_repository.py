from datetime import datetime, timezone

import pytest

from core import db
from posts import repository


class RecordingDb:
    def __init__(self, one=None, many=None):
        self.one = one
        self.many = many or []
        self.calls = []

    async def fetch_one(self, sql, *args):
        self.calls.append((" ".join(sql.split()), args))
        return self.one

    async def fetch_all(self, sql, *args):
        self.calls.append((" ".join(sql.split()), args))
        return self.many


@pytest.fixture
def recorder(monkeypatch):
    rec = RecordingDb()
    monkeypatch.setattr(db, "fetch_one", rec.fetch_one)
    monkeypatch.setattr(db, "fetch_all", rec.fetch_all)
    return rec


@pytest.mark.asyncio
async def test_list_posts_orders_newest_first(recorder):
    await repository.list_posts()
    sql, args = recorder.calls[0]
    assert sql.startswith("SELECT id, content, image_url, user_id, created_at FROM posts")
    assert sql.endswith("ORDER BY created_at DESC, id DESC")
    assert args == ()


@pytest.mark.asyncio
async def test_create_post_inserts_and_returns_row(recorder):
    recorder.one = {
        "id": 1,
        "content": "hello",
        "image_url": None,
        "user_id": None,
        "created_at": datetime.now(timezone.utc),
    }
    row = await repository.create_post(content="hello")
    sql, args = recorder.calls[0]
    assert sql.startswith("INSERT INTO posts (content, image_url, user_id) VALUES ($1, $2, $3)")
    assert "RETURNING id, content, image_url, user_id, created_at" in sql
    assert args == ("hello", None, None)
    assert row["id"] == 1


@pytest.mark.asyncio
async def test_create_post_without_returned_row_raises(recorder):
    with pytest.raises(RuntimeError):
        await repository.create_post(content="hello")


@pytest.mark.asyncio
async def test_delete_post_missing_returns_none(recorder):
    assert await repository.delete_post(3) is None
    sql, args = recorder.calls[0]
    assert sql.startswith("DELETE FROM posts WHERE id = $1 RETURNING")
    assert args == (3,)
