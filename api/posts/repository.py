"""
Post persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_COLUMNS = "id, content, image_url, user_id, created_at"


async def list_posts() -> list[dict]:
    # id breaks ties between posts created in the same transaction tick.
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM posts
        ORDER BY created_at DESC, id DESC
        """
    )


async def create_post(
    *,
    content: str,
    image_url: str | None = None,
    user_id: int | None = None,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO posts (content, image_url, user_id)
        VALUES ($1, $2, $3)
        RETURNING {_COLUMNS}
        """,
        content,
        image_url,
        user_id,
    )
    if row is None:
        raise RuntimeError("Failed to create post.")
    return row


async def delete_post(post_id: int) -> dict | None:
    """
    Delete a post by id.

    Returns the deleted row, or None when no post has that id.
    """
    return await db.fetch_one(
        f"""
        DELETE FROM posts
        WHERE id = $1
        RETURNING {_COLUMNS}
        """,
        post_id,
    )
