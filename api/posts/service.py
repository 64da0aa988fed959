"""
Post business logic.

Scope:
- request validation that the schema alone cannot express
  (blank content, path id parsing)
- turning persistence outcomes into typed errors the router maps to HTTP
"""

from __future__ import annotations

import logging

from . import repository, schemas

logger = logging.getLogger(__name__)

EMPTY_CONTENT = "投稿の中身が空なので入力してください"
INVALID_ID = "無効なIDです"
NOT_FOUND = "投稿が見つかりません"
LIST_FAILED = "投稿の取得に失敗しました"
CREATE_FAILED = "投稿の作成に失敗しました"
DELETE_FAILED = "投稿の削除に失敗しました"
DELETED = "投稿を削除しました"


class PostError(Exception):
    """
    Base class for failures the API reports to the caller.

    `message` is user-facing; anything sensitive stays in the log.
    """

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PostValidationError(PostError):
    status_code = 400


class PostNotFoundError(PostError):
    status_code = 404

    def __init__(self, post_id: int) -> None:
        super().__init__(NOT_FOUND)
        self.post_id = post_id


class PostStorageError(PostError):
    status_code = 500


def _to_post_response(row: dict) -> schemas.PostResponse:
    return schemas.PostResponse(
        id=int(row["id"]),
        content=str(row["content"]),
        image_url=row["image_url"],
        user_id=row["user_id"],
        created_at=row["created_at"],
    )


def parse_post_id(raw: str) -> int:
    post_id = schemas.parse_int4(raw)
    if post_id is None:
        raise PostValidationError(INVALID_ID)
    return post_id


async def list_posts() -> list[schemas.PostResponse]:
    try:
        rows = await repository.list_posts()
    except Exception as exc:
        logger.exception("list_posts_failed")
        raise PostStorageError(LIST_FAILED) from exc
    return [_to_post_response(row) for row in rows]


async def create_post(payload: schemas.CreatePostRequest) -> schemas.PostResponse:
    content = (payload.content or "").strip()
    if not content:
        raise PostValidationError(EMPTY_CONTENT)

    try:
        row = await repository.create_post(
            content=content,
            image_url=payload.image_url or None,
            user_id=payload.user_id or None,
        )
    except Exception as exc:
        logger.exception("create_post_failed user_id=%s", payload.user_id)
        raise PostStorageError(CREATE_FAILED) from exc

    logger.info("post_created post_id=%s user_id=%s", row["id"], row["user_id"])
    return _to_post_response(row)


async def delete_post(raw_post_id: str) -> schemas.MessageResponse:
    post_id = parse_post_id(raw_post_id)

    try:
        row = await repository.delete_post(post_id)
    except Exception as exc:
        logger.exception("delete_post_failed post_id=%s", post_id)
        raise PostStorageError(DELETE_FAILED) from exc

    if row is None:
        raise PostNotFoundError(post_id)

    logger.info("post_deleted post_id=%s", post_id)
    return schemas.MessageResponse(message=DELETED)
