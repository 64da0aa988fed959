"""
Post API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from . import schemas, service

router = APIRouter(prefix="/api/posts")


def _http_error(exc: service.PostError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.get("", response_model=list[schemas.PostResponse])
async def list_posts() -> list[schemas.PostResponse]:
    """
    All posts, newest first.
    """
    try:
        return await service.list_posts()
    except service.PostError as exc:
        raise _http_error(exc) from exc


@router.post(
    "",
    response_model=schemas.PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
)
async def create_post(payload: schemas.CreatePostRequest) -> schemas.PostResponse:
    try:
        return await service.create_post(payload)
    except service.PostError as exc:
        raise _http_error(exc) from exc


@router.delete(
    "/{post_id}",
    response_model=schemas.MessageResponse,
    responses={
        400: {"model": schemas.ErrorResponse},
        404: {"model": schemas.ErrorResponse},
        500: {"model": schemas.ErrorResponse},
    },
)
async def delete_post(post_id: str) -> schemas.MessageResponse:
    # Parsed by the service so a bad id gets the same error body as other 400s.
    try:
        return await service.delete_post(post_id)
    except service.PostError as exc:
        raise _http_error(exc) from exc
