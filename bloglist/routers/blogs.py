"""Blog endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response

from bloglist.models.blog import BlogRecord, BlogStats
from bloglist.services.list_helper import blog_stats
from bloglist.services.storage import RecordStore, get_blog_store
from bloglist.services.validator import validate_for_create, validate_for_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blogs", tags=["blogs"])


@router.get("", response_model=list[BlogRecord])
async def list_blogs(store: RecordStore = Depends(get_blog_store)):
    """Get every blog in insertion order."""
    return [BlogRecord(**doc) for doc in await store.find_all()]


@router.get("/stats", response_model=BlogStats)
async def get_blog_stats(store: RecordStore = Depends(get_blog_store)):
    """Total likes and the most liked blog over the whole collection."""
    blogs = [BlogRecord(**doc) for doc in await store.find_all()]
    return blog_stats(blogs)


@router.get("/{blog_id}", response_model=BlogRecord)
async def get_blog(blog_id: str, store: RecordStore = Depends(get_blog_store)):
    """Get a single blog by id."""
    return BlogRecord(**await store.find_by_id(blog_id))


@router.post("", response_model=BlogRecord)
async def create_blog(
    payload: dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_blog_store),
):
    """Create a blog. ``title`` and ``url`` are required, ``likes`` defaults to 0."""
    draft = validate_for_create(payload)
    stored = BlogRecord(**await store.insert(draft.model_dump()))
    logger.info("Created blog %s: %s", stored.id, stored.title[:50])
    return stored


@router.put("/{blog_id}", response_model=BlogRecord)
async def update_blog(
    blog_id: str,
    payload: dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_blog_store),
):
    """Apply a partial update, typically ``{"likes": n}``."""
    patch = validate_for_update(payload)
    updated = BlogRecord(**await store.update_partial(blog_id, patch))
    logger.info("Updated blog %s: %s", blog_id, ", ".join(sorted(patch)) or "no fields")
    return updated


@router.delete("/{blog_id}", status_code=204)
async def delete_blog(blog_id: str, store: RecordStore = Depends(get_blog_store)):
    """Delete a blog by id."""
    await store.delete_by_id(blog_id)
    logger.info("Deleted blog %s", blog_id)
    return Response(status_code=204)
