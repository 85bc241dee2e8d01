"""Inspiration CRUD endpoints"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Path, Query

from inspiration_list.api.dependencies import get_record_store
from inspiration_list.core import RecordStore
from inspiration_list.errors import InspirationError, InternalError, NotFoundError
from inspiration_list.models import InspirationCreate

logger = logging.getLogger(__name__)

router = APIRouter()

_ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]


@router.post("/inspirations", status_code=201)
async def create_inspiration(
    request: InspirationCreate,
    store: RecordStore = Depends(get_record_store),
):
    """
    Create an inspiration from transcribed speech

    The text is enriched (summary, details, suggestions, tags, category)
    before it is stored. Returns the full record.
    """
    try:
        record = await asyncio.to_thread(store.create, request.transcribed_text, request.audio_data)
    except InspirationError:
        raise
    except Exception as e:
        logger.error(f"Create failed: {e}", exc_info=True)
        raise InternalError("Failed to create inspiration") from e

    return record.to_json_dict()


@router.get("/inspirations")
async def list_inspirations(
    page: int = Query(1, description="1-based page number"),
    limit: int | None = Query(None, description="Page size, clamped to [1, 100]"),
    category: str | None = Query(None, description="Exact category, or 'all'"),
    search: str | None = Query(None, description="Case-insensitive substring over text, summary and tags"),
    store: RecordStore = Depends(get_record_store),
):
    """List inspiration summaries, newest first"""
    try:
        result = await asyncio.to_thread(store.list, page, limit, category, search)
    except InspirationError:
        raise
    except Exception as e:
        logger.error(f"List failed: {e}", exc_info=True)
        raise InternalError("Failed to list inspirations") from e

    return result.to_json_dict()


@router.get("/inspirations/{inspiration_id}")
async def get_inspiration(
    inspiration_id: str = Path(..., description="Inspiration ID"),
    store: RecordStore = Depends(get_record_store),
):
    try:
        record = await asyncio.to_thread(store.get, inspiration_id)
    except InspirationError:
        raise
    except Exception as e:
        logger.error(f"Get failed for {inspiration_id}: {e}", exc_info=True)
        raise InternalError("Failed to get inspiration") from e

    return record.to_json_dict()


@router.delete("/inspirations/{inspiration_id}")
async def delete_inspiration(
    inspiration_id: str = Path(..., description="Inspiration ID"),
    store: RecordStore = Depends(get_record_store),
):
    try:
        await asyncio.to_thread(store.delete, inspiration_id)
    except InspirationError:
        raise
    except Exception as e:
        logger.error(f"Delete failed for {inspiration_id}: {e}", exc_info=True)
        raise InternalError("Failed to delete inspiration") from e

    return {"success": True, "message": "Inspiration deleted successfully"}


# Must be included after every other /api router
unknown_router = APIRouter()


@unknown_router.api_route("/{path:path}", methods=_ANY_METHOD, include_in_schema=False)
async def unknown_endpoint(path: str):
    raise NotFoundError("API endpoint not found")
