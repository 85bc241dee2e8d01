"""Health check endpoint"""

import logging

from fastapi import APIRouter, Depends

from inspiration_list import __version__
from inspiration_list.api.dependencies import get_record_store
from inspiration_list.core import RecordStore
from inspiration_list.core.store import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(store: RecordStore = Depends(get_record_store)):
    """Liveness payload with the active providers"""
    return {
        "status": "healthy",
        "timestamp": utc_now_iso(),
        "version": __version__,
        "providers": {
            "kv": store.get_provider_name(),
            "enrichment": store.enricher.get_name(),
        },
    }
