"""FastAPI dependencies resolving services from app.state"""

from fastapi import Request

from inspiration_list.core import RecordStore


def get_record_store(request: Request) -> RecordStore:
    return request.app.state.record_store
