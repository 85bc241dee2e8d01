"""Data models for inspiration records (stored and served as camelCase JSON)"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model: snake_case attributes, camelCase JSON"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class EnhancedContent(CamelModel):
    """AI (or fallback) enrichment of the original text"""
    summary: str
    details: str
    suggestions: list[str] = Field(default_factory=list, max_length=5)
    tags: list[str] = Field(default_factory=list, max_length=6)
    category: str


class RecordMetadata(CamelModel):
    """Derived facts about the original text"""
    word_count: int
    language: str
    sentiment: str = "neutral"


class InspirationRecord(CamelModel):
    """A persisted inspiration entry"""
    id: str
    original_text: str
    enhanced_content: EnhancedContent
    metadata: RecordMetadata
    created_at: str
    updated_at: str


class InspirationSummary(CamelModel):
    """List projection of a record"""
    id: str
    original_text: str = Field(..., description="Original text, cut to 100 characters")
    summary: str
    tags: list[str]
    category: str
    created_at: str


class IndexEntry(CamelModel):
    """Pointer kept in the listing index, newest first"""
    id: str
    created_at: str


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    has_next: bool
    has_prev: bool


class InspirationPage(CamelModel):
    """Response of a list call"""
    data: list[InspirationSummary]
    pagination: Pagination


class InspirationCreate(CamelModel):
    """Request model for creating an inspiration.

    Fields accept any JSON value; type checks happen in validate_input().
    """
    transcribed_text: Any = None
    audio_data: Any = None
