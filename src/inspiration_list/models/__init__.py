from .inspiration import (
    EnhancedContent,
    IndexEntry,
    InspirationCreate,
    InspirationPage,
    InspirationRecord,
    InspirationSummary,
    Pagination,
    RecordMetadata,
)

__all__ = [
    "EnhancedContent",
    "IndexEntry",
    "InspirationCreate",
    "InspirationPage",
    "InspirationRecord",
    "InspirationSummary",
    "Pagination",
    "RecordMetadata",
]
