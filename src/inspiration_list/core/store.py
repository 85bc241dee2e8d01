"""Record store: create, list, get and delete inspirations over a key-value provider"""

import logging
import math
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError

from inspiration_list.config import Settings
from inspiration_list.enrichment import EnrichmentClient
from inspiration_list.errors import InternalError, NotFoundError, ServiceUnavailableError, ValidationError
from inspiration_list.models import (
    IndexEntry,
    InspirationPage,
    InspirationRecord,
    InspirationSummary,
    Pagination,
    RecordMetadata,
)
from inspiration_list.providers.base import KeyValueProvider
from inspiration_list.utils import count_words, detect_language, generate_id, normalize_whitespace, truncate
from inspiration_list.validation import inspiration_create_rules, validate_input

from .index import RECORD_KEY_PREFIX, RecordIndex, record_key

logger = logging.getLogger(__name__)

SUMMARY_TEXT_CHARS = 100
ALL_CATEGORIES = "all"


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-05-01T08:30:00.123Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_summary(record: InspirationRecord) -> InspirationSummary:
    return InspirationSummary(
        id=record.id,
        original_text=truncate(record.original_text, SUMMARY_TEXT_CHARS),
        summary=record.enhanced_content.summary,
        tags=record.enhanced_content.tags,
        category=record.enhanced_content.category,
        created_at=record.created_at,
    )


def matches_filters(record: InspirationRecord, category: str | None, search: str | None) -> bool:
    """Exact category match and case-insensitive substring search.

    ``search`` must already be lower-cased.
    """
    content = record.enhanced_content
    if category is not None and content.category != category:
        return False
    if search is None:
        return True

    haystacks = [record.original_text, content.summary, *content.tags]
    return any(search in value.lower() for value in haystacks)


def build_page(records: list[InspirationRecord], page: int, limit: int, total: int) -> InspirationPage:
    return InspirationPage(
        data=[to_summary(r) for r in records],
        pagination=Pagination(
            current_page=page,
            total_pages=math.ceil(total / limit),
            total_items=total,
            has_next=page * limit < total,
            has_prev=page > 1,
        ),
    )


class RecordStore:
    """CRUD and paginated listing of inspiration records.

    Records live under ``record:<id>``; listing goes through the capped
    index kept by RecordIndex. A store built with ``kv=None`` has no
    backend: list() returns an empty page and everything else raises
    ServiceUnavailableError.
    """

    def __init__(self, kv: KeyValueProvider | None, enricher: EnrichmentClient, settings: Settings):
        self.kv = kv
        self.enricher = enricher
        self.settings = settings
        self.index = RecordIndex(kv, settings.index_max_entries) if kv is not None else None
        self._create_rules = inspiration_create_rules(settings.max_text_length)

    @property
    def is_available(self) -> bool:
        return self.kv is not None

    def get_provider_name(self) -> str:
        return self.kv.get_name() if self.kv is not None else "none"

    def _require_kv(self) -> KeyValueProvider:
        if self.kv is None:
            raise ServiceUnavailableError("Storage service is not configured")
        return self.kv

    def create(self, text, audio_ref=None) -> InspirationRecord:
        """Validate, enrich and persist a new inspiration.

        Writes the record first, then the index. If the index write fails
        the record stays reachable by id but is absent from listings.

        Raises:
            ValidationError: text missing, blank, not a string or too long
            ServiceUnavailableError: no key-value store configured
        """
        result = validate_input({"transcribedText": text, "audioData": audio_ref}, self._create_rules)
        if not result.valid:
            raise ValidationError("; ".join(result.errors), result.errors)

        kv = self._require_kv()
        text = normalize_whitespace(text)
        now = utc_now_iso()

        record = InspirationRecord(
            id=generate_id(),
            original_text=text,
            enhanced_content=self.enricher.enrich(text),
            metadata=RecordMetadata(
                word_count=count_words(text),
                language=detect_language(text),
            ),
            created_at=now,
            updated_at=now,
        )

        kv.put(record_key(record.id), record.model_dump_json(by_alias=True))
        self.index.prepend(IndexEntry(id=record.id, created_at=record.created_at))

        logger.info(f"Created inspiration {record.id} (category={record.enhanced_content.category})")
        return record

    def _load(self, record_id: str) -> InspirationRecord | None:
        raw = self.kv.get(record_key(record_id))
        if raw is None:
            return None
        return InspirationRecord.model_validate_json(raw)

    def _iter_records(self, entries: Iterable[IndexEntry]) -> Iterator[InspirationRecord]:
        """Yield records for index entries, skipping dangling or unreadable ones."""
        for entry in entries:
            try:
                record = self._load(entry.id)
            except PydanticValidationError as e:
                logger.warning(f"Skipping unreadable record {entry.id}: {e.error_count()} validation error(s)")
                continue
            if record is None:
                logger.warning(f"Skipping dangling index entry {entry.id}")
                continue
            yield record

    def list(
        self,
        page: int | None = 1,
        limit: int | None = None,
        category: str | None = None,
        search: str | None = None,
    ) -> InspirationPage:
        """One page of record summaries, newest first.

        In ``filter_first`` mode an active category or search filter is
        applied to the whole index before slicing and the totals count
        matches. In ``page_first`` mode the raw index is sliced first and
        the totals count index entries.
        """
        page = max(page or 1, 1)
        if limit is None:
            limit = self.settings.list_default_limit
        limit = min(max(limit, 1), self.settings.list_max_limit)

        category = category if category and category != ALL_CATEGORIES else None
        search = search.strip().lower() if search and search.strip() else None

        if self.kv is None:
            return build_page([], page, limit, total=0)

        entries = self.index.read()
        start, end = (page - 1) * limit, page * limit
        filtering = category is not None or search is not None

        if filtering and self.settings.list_filter_mode == "filter_first":
            matched = [r for r in self._iter_records(entries) if matches_filters(r, category, search)]
            return build_page(matched[start:end], page, limit, total=len(matched))

        records = [r for r in self._iter_records(entries[start:end]) if matches_filters(r, category, search)]
        return build_page(records, page, limit, total=len(entries))

    def get(self, record_id: str) -> InspirationRecord:
        """Raises NotFoundError when no record exists for record_id"""
        self._require_kv()
        try:
            record = self._load(record_id)
        except PydanticValidationError as e:
            logger.error(f"Stored record {record_id} is unreadable: {e}")
            raise InternalError("Failed to read inspiration") from e

        if record is None:
            raise NotFoundError("Inspiration not found")
        return record

    def delete(self, record_id: str) -> None:
        """Delete the record, then prune it from the index.

        A failed prune is logged and leaves a dangling index entry, which
        list() skips.
        """
        kv = self._require_kv()
        if kv.get(record_key(record_id)) is None:
            raise NotFoundError("Inspiration not found")

        kv.delete(record_key(record_id))

        try:
            self.index.remove(record_id)
        except Exception as e:
            logger.warning(f"Deleted {record_id} but failed to prune index: {e}", exc_info=True)

        logger.info(f"Deleted inspiration {record_id}")

    def iter_all(self) -> Iterator[InspirationRecord]:
        """Every readable stored record, newest first, whether indexed or not"""
        kv = self._require_kv()
        records = []
        for key in kv.list_keys(RECORD_KEY_PREFIX):
            record_id = key[len(RECORD_KEY_PREFIX):]
            try:
                record = self._load(record_id)
            except PydanticValidationError:
                logger.warning(f"Skipping unreadable record {record_id}")
                continue
            if record is not None:
                records.append(record)

        records.sort(key=lambda r: r.created_at, reverse=True)
        yield from records

    def rebuild_index(self) -> int:
        """Rewrite the index from the stored records.

        Returns:
            Number of entries written (at most index_max_entries)
        """
        entries = [IndexEntry(id=r.id, created_at=r.created_at) for r in self.iter_all()]
        entries = entries[:self.settings.index_max_entries]
        self.index.write(entries)
        logger.info(f"Rebuilt index with {len(entries)} entries")
        return len(entries)
