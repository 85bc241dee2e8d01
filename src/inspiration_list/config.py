"""Configuration management for Inspiration List"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings for the record store, enrichment and HTTP layer.

    Key-value provider selection:
        Provider names are strings that map to entry points in the
        'inspiration_list.kv' group. The package ships:
        - memory: in-process dict (development, tests)
        - sqlite: single-table SQLite file
        - redis: Redis server
        Use 'none' to run without a store (list returns an empty page,
        create/get/delete answer 503).

    Enrichment:
        Requires both GEMINI_API_KEY and GEMINI_GATEWAY_URL. Without them
        every record is enriched by the local fallback heuristic.
    """

    # ===== Key-Value Store =====
    kv_provider: str = Field(
        default="memory",
        description="Key-value provider name (discovered via inspiration_list.kv entry points)"
    )
    kv_sqlite_path: str = "data/inspirations.db"

    # ===== Redis Configuration (for kv provider) =====
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_password: str | None = None
    redis_db: int = 0  # Redis database number (0-15)
    redis_key_prefix: str = "inspiration-list:"

    # ===== Record Store =====
    index_max_entries: int = Field(default=1000, ge=1)
    max_text_length: int = Field(default=5000, ge=1)
    list_default_limit: int = Field(default=20, ge=1)
    list_max_limit: int = Field(default=100, ge=1)
    # filter_first: filter the whole index, then paginate (counts are post-filter)
    # page_first: paginate the raw index, then filter the page (legacy behavior)
    list_filter_mode: Literal["filter_first", "page_first"] = "filter_first"

    # ===== Enrichment (Gemini-compatible gateway) =====
    enrichment_enabled: bool = True
    gemini_api_key: str | None = None
    gemini_gateway_url: str | None = None
    enrichment_timeout: float = 30.0
    enrichment_max_retries: int = Field(default=0, ge=0)
    enrichment_temperature: float = 0.7
    enrichment_top_k: int = 40
    enrichment_top_p: float = 0.8
    enrichment_max_output_tokens: int = 1024
    enrichment_circuit_breaker_threshold: int = 5
    enrichment_circuit_breaker_timeout: float = 60.0

    # ===== Application Settings =====
    cors_allow_origin: str = "*"
    static_dir: str = "public"
    log_level: str = "info"

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    def is_enrichment_configured(self) -> bool:
        """True when the external enrichment call can be attempted"""
        return bool(
            self.enrichment_enabled
            and self.gemini_api_key
            and self.gemini_gateway_url
        )


# Global settings instance
settings = Settings()
