"""Content enrichment: AI endpoint client and deterministic fallback."""

from .client import EnrichmentClient, normalize_enhanced_content, parse_enrichment_json
from .fallback import generate_fallback_content

__all__ = [
    "EnrichmentClient",
    "generate_fallback_content",
    "normalize_enhanced_content",
    "parse_enrichment_json",
]
