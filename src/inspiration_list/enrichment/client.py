"""Enrichment client: one call to a Gemini-compatible gateway, with local fallback.

enrich() never raises. Missing configuration, transport errors, non-2xx
responses, an open circuit, an empty candidate list or unparsable JSON all
end in generate_fallback_content().
"""

import json
import logging
import re
from typing import Any

import httpx

from inspiration_list.config import Settings
from inspiration_list.errors import UpstreamError
from inspiration_list.models import EnhancedContent
from inspiration_list.providers.resilience import CircuitOpenError, HttpClient, HttpClientConfig
from inspiration_list.utils.text import truncate

from .fallback import DEFAULT_CATEGORY, generate_fallback_content
from .prompts import build_prompt, build_request_body

logger = logging.getLogger(__name__)

DEFAULT_DETAILS = "这个想法具有潜在价值，值得进一步探索和发展。"
DEFAULT_SUGGESTIONS = ["深入思考这个想法", "收集相关信息", "制定实施计划"]
DEFAULT_TAGS = ["灵感", "想法"]
MAX_SUGGESTIONS = 5
MAX_TAGS = 6
SUMMARY_FALLBACK_CHARS = 50

_CODE_FENCE = re.compile(r"```(?:json)?[ \t]*\n?")


def extract_candidate_text(payload: Any) -> str:
    """Pull candidates[0].content.parts[0].text out of a generateContent reply."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise UpstreamError("No candidate content in enrichment response") from e
    if not isinstance(text, str):
        raise UpstreamError("Candidate content is not text")
    return text


def parse_enrichment_json(raw: str) -> dict[str, Any]:
    """Strip code fences and parse the model output as a JSON object."""
    cleaned = _CODE_FENCE.sub("", raw).strip()
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise UpstreamError(f"Enrichment response is not valid JSON: {e}") from e
    if not isinstance(parsed, dict):
        raise UpstreamError("Enrichment response is not a JSON object")
    return parsed


def _clean_string_list(value: Any, default: list[str], limit: int) -> list[str]:
    if not isinstance(value, list):
        return list(default)
    items = [item.strip() for item in value if isinstance(item, str) and item.strip()]
    return items[:limit]


def _non_blank(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def normalize_enhanced_content(content: dict[str, Any], original_text: str) -> EnhancedContent:
    """Fill in missing or malformed fields and enforce list caps."""
    summary = content.get("summary")
    details = content.get("details")
    category = content.get("category")

    return EnhancedContent(
        summary=summary if _non_blank(summary) else truncate(original_text, SUMMARY_FALLBACK_CHARS),
        details=details if _non_blank(details) else DEFAULT_DETAILS,
        suggestions=_clean_string_list(content.get("suggestions"), DEFAULT_SUGGESTIONS, MAX_SUGGESTIONS),
        tags=_clean_string_list(content.get("tags"), DEFAULT_TAGS, MAX_TAGS),
        category=category if _non_blank(category) else DEFAULT_CATEGORY,
    )


class EnrichmentClient:
    """Derives summary, details, suggestions, tags and category for a text."""

    def __init__(self, settings: Settings, http_client: HttpClient | None = None):
        self.settings = settings
        self._http_client = http_client

        if self._http_client is None and settings.is_enrichment_configured():
            self._http_client = HttpClient(HttpClientConfig(
                url=settings.gemini_gateway_url,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {settings.gemini_api_key}",
                },
                default_timeout=settings.enrichment_timeout,
                max_retries=settings.enrichment_max_retries,
                circuit_breaker_threshold=settings.enrichment_circuit_breaker_threshold,
                circuit_breaker_timeout=settings.enrichment_circuit_breaker_timeout,
            ))

        if self._http_client is None:
            logger.info("Enrichment endpoint not configured, fallback analysis only")

    @property
    def is_configured(self) -> bool:
        return self._http_client is not None

    def get_name(self) -> str:
        return "gemini" if self.is_configured else "fallback"

    def enrich(self, text: str) -> EnhancedContent:
        """Enrich text via the endpoint, or the local heuristic on any failure."""
        if not self.is_configured:
            return generate_fallback_content(text)

        try:
            raw = self._request(text)
            return normalize_enhanced_content(parse_enrichment_json(raw), text)
        except UpstreamError as e:
            logger.warning(f"Enrichment failed, using fallback analysis: {e}")
        except Exception as e:
            logger.error(f"Unexpected enrichment error, using fallback analysis: {e}", exc_info=True)

        return generate_fallback_content(text)

    def _request(self, text: str) -> str:
        body = build_request_body(
            build_prompt(text),
            temperature=self.settings.enrichment_temperature,
            top_k=self.settings.enrichment_top_k,
            top_p=self.settings.enrichment_top_p,
            max_output_tokens=self.settings.enrichment_max_output_tokens,
        )

        try:
            response = self._http_client.post(json=body)
        except CircuitOpenError as e:
            raise UpstreamError("Enrichment circuit is open") from e
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"Enrichment endpoint returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"Enrichment request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError("Enrichment response body is not JSON") from e

        return extract_candidate_text(payload)

    def get_stats(self) -> dict:
        if not self.is_configured:
            return {"provider": "fallback"}
        return {"provider": "gemini", **self._http_client.get_stats()}

    def close(self) -> None:
        if self._http_client is not None:
            self._http_client.close()
