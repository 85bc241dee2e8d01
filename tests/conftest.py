"""Pytest fixtures and configuration for Inspiration List tests"""

import os

import httpx
import pytest

# Set up test environment variables before importing modules
os.environ.setdefault("KV_PROVIDER", "memory")
os.environ.setdefault("ENRICHMENT_ENABLED", "false")
os.environ.setdefault("STATIC_DIR", "tests/does-not-exist")

from inspiration_list.config import Settings  # noqa: E402
from inspiration_list.core import RecordStore  # noqa: E402
from inspiration_list.enrichment import EnrichmentClient  # noqa: E402
from inspiration_list.providers.kv.memory import MemoryKeyValueProvider  # noqa: E402
from inspiration_list.providers.resilience import HttpClient, HttpClientConfig  # noqa: E402

GATEWAY_URL = "https://gateway.test/v1beta/models/gemini:generateContent"


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file"""
    return Settings(
        _env_file=None,
        kv_provider="memory",
        enrichment_enabled=False,
        gemini_api_key=None,
        gemini_gateway_url=None,
        static_dir="tests/does-not-exist",
        list_filter_mode="filter_first",
    )


@pytest.fixture
def kv():
    return MemoryKeyValueProvider()


@pytest.fixture
def enricher(settings):
    """Enrichment client with no endpoint: always the fallback heuristic"""
    return EnrichmentClient(settings)


@pytest.fixture
def record_store(kv, enricher, settings):
    return RecordStore(kv, enricher, settings)


@pytest.fixture
def make_http_client():
    """Factory for an HttpClient answering through httpx.MockTransport"""
    clients = []

    def factory(handler, **config_overrides) -> HttpClient:
        config = HttpClientConfig(url=GATEWAY_URL, **config_overrides)
        client = HttpClient(config, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def sample_enrichment():
    return {
        "summary": "做一个语音灵感记录应用",
        "details": "用语音快速记录想法，并由AI整理成结构化内容。",
        "suggestions": ["先做最小可用版本", "调研同类产品", "收集用户反馈"],
        "tags": ["应用", "语音", "灵感"],
        "category": "技术创新",
    }
