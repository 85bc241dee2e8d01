"""Provider factories - Factory pattern with entry point discovery"""

import logging

from inspiration_list.config import Settings

from . import plugin_loader
from .base import KeyValueProvider

logger = logging.getLogger(__name__)


class KeyValueProviderFactory:
    """Factory for creating key-value store providers

    Providers are discovered via entry points in the 'inspiration_list.kv' group.

    Available providers (when dependencies installed):
        - memory: In-process dict
        - sqlite: SQLite file
        - redis: Redis server
        - none: No store (returns None)
    """

    @classmethod
    def create(cls, settings: Settings) -> KeyValueProvider | None:
        """Create key-value provider based on settings

        Args:
            settings: Application settings with kv_provider configured

        Returns:
            Provider instance, or None when kv_provider is 'none'

        Raises:
            ValueError: If provider not found or dependencies missing
        """
        provider_name = settings.kv_provider

        if provider_name == "none":
            logger.info("Key-value store disabled (kv_provider='none')")
            return None

        provider_class = plugin_loader.get_provider_class('kv', provider_name)

        if not provider_class:
            available = ', '.join(cls.get_available_providers())
            raise ValueError(
                f"Unknown key-value provider: {provider_name}. "
                f"Available: {available or 'none (check dependencies)'}"
            )

        logger.info(f"Creating key-value provider: {provider_name}")
        return provider_class(settings)

    @classmethod
    def get_available_providers(cls) -> list[str]:
        """Get list of available key-value providers"""
        return plugin_loader.get_available_providers('kv')

    @classmethod
    def register(cls, name: str, provider_class: type[KeyValueProvider]) -> None:
        """Manually register a provider (for testing)"""
        plugin_loader.register_provider('kv', name, provider_class)
