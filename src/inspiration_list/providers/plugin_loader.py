"""Plugin loader for key-value providers - Entry point based discovery

Built-in providers (memory, sqlite, redis) and third-party providers are
discovered the same way, through the entry point groups below.

Entry Point Groups:
    - inspiration_list.kv: Key-value store providers

Usage:
    # Get all providers of a type
    providers = get_providers('kv')  # {'memory': MemoryKeyValueProvider, ...}

    # Get a specific provider class
    provider_class = get_provider_class('kv', 'redis')
"""

import importlib.metadata
import logging

from .base import KeyValueProvider

logger = logging.getLogger(__name__)

ProviderType = type[KeyValueProvider]

# Entry point groups for each provider type
PROVIDER_GROUPS = {
    'kv': 'inspiration_list.kv',
}

# Cache for loaded providers: {provider_type: {name: class}}
_provider_cache: dict[str, dict[str, ProviderType]] = {}


def discover_providers(group: str) -> dict[str, ProviderType]:
    """Discover providers for a specific entry point group

    Args:
        group: Entry point group name (e.g., 'inspiration_list.kv')

    Returns:
        Dictionary mapping provider names to provider classes

    Note:
        Providers with missing dependencies are skipped.
    """
    providers = {}

    try:
        for ep in importlib.metadata.entry_points(group=group):
            try:
                providers[ep.name] = ep.load()
                logger.debug(f"Discovered provider: {group}.{ep.name}")
            except ImportError as e:
                logger.debug(f"Skipping {group}.{ep.name}: missing dependency - {e}")
            except Exception as e:
                logger.warning(f"Failed to load provider {group}.{ep.name}: {e}")

    except Exception as e:
        logger.warning(f"Failed to discover providers for {group}: {e}")

    return providers


def get_providers(provider_type: str) -> dict[str, ProviderType]:
    """Get all discovered providers for a type

    Args:
        provider_type: Provider type ('kv')

    Returns:
        Dictionary mapping provider names to provider classes
    """
    cached = _provider_cache.get(provider_type)

    if not cached:
        group = PROVIDER_GROUPS.get(provider_type)
        if group:
            _provider_cache[provider_type] = discover_providers(group)
        else:
            logger.warning(f"Unknown provider type: {provider_type}")
            _provider_cache[provider_type] = {}

    return _provider_cache[provider_type]


def get_provider_class(provider_type: str, name: str) -> ProviderType | None:
    """Get a specific provider class, or None if not found"""
    return get_providers(provider_type).get(name)


def get_available_providers(provider_type: str) -> list[str]:
    """Get list of available provider names for a type"""
    return sorted(get_providers(provider_type))


def reset() -> None:
    """Reset plugin loader cache

    For testing purposes only. Clears all cached providers
    so they will be rediscovered on next access.
    """
    _provider_cache.clear()
    logger.debug("Plugin loader cache reset")


def register_provider(provider_type: str, name: str, provider_class: ProviderType) -> None:
    """Manually register a provider

    For testing and runtime registration. Registered providers take
    precedence over discovered ones with the same name.

    Example:
        >>> register_provider('kv', 'test', InMemoryTestProvider)
    """
    providers = dict(get_providers(provider_type))
    providers[name] = provider_class
    _provider_cache[provider_type] = providers
    logger.debug(f"Manually registered provider: {provider_type}.{name}")
