"""Provider package - Pluggable key-value stores and HTTP resilience

Key-value providers are discovered via Python entry points, allowing both
built-in and external providers to be registered in pyproject.toml.

Usage:
    from inspiration_list.providers import KeyValueProviderFactory
    kv = KeyValueProviderFactory.create(settings)

External plugins can add providers by defining entry points:
    [project.entry-points."inspiration_list.kv"]
    my_store = "my_package.store:MyKeyValueProvider"
"""

from . import plugin_loader
from .base import KeyValueProvider
from .factories import KeyValueProviderFactory

__all__ = [
    'KeyValueProvider',
    'KeyValueProviderFactory',
    'plugin_loader',
]
