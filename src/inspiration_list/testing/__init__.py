"""Contract test base classes for key-value providers.

These abstract test classes define the behavioral contract that every
provider implementation must satisfy. Provider packages subclass them and
implement the provider fixture.

Usage in a plugin package:
    from inspiration_list.testing import KeyValueContractTest

    class TestMyStoreContract(KeyValueContractTest):
        @pytest.fixture
        def provider(self):
            return MyKeyValueProvider(test_settings)
"""

from .kv import KeyValueContractTest

__all__ = [
    'KeyValueContractTest',
]
