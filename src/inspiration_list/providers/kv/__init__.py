"""Built-in key-value providers.

Each module is loaded through its entry point so optional dependencies
(redis) are only imported when selected.
"""
