"""
Core translation modules

Note: To prevent circular import issues, nothing is re-exported here. Import
directly from the submodules:

    from autotranslate.core.matchers import replace_interpolations

This keeps a clean dependency hierarchy:
    exceptions (no deps) → config → matchers → capabilities → services
"""

__all__ = []
