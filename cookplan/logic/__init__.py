"""Core business logic layer.

Subpackages:
- shopping: merging plan ingredients into shopping lists and dietary filtering
"""
__all__ = ["shopping"]
