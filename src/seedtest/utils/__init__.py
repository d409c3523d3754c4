"""Utility exports."""
from .importing import import_string, resolve_suites

__all__ = ["import_string", "resolve_suites"]
