"""Utility helpers for dynamic imports."""
from __future__ import annotations

import importlib
from typing import Any, List, Sequence

from seedtest.core.models import TestSuite


def import_string(path: str) -> Any:
    """Return the attribute at the given dotted path.

    Supports ``module:attr`` or ``module.attr`` syntax.
    """

    if not path:
        raise ValueError("Empty import path provided")
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, sep, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"Invalid import path '{path}'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as exc:  # pragma: no cover - simple attribute error
        raise AttributeError(f"Module '{module_name}' has no attribute '{attr}'") from exc


def resolve_suites(paths: Sequence[str]) -> List[TestSuite]:
    """Import suites from ``module:attr`` references, keeping their order.

    The target may be a suite, a sequence of suites, or a zero-argument
    callable returning either.
    """

    suites: List[TestSuite] = []
    for path in paths:
        obj = import_string(path)
        if callable(obj) and not isinstance(obj, TestSuite):
            obj = obj()
        if isinstance(obj, TestSuite):
            suites.append(obj)
            continue
        if not isinstance(obj, (list, tuple)):
            raise TypeError(f"'{path}' is not a TestSuite or a sequence of TestSuite")
        for item in obj:
            if not isinstance(item, TestSuite):
                raise TypeError(f"'{path}' contains a non-TestSuite entry: {item!r}")
            suites.append(item)
    return suites
