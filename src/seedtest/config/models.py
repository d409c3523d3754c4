"""Harness configuration passed to the orchestrator at construction."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Sequence

DEFAULT_TIMEOUT_S = 3600


@dataclass(frozen=True)
class HarnessConfig:
    timeout_s: float = DEFAULT_TIMEOUT_S
    iterations: int = 1
    seed: Optional[str] = None
    exec_key: int = 0
    filter: Optional[str] = None
    use_color: bool = True
    suites: Sequence[str] = field(default_factory=tuple)

    def merged(self, **overrides: Any) -> "HarnessConfig":
        """Return a copy with every non-``None`` override applied."""

        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)
