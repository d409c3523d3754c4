"""YAML loader and validation for harness config files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import Draft7Validator

from .models import HarnessConfig

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "seedtest config",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "suites": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "seed": {"type": "string", "pattern": "^[0-9A-Za-z]+$"},
        "exec_key": {"type": "integer", "minimum": 0, "maximum": 18446744073709551615},
        "filter": {"type": "string"},
        "iterations": {"type": "integer", "minimum": 1},
        "timeout": {"type": "number", "minimum": 0},
        "color": {"type": "boolean"},
    },
}

_validator = Draft7Validator(CONFIG_SCHEMA)


def load_config(path: str | Path) -> HarnessConfig:
    """Load and validate a config file."""

    config_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Config file must contain a mapping at the top level")
    return parse_config(raw)


def parse_config(raw: Mapping[str, Any]) -> HarnessConfig:
    seed = raw.get("seed")
    if isinstance(seed, int) and not isinstance(seed, bool):
        # YAML reads all-digit seeds as integers and drops leading zeros.
        raise ValueError(f"Config seed {seed} must be quoted, e.g. seed: \"{seed}\"")
    errors = sorted(_validator.iter_errors(dict(raw)), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Config schema validation failed: {messages}")
    defaults = HarnessConfig()
    return HarnessConfig(
        timeout_s=float(raw.get("timeout", defaults.timeout_s)),
        iterations=int(raw.get("iterations", defaults.iterations)),
        seed=raw.get("seed") or None,
        exec_key=int(raw.get("exec_key", defaults.exec_key)),
        filter=raw.get("filter") or None,
        use_color=bool(raw.get("color", defaults.use_color)),
        suites=tuple(raw.get("suites", ())),
    )
