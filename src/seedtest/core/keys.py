"""Run seed generation and execution key derivation."""
from __future__ import annotations

import hashlib
import string
import time

import numpy as np

from .errors import InvalidArgumentError
from .models import RUN_SEED_LENGTH

SEED_ALPHABET = string.digits + string.ascii_uppercase

# Zero is never produced for valid inputs; it means "derive a key".
INVALID_EXEC_KEY = 0
MAX_EXEC_KEY = 2**64 - 1


def generate_run_seed(length: int = RUN_SEED_LENGTH) -> str:
    """Return ``length`` random characters drawn from ``0-9A-Z``.

    The stream is seeded from the monotonic clock. Only keys derived from the
    seed need to be reproducible, not the seed itself.
    """

    if length <= 0:
        raise InvalidArgumentError("The length of the harness seed must be >0.")
    rng = np.random.default_rng(time.perf_counter_ns())
    indices = rng.integers(0, len(SEED_ALPHABET), size=length)
    return "".join(SEED_ALPHABET[int(index)] for index in indices)


def check_exec_key(exec_key: int) -> int:
    if not 0 <= exec_key <= MAX_EXEC_KEY:
        raise InvalidArgumentError(f"Invalid execKey {exec_key}; expected 0..{MAX_EXEC_KEY}.")
    return exec_key


def derive_exec_key(seed: str, suite_name: str, case_name: str, iteration: int) -> int:
    """Derive the 64-bit fuzzer key for one (suite, case, iteration) execution.

    The fields are concatenated without separators and NUL terminated, hashed
    with MD5, and the first eight digest bytes are read little-endian. Keys
    recorded by earlier runs stay valid because this byte layout never changes.
    """

    if not seed:
        raise InvalidArgumentError("Invalid runSeed string.")
    if not suite_name:
        raise InvalidArgumentError("Invalid suiteName string.")
    if not case_name:
        raise InvalidArgumentError("Invalid testName string.")
    if iteration <= 0:
        raise InvalidArgumentError("Invalid iteration count.")
    buffer = f"{seed}{suite_name}{case_name}{iteration}".encode("utf-8") + b"\x00"
    digest = hashlib.md5(buffer).digest()
    return int.from_bytes(digest[:8], "little")
