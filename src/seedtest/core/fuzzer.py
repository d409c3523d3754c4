"""Randomized input generator seeded by the execution key."""
from __future__ import annotations

import numpy as np


class Fuzzer:
    """Deterministic random values for case bodies.

    Two fuzzers built from the same execution key yield the same sequence of
    values, which is what makes a ``--seed``/``--filter`` rerun reproduce a
    failure. Every draw counts as one invocation.
    """

    def __init__(self, exec_key: int) -> None:
        self.exec_key = exec_key
        self._rng = np.random.default_rng(exec_key)
        self._invocations = 0

    @property
    def invocation_count(self) -> int:
        return self._invocations

    def random_uint8(self) -> int:
        return self._integer(0, 2**8 - 1)

    def random_sint8(self) -> int:
        return self._integer(-(2**7), 2**7 - 1)

    def random_uint16(self) -> int:
        return self._integer(0, 2**16 - 1)

    def random_sint16(self) -> int:
        return self._integer(-(2**15), 2**15 - 1)

    def random_uint32(self) -> int:
        return self._integer(0, 2**32 - 1)

    def random_sint32(self) -> int:
        return self._integer(-(2**31), 2**31 - 1)

    def random_uint64(self) -> int:
        self._invocations += 1
        return int(self._rng.integers(0, 2**64 - 1, dtype=np.uint64, endpoint=True))

    def random_sint64(self) -> int:
        return self._integer(-(2**63), 2**63 - 1)

    def random_integer_in_range(self, low: int, high: int) -> int:
        """Inclusive on both ends; reversed bounds are swapped."""

        if low > high:
            low, high = high, low
        return self._integer(low, high)

    def random_unit_float(self) -> float:
        self._invocations += 1
        return float(self._rng.random())

    def random_double(self, low: float = -1.0, high: float = 1.0) -> float:
        self._invocations += 1
        return float(self._rng.uniform(low, high))

    def random_ascii_string(self, max_length: int = 255) -> str:
        if max_length < 1:
            raise ValueError("max_length must be >= 1")
        self._invocations += 1
        length = int(self._rng.integers(1, max_length, endpoint=True))
        codes = self._rng.integers(32, 126, size=length, endpoint=True)
        return "".join(chr(int(code)) for code in codes)

    def _integer(self, low: int, high: int) -> int:
        self._invocations += 1
        return int(self._rng.integers(low, high, dtype=np.int64, endpoint=True))
