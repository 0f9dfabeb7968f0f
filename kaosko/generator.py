from __future__ import annotations
import inspect
import logging
import uuid
from datetime import date as _date
from typing import Callable, Optional

from kaosko.core.config import FixtureConfig
from kaosko.core.hashing import INT32_MAX, INT32_MIN, char_sum_hash, to_int32
from kaosko.core.ids import GUID_BYTES, guid_from_bytes
from kaosko.core.rng import stream_from_seed
from kaosko.core.timebase import DATE_MAX, DATE_MIN, day_span, midnight, offset_by_fraction

logger = logging.getLogger(__name__)

HashFunc = Callable[[Optional[str]], int]

def _caller_name(depth: int = 2) -> str:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                return ""
            frame = frame.f_back
        return frame.f_code.co_name if frame is not None else ""
    finally:
        del frame

class KaosKo:
    """Reproducible source of fixture values.

    Every accessor draws from one numpy stream seeded at construction, so the
    output depends only on the seed and the order of calls. Instances are not
    thread-safe; give each thread its own.

    ``KaosKo()`` seeds from the name of the calling function, which in a test
    suite makes each test's fixtures stable and distinct::

        def test_invoice_totals():
            k = KaosKo()              # seeded from "test_invoice_totals"
            qty = k.positive_integer(100)
    """

    def __init__(self, seed: Optional[str] = None, *, hash_func: HashFunc = char_sum_hash):
        if seed is None:
            seed = _caller_name()
        self._seed = to_int32(hash_func(seed))
        self._stream = stream_from_seed(self._seed)
        logger.debug("KaosKo seeded with %d from label %r", self._seed, seed)

    @classmethod
    def with_hasher(cls, hash_func: HashFunc, seed: Optional[str]) -> "KaosKo":
        """Seed through ``hash_func`` instead of the default character-sum hash."""
        return cls(seed if seed is not None else "", hash_func=hash_func)

    @classmethod
    def from_config(cls, cfg: FixtureConfig) -> "KaosKo":
        if cfg.seed is not None:
            pinned = cfg.seed
            return cls(cfg.seed_label, hash_func=lambda _label: pinned)
        return cls(cfg.seed_label)

    @property
    def seed(self) -> int:
        return self._seed

    def boolean(self) -> bool:
        return bool(self._stream.integers(0, 2))

    def date(self, start: Optional[_date] = None, end: Optional[_date] = None) -> _date:
        """Random date in ``[start, end)`` with the time of day set to midnight.

        Without bounds the range is ``datetime.min`` up to the day before
        ``datetime.max``. ``datetime`` bounds give a ``datetime`` back (tzinfo
        kept); plain ``date`` bounds give a ``date``. If ``start`` carries a
        time of day the truncated result can fall on ``start``'s own date.
        """
        if start is None and end is None:
            start, end = DATE_MIN, DATE_MAX
        elif start is None or end is None:
            raise TypeError("date() takes both start and end, or neither")

        span = day_span(start, end)
        return midnight(offset_by_fraction(start, span, self._stream.random()))

    def guid(self) -> uuid.UUID:
        # 16 random bytes shaped as a GUID; not a valid RFC 4122 version
        return guid_from_bytes(self._stream.bytes(GUID_BYTES))

    def integer(self, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
        """Uniform int in ``[min_value, max_value)``.

        The upper bound is exclusive, so the bare call never returns
        ``INT32_MAX``. Bounds are not checked here: ``max_value <= min_value``
        raises numpy's ``ValueError``.
        """
        if min_value is None and max_value is None:
            min_value, max_value = INT32_MIN, INT32_MAX
        elif min_value is None or max_value is None:
            raise TypeError("integer() takes both min_value and max_value, or neither")
        return int(self._stream.integers(min_value, max_value))

    def positive_integer(self, max_value: Optional[int] = None) -> int:
        """Uniform int in ``[0, max_value)``, or ``[0, INT32_MAX]`` when unbounded."""
        if max_value is None:
            return int(self._stream.integers(0, INT32_MAX, endpoint=True))
        return int(self._stream.integers(0, max_value))
