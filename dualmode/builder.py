"""
Record builder.

Usage:
    from dualmode.builder import build

    record = build("Hero")
    print(record.detail.level)

`build` is pure apart from reading the clock and drawing one random number.
Both can be injected, which is how the tests pin the calendar day.
"""

from __future__ import annotations

import random
from datetime import datetime
from typing import Callable, Optional, Protocol

from dualmode.domain.models import (
    CATEGORY_DETAILS,
    RECORD_TEXT,
    TIMESTAMP_FORMAT,
    Category,
    OutputRecord,
    RecordDetail,
)
from dualmode.utils.logging import get_logger

log = get_logger(__name__)

# randrange upper bound is exclusive: draws are 1..98.
LEVEL_DRAW_MIN = 1
LEVEL_DRAW_MAX = 99


class RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...


def build(
    category: Category | str,
    *,
    clock: Optional[Callable[[], datetime]] = None,
    rng: Optional[RandomSource] = None,
) -> OutputRecord:
    """
    Build a fresh OutputRecord for `category`.

    Parameters
    ----------
    category : Category | str
        Category member or its name (case-insensitive).
    clock : callable, optional
        Returns the current time. Read once; timestamp and day-of-month come
        from the same reading. Defaults to `datetime.now`.
    rng : RandomSource, optional
        Source for the level draw. Defaults to the `random` module.

    Raises
    ------
    InvalidCategory
        If `category` is not an allowed value. No record is built.
    """
    member = Category.parse(category)
    now = (clock or datetime.now)()
    draw = (rng or random).randrange(LEVEL_DRAW_MIN, LEVEL_DRAW_MAX)
    name, power = CATEGORY_DETAILS[member]

    record = OutputRecord(
        timestamp=now.strftime(TIMESTAMP_FORMAT),
        text=RECORD_TEXT,
        category=member,
        detail=RecordDetail(name=name, power=power, level=draw + now.day),
    )
    log.debug(
        "Built record",
        extra={"category": member.value, "level": record.detail.level},
    )
    return record


__all__ = ["build", "LEVEL_DRAW_MIN", "LEVEL_DRAW_MAX", "RandomSource"]
