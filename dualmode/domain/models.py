"""
Domain models for dualmode.

A record pairs a capture timestamp and a fixed label with a category and a
nested detail block. Both models are frozen: a record is never mutated after
the builder returns it.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, Field

from dualmode.errors import InvalidCategory

RECORD_TEXT = "Sample output record"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Category(str, Enum):
    """Closed set of record categories."""

    HERO = "Hero"
    CHAMPION = "Champion"

    @classmethod
    def allowed(cls) -> Tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, value: Category | str) -> Category:
        """
        Coerce a user-supplied value into a Category.

        Matching is case-insensitive. Anything else raises InvalidCategory.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise InvalidCategory(value, cls.allowed())


# Fixed (name, power) pair per category.
CATEGORY_DETAILS: Dict[Category, Tuple[str, str]] = {
    Category.HERO: ("Cmdlet Crusader", "Command Mastery"),
    Category.CHAMPION: ("Pipeline Paladin", "Seamless Integration"),
}


class RecordDetail(BaseModel):
    name: str = Field(..., description="Fixed name for the category.")
    power: str = Field(..., description="Fixed power for the category.")
    level: int = Field(..., description="Random draw plus the day of month.")

    model_config = {"frozen": True}


class OutputRecord(BaseModel):
    """
    The single record the builder produces.
    """

    timestamp: str = Field(..., description="Build time, formatted YYYY-MM-DD HH:MM:SS.")
    text: str = Field(RECORD_TEXT, description="Constant label.")
    category: Category = Field(..., description="Category the record was built for.")
    detail: RecordDetail = Field(..., description="Category-specific details.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }


__all__ = [
    "CATEGORY_DETAILS",
    "Category",
    "OutputRecord",
    "RECORD_TEXT",
    "RecordDetail",
    "TIMESTAMP_FORMAT",
]
