"""
Domain package for dualmode.

Exports the record models and the category enumeration. Keep this package
focused on data definitions and validation.
"""

from dualmode.domain.models import (
    CATEGORY_DETAILS,
    Category,
    OutputRecord,
    RecordDetail,
)

__all__ = [
    "CATEGORY_DETAILS",
    "Category",
    "OutputRecord",
    "RecordDetail",
]
