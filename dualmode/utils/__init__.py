"""
Cross-cutting helpers for dualmode. Keep this package free of domain logic.
"""

from dualmode.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
