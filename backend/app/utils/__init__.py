"""
Shared system utilities.
"""
from app.utils.helpers import (
    utcnow,
    stay_days,
    parse_month,
)
from app.utils.logger import configure_logging

__all__ = [
    "utcnow",
    "stay_days",
    "parse_month",
    "configure_logging",
]
