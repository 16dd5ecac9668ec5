"""
Race

This package provides read-only access to races: query construction,
row mapping and the repository tying them together.
"""

from racing.race.model import (
    ListFilter,
    ListOrder,
    OrderDirection,
    Race,
    RaceStatus,
    SortField,
)
from racing.race.repository import RacesRepository

__all__ = [
    "ListFilter",
    "ListOrder",
    "OrderDirection",
    "Race",
    "RaceStatus",
    "RacesRepository",
    "SortField",
]
