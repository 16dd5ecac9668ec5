from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class RaceStatus(str, Enum):
    """Lifecycle label derived from the advertised start time at read time."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"


class OrderDirection(str, Enum):
    ASCENDING = "ASC"
    DESCENDING = "DESC"


class SortField(str, Enum):
    """Race columns a list may be ordered by."""

    ID = "id"
    MEETING_ID = "meeting_id"
    NAME = "name"
    NUMBER = "number"
    VISIBLE = "visible"
    ADVERTISED_START_TIME = "advertised_start_time"


@dataclass
class Race:
    id: str
    meeting_id: str
    name: str
    number: int
    visible: bool
    advertised_start_time: datetime
    status: RaceStatus

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "meeting_id": self.meeting_id,
            "name": self.name,
            "number": self.number,
            "visible": self.visible,
            "advertised_start_time": self.advertised_start_time.isoformat(),
            "status": self.status.value,
        }


@dataclass
class ListFilter:
    """
    Optional predicates for listing races.

    An empty meeting_ids list and a visible of None both mean "no filter";
    visible=False filters for hidden races.
    """

    meeting_ids: list[str] = field(default_factory=list)
    visible: Optional[bool] = None


@dataclass
class ListOrder:
    """
    Ordering for listing races.

    order_by is a SortField or the name of one. direction may be an
    OrderDirection or its name/SQL literal; anything else is dropped and
    the store's default direction applies.
    """

    order_by: Optional[SortField | str] = None
    direction: Optional[OrderDirection | str] = None
