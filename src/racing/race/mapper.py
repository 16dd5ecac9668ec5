"""
Row-to-Race mapping.

Rows are positional: (id, meeting_id, name, number, visible,
advertised_start_time). Status is never stored; it is derived here from
the start time and the moment of mapping.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from racing.errors import RaceMappingError, TimestampConversionError
from racing.race.model import Race, RaceStatus

ROW_WIDTH = 6


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes; aware ones are returned unchanged."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_timestamp(raw: Any) -> datetime:
    """
    Convert a stored start time to a timezone-aware datetime.

    Naive values are treated as UTC. Strings must be ISO-8601.

    Raises:
        TimestampConversionError: If the value cannot be interpreted
    """
    if isinstance(raw, str):
        try:
            raw = datetime.fromisoformat(raw.strip())
        except ValueError as e:
            raise TimestampConversionError(f"invalid advertised start time {raw!r}") from e

    if not isinstance(raw, datetime):
        raise TimestampConversionError(
            f"advertised start time must be a datetime, got {type(raw).__name__}"
        )

    return as_utc(raw)


def derive_status(advertised_start_time: datetime, now: datetime) -> RaceStatus:
    """A race is CLOSED once now is strictly after its start, otherwise OPEN."""
    if as_utc(now) > as_utc(advertised_start_time):
        return RaceStatus.CLOSED
    return RaceStatus.OPEN


def _text(value: Any, column: str) -> str:
    if not isinstance(value, str):
        raise RaceMappingError(f"{column} must be text, got {type(value).__name__}")
    return value


def _number(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RaceMappingError(f"number must be an integer, got {type(value).__name__}")
    return value


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    # Stores without a native boolean type hand back 0/1
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise RaceMappingError(f"visible must be a boolean, got {value!r}")


def map_row(row: Optional[Sequence[Any]], now: Optional[datetime] = None) -> Optional[Race]:
    """
    Map one result row into a Race.

    Args:
        row: Positional row from the cursor, or None when it had no data
        now: Evaluation time for the status, defaults to the current UTC time

    Returns:
        The mapped Race, or None if there was no row

    Raises:
        RaceMappingError: If the row has the wrong shape or column types
        TimestampConversionError: If the start time cannot be converted
    """
    if row is None:
        return None

    try:
        race_id, meeting_id, name, number, visible, raw_start = row
    except (TypeError, ValueError) as e:
        raise RaceMappingError(f"expected a row of {ROW_WIDTH} columns, got {row!r}") from e

    advertised_start_time = to_timestamp(raw_start)
    if now is None:
        now = utcnow()

    return Race(
        id=_text(race_id, "id"),
        meeting_id=_text(meeting_id, "meeting_id"),
        name=_text(name, "name"),
        number=_number(number),
        visible=_flag(visible),
        advertised_start_time=advertised_start_time,
        status=derive_status(advertised_start_time, now),
    )
