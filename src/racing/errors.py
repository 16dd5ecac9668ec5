"""Exceptions raised by the races data-access layer."""


class RacingError(Exception):
    """Base class for all racing errors."""


class RaceNotFoundError(RacingError, LookupError):
    """No race matched a point lookup."""

    def __init__(self, race_id: str):
        self.race_id = race_id
        super().__init__(f"cannot find race id: {race_id}")


class RaceMappingError(RacingError):
    """A result row could not be mapped into a Race."""


class TimestampConversionError(RaceMappingError):
    """An advertised start time could not be converted to an instant."""


class InitializationError(RacingError):
    """Seeding the races store failed."""


class InvalidOrderError(RacingError, ValueError):
    """An order-by column is not a sortable race field."""
