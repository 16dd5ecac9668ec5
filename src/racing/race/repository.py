"""
Read-only repository for races.

The repository is handed its connection rather than opening one, so the
caller decides on pooling and transactions. Any object with
``execute(query, params) -> cursor`` will do; psycopg connections qualify.
"""

import threading
from datetime import datetime
from typing import Callable, Iterator, List, Optional

from racing.config import config
from racing.errors import InitializationError, RaceMappingError, RaceNotFoundError
from racing.logger import get_logger
from racing.race import seed as seeding
from racing.race.mapper import map_row, utcnow
from racing.race.model import ListFilter, ListOrder, Race
from racing.race.query import BASE_QUERY, build_get_query, build_list_query

logger = get_logger(__name__)


def default_seeder(conn) -> None:
    seeding.seed(conn, config.seed_race_count, config.seed_meeting_count)


class RacesRepository:
    """
    Repository for race data access.
    Encapsulates all SQL and row mapping for the races table.
    """

    def __init__(
        self,
        conn,
        seeder: Optional[Callable] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.conn = conn
        self.seeder = seeder or default_seeder
        self.clock = clock or utcnow
        self._init_lock = threading.Lock()
        self._initialized = False
        self._init_error: Optional[InitializationError] = None

    def init(self) -> None:
        """
        Seed the store, at most once for the lifetime of the repository.

        Concurrent callers block until the single run finishes and all see
        its outcome; a failure is re-raised to every caller, then and later.

        Raises:
            InitializationError: If seeding failed
        """
        with self._init_lock:
            if not self._initialized:
                logger.info("Seeding races store")
                try:
                    self.seeder(self.conn)
                except Exception as e:
                    logger.error(f"Failed to seed races store: {e}")
                    self._initialized = True
                    self._init_error = InitializationError(f"failed to seed races: {e}")
                    raise self._init_error from e
                # Interrupts propagate without marking the store initialized
                self._initialized = True
                logger.info("Races store seeded")
                return

        if self._init_error is not None:
            raise self._init_error

    def _execute(self, query: str, args: list):
        logger.debug(f"Executing race query with {len(args)} args: {query.strip()}")
        return self.conn.execute(query, args)

    def _map(self, row) -> Optional[Race]:
        try:
            return map_row(row, now=self.clock())
        except RaceMappingError as e:
            logger.error(f"Failed to map race row: {e}")
            raise

    def iter_races(
        self,
        filter: Optional[ListFilter] = None,
        order: Optional[ListOrder] = None,
    ) -> Iterator[Race]:
        """
        Lazily yield races matching the filter, in the requested order.

        The query runs on the first next(); rows are mapped as they are read.
        """
        query, args = build_list_query(BASE_QUERY, filter, order)
        cursor = self._execute(query, args)
        for row in cursor:
            yield self._map(row)

    def list(
        self,
        filter: Optional[ListFilter] = None,
        order: Optional[ListOrder] = None,
    ) -> List[Race]:
        """
        List races matching the filter, in the requested order.

        Returns an empty list when nothing matches. Ordered by advertised
        start time when no order is given.
        """
        return list(self.iter_races(filter, order))

    def get(self, race_id: str) -> Race:
        """
        Get a race by its id.

        Raises:
            RaceNotFoundError: If no race has the given id
        """
        query, args = build_get_query(BASE_QUERY, race_id)
        cursor = self._execute(query, args)

        race = self._map(cursor.fetchone())
        if race is None:
            logger.info(f"Race {race_id} not found")
            raise RaceNotFoundError(race_id)
        return race
