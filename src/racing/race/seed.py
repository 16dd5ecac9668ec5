"""
Schema and dummy data for the races table.

Seeding is idempotent: ids are deterministic and inserts skip rows that
already exist.
"""

import random
from datetime import datetime, timedelta, timezone
from typing import Optional

from racing.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS races (
    id                      TEXT PRIMARY KEY,
    meeting_id              TEXT NOT NULL,
    name                    TEXT NOT NULL,
    number                  INTEGER NOT NULL,
    visible                 BOOLEAN NOT NULL DEFAULT TRUE,
    advertised_start_time   TIMESTAMPTZ NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_races_meeting ON races(meeting_id);
CREATE INDEX IF NOT EXISTS idx_races_start ON races(advertised_start_time);
"""

INSERT_SQL = """
    INSERT INTO races (id, meeting_id, name, number, visible, advertised_start_time)
    VALUES (%s, %s, %s, %s, %s, %s)
    ON CONFLICT (id) DO NOTHING
"""

# Start times are spread across this window either side of now
SEED_WINDOW = timedelta(days=2)

RACE_NAMES = [
    "Maiden Plate",
    "Handicap",
    "Benchmark",
    "Class 1",
    "Group 3 Stakes",
    "Sprint",
    "Cup",
    "Trial",
]


def create_schema(conn) -> None:
    """Create the races table if it does not already exist."""
    conn.execute(SCHEMA_SQL)


def dummy_races(
    count: int,
    meetings: int,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> list[tuple]:
    """Generate insert parameter tuples for `count` dummy races."""
    rng = rng or random.Random()
    now = now or datetime.now(timezone.utc)
    window = int(SEED_WINDOW.total_seconds())

    rows = []
    for i in range(1, count + 1):
        start = now + timedelta(seconds=rng.randint(-window, window))
        rows.append(
            (
                str(i),
                str(rng.randint(1, meetings)),
                f"{rng.choice(RACE_NAMES)} {i}",
                rng.randint(1, 12),
                rng.random() < 0.8,
                start,
            )
        )
    return rows


def seed(conn, count: int, meetings: int, rng: Optional[random.Random] = None) -> int:
    """
    Create the schema and insert dummy races.

    Args:
        conn: Connection to the races store
        count: Number of races to generate
        meetings: Number of distinct meeting ids to spread them across
        rng: Random source, for reproducible data

    Returns:
        Number of rows offered for insert

    Raises:
        ValueError: If count is negative or meetings is less than 1
    """
    if count < 0:
        raise ValueError(f"race count must not be negative, got {count}")
    if meetings < 1:
        raise ValueError(f"meeting count must be at least 1, got {meetings}")

    create_schema(conn)
    rows = dummy_races(count, meetings, rng=rng)
    with conn.cursor() as cur:
        cur.executemany(INSERT_SQL, rows)
    logger.info(f"Seeded {len(rows)} races across {meetings} meetings")
    return len(rows)
