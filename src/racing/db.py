"""
Database connection utilities.

Provides psycopg connections to the races store. Repositories receive a
connection explicitly; this module only knows how to open one.

For testing, use set_connection_override() to inject a connection
that will be used instead of creating new ones. This enables
transaction rollback between tests.
"""

from contextlib import contextmanager

import psycopg

from racing.config import config

# =============================================================================
# Connection Override (for testing)
# =============================================================================

_connection_override: psycopg.Connection | None = None


def set_connection_override(conn: psycopg.Connection) -> None:
    """
    Set a connection to use instead of creating new ones.

    Used by test fixtures to ensure all database operations run
    within a single transaction that can be rolled back.

    Args:
        conn: The connection to use for all subsequent operations
    """
    global _connection_override
    _connection_override = conn


def clear_connection_override() -> None:
    """Clear the connection override, restoring normal behavior."""
    global _connection_override
    _connection_override = None


# =============================================================================
# Connection Management
# =============================================================================


def connect(url: str | None = None) -> psycopg.Connection:
    """
    Open a new connection to the races store.

    Args:
        url: Connection string, defaults to config.database_url

    Returns:
        An open psycopg.Connection returning tuple rows; statements run
        in a transaction until commit() or rollback()
    """
    return psycopg.connect(url or config.database_url)


@contextmanager
def get_connection():
    """
    Context manager for database connections.

    In normal operation:
        - Opens a new connection
        - Commits on successful exit
        - Rolls back on exception
        - Closes connection when done

    With override set (testing):
        - Returns the override connection
        - Does NOT commit, rollback, or close
        - Caller (test fixture) manages the transaction

    Usage:
        with get_connection() as conn:
            repo = RacesRepository(conn)
            races = repo.list()
    """
    if _connection_override is not None:
        yield _connection_override
        return

    conn = connect()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
