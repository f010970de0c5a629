"""
PostgreSQL connection utilities

All database access goes through psycopg2 with RealDictCursor so that rows
come back as dictionaries ready to be fed into the domain models.

- get_db_connection_dict(): plain connection
- get_db_connection_dict_with_retry(): connection with backoff on
  OperationalError (dropped SSL connections, pool restarts)
- transaction(): connection scoped to one unit of work, committed on success
  and rolled back on any exception
"""
import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
import psycopg2.extras
from psycopg2.extras import RealDictCursor

from orderdesk.core.config import get_settings

logger = logging.getLogger(__name__)

# UUID columns come back as uuid.UUID
psycopg2.extras.register_uuid()


def _database_url() -> str:
    database_url = get_settings().DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")
    return database_url


def get_db_connection_dict():
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Example:
        conn = get_db_connection_dict()
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM products")
        results = cursor.fetchall()  # Returns list of dicts
        cursor.close()
        conn.close()
    """
    settings = get_settings()
    return psycopg2.connect(
        _database_url(),
        cursor_factory=RealDictCursor,
        connect_timeout=settings.CONNECTION_TIMEOUT,
    )


def get_db_connection_dict_with_retry(max_retries: Optional[int] = None, retry_delay: Optional[float] = None):
    """
    Get a psycopg2 connection with RealDictCursor and automatic retry

    Args:
        max_retries: Maximum number of connection attempts (default: DB_CONNECT_RETRIES)
        retry_delay: Initial delay between retries in seconds (default: DB_RETRY_DELAY)

    Returns:
        psycopg2 connection with RealDictCursor

    Raises:
        psycopg2.OperationalError: If all retry attempts fail
    """
    settings = get_settings()
    max_retries = max_retries or settings.DB_CONNECT_RETRIES
    retry_delay = settings.DB_RETRY_DELAY if retry_delay is None else retry_delay

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            return get_db_connection_dict()

        except psycopg2.OperationalError as e:
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")

            # Don't retry on last attempt
            if attempt == max_retries:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

            # Exponential backoff
            delay = retry_delay * (2 ** (attempt - 1))
            logger.info(f"Retrying in {delay:.2f} seconds...")
            time.sleep(delay)


@contextmanager
def transaction() -> Iterator:
    """
    Unit of work: one connection, one transaction

    Usage:
        with transaction() as conn:
            repo.insert(order, conn=conn)
            repo.decrement_stock(product_id, 2, conn=conn)
        # committed here, or rolled back if anything raised
    """
    conn = get_db_connection_dict_with_retry()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def check_database() -> float:
    """Run SELECT 1 and return the round trip in milliseconds"""
    conn = get_db_connection_dict_with_retry(max_retries=1, retry_delay=0)
    cursor = conn.cursor()
    try:
        start = time.time()
        cursor.execute("SELECT 1")
        cursor.fetchone()
        return round((time.time() - start) * 1000, 2)
    finally:
        cursor.close()
        conn.close()
