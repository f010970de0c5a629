"""
Shared cursor handling for repositories

Every repository method accepts an optional `conn`. When the caller passes
one (a service running a transaction) the method works inside it and leaves
commit/rollback to the caller. Without one, the method opens its own
connection, commits if it succeeded and closes it.
"""
from contextlib import contextmanager
from typing import Iterator

from orderdesk.core.database import get_db_connection_dict_with_retry


@contextmanager
def cursor_scope(conn=None) -> Iterator:
    should_close = conn is None
    if conn is None:
        conn = get_db_connection_dict_with_retry()

    cursor = conn.cursor()
    try:
        yield cursor
        if should_close:
            conn.commit()
    except Exception:
        if should_close:
            conn.rollback()
        raise
    finally:
        cursor.close()
        if should_close:
            conn.close()
