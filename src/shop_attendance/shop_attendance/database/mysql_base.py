"""Statement helpers shared by the MySQL repositories.

Every call opens its own short-lived connection; a statement either commits
as a whole or is rolled back before the error propagates.
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence

from .connection import DatabaseConnection

Row = Dict[str, Any]


@dataclass(frozen=True)
class WriteResult:
    rowcount: int
    lastrowid: Optional[int]


@contextmanager
def transaction(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Yield a buffered dictionary cursor bound to a fresh connection."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True, buffered=True)
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def query_one(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
    with transaction(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return cur.fetchone() or None


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> List[Row]:
    with transaction(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return list(cur.fetchall() or [])


def execute(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> WriteResult:
    with transaction(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        lastrowid = cur.lastrowid
        return WriteResult(
            rowcount=cur.rowcount,
            lastrowid=int(lastrowid) if lastrowid else None,
        )
