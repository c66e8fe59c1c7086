from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_one
from .model import User
from .repository import UserRepository

_SELECT_USER = """
    SELECT user_id, full_name, username, password_hash, role, is_active
    FROM users
"""


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=int(row["user_id"]),
        full_name=row["full_name"],
        username=row["username"],
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        is_active=bool(row.get("is_active", True)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _one(self, where: str, value: Any) -> Optional[User]:
        row = query_one(self._conn_factory, f"{_SELECT_USER} WHERE {where}=%s", (value,))
        return _to_user(row) if row else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._one("user_id", user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._one("username", username)
