"""
Infrastructure: Postgres Find User Repository

Concrete implementation of IFindUserRepository reading rows through a
SQLAlchemy engine.
"""

import uuid
from typing import List, Optional

from sqlalchemy import Engine, column, select, table
from sqlalchemy.exc import SQLAlchemyError

from record_sync.domain.exceptions import RequestError
from record_sync.domain.user.entities import User
from record_sync.logging_utils import StructuredLogger
from record_sync.models import ComponentType, MessageDirection


class PostgresFindUserRepository:
    """
    Reads users with a fixed query:

        SELECT id, name, email, status_code FROM <table>

    Every row goes through the User constructor; one invalid row aborts
    the whole read.
    """

    def __init__(self, engine: Engine, table_name: str = "user", schema: Optional[str] = None):
        """
        Args:
            engine: Shared SQLAlchemy engine
            table_name: Users table ("user" is quoted automatically)
            schema: Optional schema qualifying the table
        """
        self.engine = engine
        self.users = table(
            table_name,
            column("id"),
            column("name"),
            column("email"),
            column("status_code"),
            schema=schema,
        )
        self.logger = StructuredLogger(ComponentType.USER_EXPORT)

    def find_all(self) -> List[User]:
        trace_id = str(uuid.uuid4())
        query = select(self.users)

        self.logger.log_message(
            trace_id=trace_id,
            direction=MessageDirection.REQUEST,
            operation="user_find_all",
            payload={"query": str(query)},
            target={"table": self.users.fullname},
        )

        try:
            with self.engine.connect() as connection:
                rows = connection.execute(query).all()
        except SQLAlchemyError as e:
            self.logger.logger.error(f"User query failed: {e}")
            raise RequestError(str(e)) from e

        self.logger.log_message(
            trace_id=trace_id,
            direction=MessageDirection.RESPONSE,
            operation="user_find_all",
            payload={"row_count": len(rows)},
            target={"table": self.users.fullname},
        )

        return [
            User(
                id=row.id,
                name=row.name,
                email=row.email,
                status_code=row.status_code,
            )
            for row in rows
        ]
