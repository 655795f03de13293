from sqlalchemy.engine import Connection
from sqlalchemy.exc import MultipleResultsFound

from ..errors import DataIntegrityError
from ..logger import logger
from .entity import Person, Unsaved
from .statements import (
    insert_stmt, update_stmt, delete_stmt,
    select_by_id_stmt, select_by_field_stmt, count_stmt,
    materialize,
)


class PersonMapper:
    """
    Moves Person instances in and out of the ``people`` table.

    The mapper holds no state: every call receives the connection to use and
    runs exactly one statement on it. Committing is left to the caller's
    transaction. Errors raised by the database are not caught.
    """

    @classmethod
    def save(cls, person: Person, conn: Connection) -> Person:
        if isinstance(person.state, Unsaved):
            cls.insert(person, conn)
        else:
            cls.update(person, conn)
        return person

    @staticmethod
    def insert(person: Person, conn: Connection) -> Person:
        logger.debug(f"Inserting {person}")
        pk_value = conn.execute(insert_stmt(person)).scalar_one()
        person._mark_persisted(pk_value)
        return person

    @staticmethod
    def update(person: Person, conn: Connection) -> int:
        stmt = update_stmt(person)
        logger.debug(f"Updating row {person.id}: {person.values()}")

        rowcount = conn.execute(stmt).rowcount
        if rowcount == 0:
            logger.warning(f"Update matched no row for id={person.id}")
        return rowcount

    @staticmethod
    def destroy(person: Person, conn: Connection) -> int:
        """
        Delete the row of a saved person and return the number of deleted rows
        (0 if it was already gone). The person keeps its id afterwards.
        """
        stmt = delete_stmt(person)
        logger.debug(f"Deleting row {person.id}")

        rowcount = conn.execute(stmt).rowcount
        if rowcount == 0:
            logger.warning(f"Delete matched no row for id={person.id}")
        return rowcount

    @staticmethod
    def find(pk_value: int, conn: Connection):
        """
        Return the person with the given id, or ``None`` if not found.
        """
        row = conn.execute(select_by_id_stmt(pk_value)).one_or_none()
        if row is None:
            return None
        return materialize(row)

    @staticmethod
    def find_all_by(field: str, value: str, conn: Connection):
        stmt = select_by_field_stmt(field, value)
        rows = conn.execute(stmt).all()
        logger.debug(f"Found {len(rows)} people where {field}={value!r}")
        return [materialize(row) for row in rows]

    @classmethod
    def find_all_by_first_name(cls, value, conn):
        return cls.find_all_by("first_name", value, conn)

    @classmethod
    def find_all_by_last_name(cls, value, conn):
        return cls.find_all_by("last_name", value, conn)

    @staticmethod
    def find_by(email: str, conn: Connection):
        """
        Return the person with the given email, or ``None`` if not found.
        Emails are unique, so several matching rows raise DataIntegrityError.
        """
        result = conn.execute(select_by_field_stmt("email", email))
        try:
            row = result.one_or_none()
        except MultipleResultsFound as e:
            raise DataIntegrityError(f"Several people share the email {email!r}") from e

        if row is None:
            return None
        return materialize(row)

    @staticmethod
    def count(conn: Connection) -> int:
        return conn.execute(count_stmt()).scalar_one()
