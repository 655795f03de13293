from sqlalchemy.exc import MultipleResultsFound
from sqlalchemy.ext.asyncio import AsyncConnection

from ..base.entity import Person, Unsaved
from ..base.statements import (
    insert_stmt, update_stmt, delete_stmt,
    select_by_id_stmt, select_by_field_stmt, count_stmt,
    materialize,
)
from ..errors import DataIntegrityError
from ..logger import logger


class AsyncPersonMapper:
    """
    Same operations as PersonMapper, awaited on an AsyncConnection.
    """

    @classmethod
    async def save(cls, person: Person, conn: AsyncConnection) -> Person:
        if isinstance(person.state, Unsaved):
            await cls.insert(person, conn)
        else:
            await cls.update(person, conn)
        return person

    @staticmethod
    async def insert(person: Person, conn: AsyncConnection) -> Person:
        logger.debug(f"Inserting {person}")
        result = await conn.execute(insert_stmt(person))
        person._mark_persisted(result.scalar_one())
        return person

    @staticmethod
    async def update(person: Person, conn: AsyncConnection) -> int:
        stmt = update_stmt(person)
        logger.debug(f"Updating row {person.id}: {person.values()}")

        result = await conn.execute(stmt)
        if result.rowcount == 0:
            logger.warning(f"Update matched no row for id={person.id}")
        return result.rowcount

    @staticmethod
    async def destroy(person: Person, conn: AsyncConnection) -> int:
        stmt = delete_stmt(person)
        logger.debug(f"Deleting row {person.id}")

        result = await conn.execute(stmt)
        if result.rowcount == 0:
            logger.warning(f"Delete matched no row for id={person.id}")
        return result.rowcount

    @staticmethod
    async def find(pk_value: int, conn: AsyncConnection):
        result = await conn.execute(select_by_id_stmt(pk_value))
        row = result.one_or_none()
        return materialize(row) if row is not None else None

    @staticmethod
    async def find_all_by(field: str, value: str, conn: AsyncConnection):
        stmt = select_by_field_stmt(field, value)
        result = await conn.execute(stmt)
        return [materialize(row) for row in result.all()]

    @classmethod
    async def find_all_by_first_name(cls, value, conn):
        return await cls.find_all_by("first_name", value, conn)

    @classmethod
    async def find_all_by_last_name(cls, value, conn):
        return await cls.find_all_by("last_name", value, conn)

    @staticmethod
    async def find_by(email: str, conn: AsyncConnection):
        result = await conn.execute(select_by_field_stmt("email", email))
        try:
            row = result.one_or_none()
        except MultipleResultsFound as e:
            raise DataIntegrityError(f"Several people share the email {email!r}") from e

        return materialize(row) if row is not None else None

    @staticmethod
    async def count(conn: AsyncConnection) -> int:
        result = await conn.execute(count_stmt())
        return result.scalar_one()
