"""
SQLAlchemy Core statements for the ``people`` table.

Every value goes through a bound parameter; nothing here formats user input
into SQL text.
"""
from sqlalchemy import select, insert, update, delete, func

from ..errors import AlreadySavedError, UnsavedEntityError, UnknownFieldError
from .entity import Person
from .schema import people, FIELD_NAMES


def _columns():
    return (people.c.id, people.c.first_name, people.c.last_name, people.c.email)


def _require_id(person, operation):
    if not person.is_persisted:
        raise UnsavedEntityError(person, operation)
    return person.id


def insert_stmt(person):
    if person.is_persisted:
        raise AlreadySavedError(person)
    return insert(people).values(**person.values()).returning(people.c.id)


def update_stmt(person):
    pk_value = _require_id(person, "update")
    return (
        update(people)
        .where(people.c.id == pk_value)
        .values(**person.values())
    )


def delete_stmt(person):
    pk_value = _require_id(person, "destroy")
    return delete(people).where(people.c.id == pk_value)


def select_by_id_stmt(pk_value):
    return select(*_columns()).where(people.c.id == pk_value)


def field_column(field):
    if field not in FIELD_NAMES:
        raise UnknownFieldError(field, FIELD_NAMES)
    return people.c[field]


def select_by_field_stmt(field, value):
    column = field_column(field)
    return (
        select(*_columns())
        .where(column == value)
        .order_by(people.c.id)
    )


def count_stmt():
    return select(func.count()).select_from(people)


def materialize(row):
    """
    Build a persisted Person from a fetched (id, first_name, last_name, email) row.
    """
    person = Person(row.first_name, row.last_name, row.email)
    person._mark_persisted(row.id)
    return person
