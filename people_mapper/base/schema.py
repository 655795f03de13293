from sqlalchemy import MetaData, Table, Column, Integer, String

from ..logger import logger

TABLE_NAME = "people"
PRIMARY_KEY = "id"
FIELD_NAMES = ("first_name", "last_name", "email")

metadata = MetaData()

people = Table(
    TABLE_NAME, metadata,
    Column(PRIMARY_KEY, Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
)


def create_schema(bind):
    logger.debug(f"Creating table '{TABLE_NAME}'")
    metadata.create_all(bind)


def drop_schema(bind):
    logger.debug(f"Dropping table '{TABLE_NAME}'")
    metadata.drop_all(bind)
