from sqlalchemy import create_engine

from ..logger import logger
from ..settings import get_settings
from .schema import create_schema


class Database:
    """
    Owns the engine and hands out connections to the mapper.

    ``connect()`` is the accessor the mapper expects callers to use: it
    returns a live ``Connection`` usable as a context manager. ``begin()``
    returns one wrapped in a transaction that commits on exit.
    """

    def __init__(self, url=None, echo=None, **engine_kwargs):
        settings = get_settings()
        self.url = url or settings.database_url
        echo = settings.echo if echo is None else echo

        logger.debug(f"Creating engine for {self.url}")
        self.engine = create_engine(self.url, echo=echo, **engine_kwargs)

    def connect(self):
        return self.engine.connect()

    def begin(self):
        return self.engine.begin()

    def create_schema(self):
        create_schema(self.engine)

    def dispose(self):
        self.engine.dispose()
