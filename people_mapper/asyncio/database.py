from sqlalchemy.ext.asyncio import create_async_engine

from ..base.schema import create_schema
from ..logger import logger
from ..settings import get_settings


class AsyncDatabase:
    def __init__(self, url=None, echo=None, **engine_kwargs):
        settings = get_settings()
        self.url = url or settings.async_database_url
        echo = settings.echo if echo is None else echo

        logger.debug(f"Creating async engine for {self.url}")
        self.engine = create_async_engine(self.url, echo=echo, **engine_kwargs)

    def connect(self):
        return self.engine.connect()

    def begin(self):
        return self.engine.begin()

    async def create_schema(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(create_schema)

    async def dispose(self):
        await self.engine.dispose()
