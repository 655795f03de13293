import logging

import pytest
from sqlalchemy.exc import IntegrityError

from people_mapper import Person, UnsavedEntityError, AlreadySavedError, UnknownFieldError, DataIntegrityError
from people_mapper.asyncio import AsyncPersonMapper, AsyncDatabase


class TestAsyncMapper:
    async def test_insert_update_find(self, async_conn):
        person = Person("Khurram", "Virani", "kv@gmail.com")
        await AsyncPersonMapper.save(person, async_conn)
        assert person.id == 1

        person.first_name = "K"
        person.last_name = "V"
        await AsyncPersonMapper.save(person, async_conn)

        assert person.id == 1
        assert await AsyncPersonMapper.count(async_conn) == 1

        found = await AsyncPersonMapper.find(1, async_conn)
        assert found == person

    async def test_lookups(self, async_conn):
        for first, last in [("Ann", "Smith"), ("Bob", "Smith"), ("Cid", "Jones")]:
            await AsyncPersonMapper.save(Person(first, last, f"{first}@x.com"), async_conn)

        smiths = await AsyncPersonMapper.find_all_by_last_name("Smith", async_conn)
        assert [p.first_name for p in smiths] == ["Ann", "Bob"]

        assert await AsyncPersonMapper.find_all_by_first_name("Nobody", async_conn) == []

        cid = await AsyncPersonMapper.find_by("Cid@x.com", async_conn)
        assert cid.id == 3
        assert await AsyncPersonMapper.find_by("cid@x.com", async_conn) is None
        assert await AsyncPersonMapper.find(99, async_conn) is None

    async def test_destroy(self, async_conn):
        person = await AsyncPersonMapper.save(Person("a", "b", "c@d.e"), async_conn)

        assert await AsyncPersonMapper.destroy(person, async_conn) == 1
        assert await AsyncPersonMapper.find(person.id, async_conn) is None
        assert person.id == 1

        assert await AsyncPersonMapper.destroy(person, async_conn) == 0

    async def test_destroy_unsaved(self, async_conn):
        with pytest.raises(UnsavedEntityError):
            await AsyncPersonMapper.destroy(Person("a", "b", "c@d.e"), async_conn)

    async def test_insert_saved_person(self, async_conn):
        person = await AsyncPersonMapper.save(Person("a", "b", "c@d.e"), async_conn)

        with pytest.raises(AlreadySavedError):
            await AsyncPersonMapper.insert(person, async_conn)

        assert person.id == 1
        assert await AsyncPersonMapper.count(async_conn) == 1

    async def test_save_after_destroy(self, async_conn):
        person = await AsyncPersonMapper.save(Person("a", "b", "c@d.e"), async_conn)
        await AsyncPersonMapper.destroy(person, async_conn)

        person.first_name = "again"
        assert await AsyncPersonMapper.update(person, async_conn) == 0
        assert await AsyncPersonMapper.save(person, async_conn) is person

        assert person.id == 1
        assert await AsyncPersonMapper.count(async_conn) == 0

    async def test_find_all_by_unknown_field(self, async_conn):
        with pytest.raises(UnknownFieldError):
            await AsyncPersonMapper.find_all_by("password", "x", async_conn)

    async def test_find_by_duplicate_emails_in_table(self, async_loose_conn):
        for first in ("a", "b"):
            await AsyncPersonMapper.save(Person(first, "x", "dup@x.com"), async_loose_conn)

        with pytest.raises(DataIntegrityError):
            await AsyncPersonMapper.find_by("dup@x.com", async_loose_conn)

    async def test_duplicate_email(self, async_engine):
        async with async_engine.connect() as conn:
            await AsyncPersonMapper.save(Person("a", "b", "same@x.com"), conn)

            with pytest.raises(IntegrityError):
                await AsyncPersonMapper.save(Person("c", "d", "same@x.com"), conn)


class TestAsyncDatabase:
    async def test_connect(self, tmp_path, caplog):
        db = AsyncDatabase(f"sqlite+aiosqlite:///{tmp_path / 'db.sqlite'}")
        with caplog.at_level(logging.DEBUG, logger="people_mapper"):
            await db.create_schema()

        assert "Creating table 'people'" in caplog.text

        async with db.begin() as conn:
            await AsyncPersonMapper.save(Person("a", "b", "c@d.e"), conn)

        async with db.connect() as conn:
            assert await AsyncPersonMapper.count(conn) == 1

        await db.dispose()
