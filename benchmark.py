from people_mapper import Database, Person, PersonMapper
from people_mapper.logger import configure_logging
import argparse
import time
import random
from faker import Faker


random.seed(42)
fake = Faker()
Faker.seed(42)


def generate_people(n):
    for i in range(n):
        # prefix keeps emails unique
        yield Person(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            email=f"{i}.{fake.email()}",
        )

def inserts(db, count):
    insert_start = time.time()
    with db.begin() as conn:
        for person in generate_people(count):
            PersonMapper.save(person, conn)
    insert_duration = time.time() - insert_start
    print(f"Inserted {count} people in {insert_duration:.2f} seconds.")
    return insert_duration

def selects(db, count):
    names = [fake.first_name() for _ in range(count)]

    query_start = time.time()
    found = 0
    with db.connect() as conn:
        for name in names:
            found += len(PersonMapper.find_all_by_first_name(name, conn))

    query_duration = time.time() - query_start
    print(f"Executed {count} lookups by first name ({found} matches) in {query_duration:.2f} seconds.")
    return query_duration

def updates(db, random_ids):
    update_start = time.time()
    with db.begin() as conn:
        for rid in random_ids:
            person = PersonMapper.find(rid, conn)
            if person is None:
                continue
            person.first_name = fake.first_name()
            person.last_name = fake.last_name()
            PersonMapper.save(person, conn)
    update_duration = time.time() - update_start
    print(f"Executed {len(random_ids)} updates in {update_duration:.2f} seconds.")
    return update_duration

def deletes(db, random_ids):
    delete_start = time.time()
    with db.begin() as conn:
        for rid in random_ids:
            person = PersonMapper.find(rid, conn)
            if person is not None:
                PersonMapper.destroy(person, conn)
    delete_duration = time.time() - delete_start
    print(f"Deleted {len(random_ids)} people in {delete_duration:.2f} seconds.")
    return delete_duration

def run_benchmark(url=None, count=10_000):
    db = Database(url)
    print(f"Running benchmark: url={db.url}, count={count}")

    db.create_schema()

    elapsed = inserts(db, count)
    elapsed += selects(db, 500)

    sample_size = min(500, count)
    random_ids = random.sample(range(1, count + 1), sample_size)
    elapsed += updates(db, random_ids)

    random_ids = random.sample(range(1, count + 1), sample_size)
    elapsed += deletes(db, random_ids)

    with db.connect() as conn:
        remaining = PersonMapper.count(conn)

    print(f"Total runtime: {elapsed:.2f} seconds, {remaining} people left.")
    db.dispose()



if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--url", default=None, help="Database URL (defaults to PEOPLE_MAPPER_DATABASE_URL)")
    parser.add_argument("--count", type=int, default=10_000)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args()
    configure_logging(args.log_level)
    run_benchmark(args.url, args.count)
