import asyncio
import json

import pytest

from conftest import make_entry
from error import PersistenceError
from service.contact_store import JsonFileContactStore


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "contacts.json"


@pytest.fixture
def store(log_path):
    return JsonFileContactStore(str(log_path))


def test_missing_log_reads_as_empty(store, log_path):
    assert asyncio.run(store.read_all()) == []
    assert not log_path.exists()


def test_sequential_appends_keep_submission_order(store, log_path):
    submitted = [make_entry(name=f"Sender {i}", message=f"Message number {i}") for i in range(5)]

    async def run():
        for entry in submitted:
            await store.append(entry)
        return await store.read_all()

    stored = asyncio.run(run())

    assert stored == submitted
    records = json.loads(log_path.read_text())
    assert [r["name"] for r in records] == [f"Sender {i}" for i in range(5)]
    assert set(records[0]) == {"name", "email", "message", "date"}


def test_concurrent_appends_lose_nothing(store):
    submitted = [make_entry(name=f"Sender {i}") for i in range(25)]

    async def run():
        await asyncio.gather(*(store.append(entry) for entry in submitted))
        return await store.read_all()

    stored = asyncio.run(run())

    assert len(stored) == 25
    assert {e.name for e in stored} == {e.name for e in submitted}


def test_corrupt_log_raises_and_is_left_untouched(store, log_path):
    log_path.write_text("this is not json")

    with pytest.raises(PersistenceError):
        asyncio.run(store.append(make_entry()))

    assert log_path.read_text() == "this is not json"


def test_log_that_is_not_a_list_is_rejected(store, log_path):
    log_path.write_text(json.dumps({"name": "Amina"}))

    with pytest.raises(PersistenceError):
        asyncio.run(store.read_all())


def test_log_with_malformed_entry_is_rejected(store, log_path):
    log_path.write_text(json.dumps([{"name": "Amina"}]))

    with pytest.raises(PersistenceError):
        asyncio.run(store.append(make_entry()))


def test_existing_log_is_extended(store, log_path):
    log_path.write_text(json.dumps([make_entry(name="Earlier").to_record()]))

    asyncio.run(store.append(make_entry(name="Later")))

    names = [r["name"] for r in json.loads(log_path.read_text())]
    assert names == ["Earlier", "Later"]


def test_write_failure_raises_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = JsonFileContactStore(str(blocker / "contacts.json"))

    with pytest.raises(PersistenceError):
        asyncio.run(store.append(make_entry()))
