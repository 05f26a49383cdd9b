"""Tests for the in-memory resolver cache."""

from __future__ import annotations

import threading

import pytest

from assetwise.model import OBJECT_TYPE, SCHEMA, EntityInfo
from assetwise.resolver import ReadWriteLock, ResolverCache

ITAM = EntityInfo(id="1", name="ITAM", category=SCHEMA)
LAPTOP = EntityInfo(id="42", name="Laptop", category=OBJECT_TYPE, parent_id="1")


def test_resolve_by_id_then_by_name() -> None:
    cache = ResolverCache()
    cache.record(SCHEMA, ITAM)

    assert cache.resolve(SCHEMA, "1") is ITAM
    assert cache.resolve(SCHEMA, "itam") is ITAM
    assert cache.resolve(SCHEMA, "ITAM") is ITAM
    assert cache.resolve(SCHEMA, "missing") is None


def test_id_lookup_wins_over_name_lookup() -> None:
    cache = ResolverCache()
    numeric_name = EntityInfo(id="7", name="1", category=SCHEMA)
    cache.record(SCHEMA, numeric_name)
    cache.record(SCHEMA, ITAM)

    assert cache.resolve(SCHEMA, "1") is ITAM


def test_object_types_recorded_with_compound_and_bare_names() -> None:
    cache = ResolverCache()
    cache.record(OBJECT_TYPE, LAPTOP, schema_name="ITAM")

    snapshot = cache.snapshot()

    assert snapshot.types_by_id == {"42": LAPTOP}
    assert snapshot.types_by_name == {"laptop": LAPTOP, "itam/laptop": LAPTOP}
    assert cache.resolve(OBJECT_TYPE, "ITAM/Laptop") is LAPTOP


def test_every_id_entry_has_a_paired_name_entry() -> None:
    cache = ResolverCache()
    cache.record(SCHEMA, ITAM)
    cache.record_many(
        OBJECT_TYPE,
        [LAPTOP, EntityInfo(id="43", name="Monitor", category=OBJECT_TYPE, parent_id="1")],
        schema_name="ITAM",
    )

    snapshot = cache.snapshot()

    for entity in snapshot.schemas_by_id.values():
        assert entity in snapshot.schemas_by_name.values()
    for entity in snapshot.types_by_id.values():
        assert entity in snapshot.types_by_name.values()


def test_record_rejects_category_mismatch() -> None:
    cache = ResolverCache()

    with pytest.raises(ValueError, match="not a schema"):
        cache.record(SCHEMA, LAPTOP)

    assert cache.counts() == {"schemas": 0, "object_types": 0}


def test_snapshot_is_not_affected_by_later_mutation() -> None:
    cache = ResolverCache()
    cache.record(SCHEMA, ITAM)
    snapshot = cache.snapshot()

    cache.record(SCHEMA, EntityInfo(id="2", name="HR", category=SCHEMA))

    assert list(snapshot.schemas_by_id) == ["1"]
    assert cache.counts()["schemas"] == 2


def test_restore_and_clear() -> None:
    source = ResolverCache()
    source.record(SCHEMA, ITAM)
    source.record(OBJECT_TYPE, LAPTOP, schema_name="ITAM")

    target = ResolverCache()
    target.restore(source.snapshot())
    assert target.resolve(OBJECT_TYPE, "itam/laptop") is LAPTOP

    target.clear()
    assert target.counts() == {"schemas": 0, "object_types": 0}
    assert source.counts() == {"schemas": 1, "object_types": 1}


def test_concurrent_writers_keep_tables_paired() -> None:
    cache = ResolverCache()

    def writer(offset: int) -> None:
        for index in range(200):
            entity_id = str(offset * 1000 + index)
            cache.record(SCHEMA, EntityInfo(id=entity_id, name=f"schema-{entity_id}", category=SCHEMA))
            assert cache.resolve(SCHEMA, entity_id) is not None

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    snapshot = cache.snapshot()
    assert len(snapshot.schemas_by_id) == 800
    assert len(snapshot.schemas_by_name) == 800


def test_read_write_lock_excludes_readers_during_write() -> None:
    lock = ReadWriteLock()
    writer_active = threading.Event()
    release_writer = threading.Event()
    observed: list[str] = []

    def write() -> None:
        with lock.write():
            writer_active.set()
            release_writer.wait(timeout=5)
            observed.append("write")

    def read() -> None:
        with lock.read():
            observed.append("read")

    writer_thread = threading.Thread(target=write)
    writer_thread.start()
    assert writer_active.wait(timeout=5)

    reader_thread = threading.Thread(target=read)
    reader_thread.start()
    reader_thread.join(timeout=0.1)
    assert observed == []

    release_writer.set()
    writer_thread.join(timeout=5)
    reader_thread.join(timeout=5)
    assert observed == ["write", "read"]
