import uuid

import pytest

from catalog_store.core.errors import IdentifierConflictError, InvalidInputError, StorageError
from catalog_store.database import storage
from catalog_store.database.storage import JsonRecordStore


@pytest.fixture
def store(tmp_path):
    return JsonRecordStore(tmp_path / "records", label="cart")


def test_write_then_read_returns_same_document(store):
    document = {"cartId": "abc", "cartName": "Weekly", "totalPrice": 12.5, "product": []}
    store.write("abc", document)

    assert store.exists("abc")
    assert store.read("abc") == document
    assert (store.directory / "abc.json").is_file()


def test_write_overwrites_whole_file(store):
    store.write("abc", {"cartName": "first", "extra": True})
    store.write("abc", {"cartName": "second"})

    assert store.read("abc") == {"cartName": "second"}


def test_write_leaves_no_temp_files(store):
    store.write("abc", {"a": 1})

    assert sorted(p.name for p in store.directory.iterdir()) == ["abc.json"]


def test_read_malformed_json_raises_storage_error(store):
    store.ensure_directory()
    (store.directory / "broken.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageError):
        store.read("broken")


def test_read_non_object_raises_storage_error(store):
    store.ensure_directory()
    (store.directory / "list.json").write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(StorageError):
        store.read("list")


def test_unserializable_document_raises_storage_error(store):
    with pytest.raises(StorageError):
        store.write("abc", {"value": object()})
    assert not store.exists("abc")


@pytest.mark.parametrize("identifier", ["", "../etc/passwd", "a/b", ".hidden", "a\\b"])
def test_path_for_rejects_unsafe_identifiers(store, identifier):
    with pytest.raises(InvalidInputError):
        store.path_for(identifier)


def test_list_identifiers_only_returns_json_records(store):
    store.write("one", {})
    store.write("two", {})
    (store.directory / "notes.txt").write_text("ignore me")
    (store.directory / ".one.123.tmp").write_text("{}")

    assert sorted(store.list_identifiers()) == ["one", "two"]


def test_list_on_missing_directory_is_empty(store):
    assert store.list_identifiers() == []
    assert store.read_all() == []


def test_delete_removes_file(store):
    store.write("abc", {})
    store.delete("abc")

    assert not store.exists("abc")


def test_delete_missing_file_raises_os_error(store):
    store.ensure_directory()
    with pytest.raises(OSError):
        store.delete("missing")


def test_new_identifier_is_unused_uuid(store):
    identifier = store.new_identifier()

    assert str(uuid.UUID(identifier)) == identifier
    assert not store.exists(identifier)


def test_new_identifier_retries_after_collision(store, monkeypatch):
    taken = uuid.UUID("00000000-0000-4000-8000-000000000001")
    free = uuid.UUID("00000000-0000-4000-8000-000000000002")
    store.write(str(taken), {})
    candidates = iter([taken, free])
    monkeypatch.setattr(storage.uuid, "uuid4", lambda: next(candidates))

    assert store.new_identifier(max_attempts=3) == str(free)


def test_new_identifier_raises_conflict_when_all_attempts_collide(store, monkeypatch):
    taken = uuid.UUID("00000000-0000-4000-8000-000000000001")
    store.write(str(taken), {})
    monkeypatch.setattr(storage.uuid, "uuid4", lambda: taken)

    with pytest.raises(IdentifierConflictError):
        store.new_identifier(max_attempts=3)


def test_exists_is_false_for_over_long_identifier(store):
    store.ensure_directory()

    assert store.exists("x" * 300) is False


def test_read_invalid_utf8_raises_storage_error(store):
    store.ensure_directory()
    (store.directory / "binary.json").write_bytes(b'{"cartName": "\xff\xfe"}')

    with pytest.raises(StorageError):
        store.read("binary")


def test_read_unreadable_path_raises_storage_error(store):
    (store.directory / "folder.json").mkdir(parents=True)

    with pytest.raises(StorageError):
        store.read("folder")


def test_lock_entries_are_released(store):
    with store.lock("abc"):
        assert "abc" in store._locks

    assert store._locks == {}


def test_lock_entry_released_when_body_raises(store):
    with pytest.raises(RuntimeError):
        with store.lock("abc"):
            raise RuntimeError("boom")

    assert store._locks == {}
