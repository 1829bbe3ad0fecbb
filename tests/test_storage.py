import pytest
import redis

from conftest import FlakyStorage
from my_garden.shared.config.settings import Settings
from my_garden.shared.core.exceptions import DecodingError, StorageError
from my_garden.shared.infrastructure.storage import (
    FileStorage,
    InMemoryStorage,
    RedisStorage,
    SnapshotSlot,
    create_storage,
)


class TextCodec:
    def encode(self, value):
        return value.encode("utf-8")

    def decode(self, blob):
        try:
            return blob.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodingError("not utf-8") from e


async def test_memory_storage_set_get_delete():
    storage = InMemoryStorage()

    assert await storage.get("k") is None
    await storage.set("k", b"v")
    assert await storage.get("k") == b"v"
    assert await storage.delete("k")
    assert not await storage.delete("k")


async def test_file_storage_round_trip(tmp_path):
    storage = FileStorage(tmp_path / "data")

    assert await storage.get("plants_key") is None
    await storage.set("plants_key", b"\x00blob")
    await storage.set("plants_key", b"\x01newer")

    assert await storage.get("plants_key") == b"\x01newer"
    assert sorted(p.name for p in (tmp_path / "data").iterdir()) == ["plants_key.bin"]
    assert await storage.health_check()


async def test_file_storage_sanitizes_keys(tmp_path):
    storage = FileStorage(tmp_path)

    await storage.set("../escape/key", b"x")

    assert await storage.get("../escape/key") == b"x"
    assert all(p.parent == tmp_path for p in tmp_path.iterdir())


async def test_file_storage_delete(tmp_path):
    storage = FileStorage(tmp_path)
    await storage.set("k", b"v")

    assert await storage.delete("k")
    assert not await storage.delete("k")
    assert await storage.get("k") is None


async def test_file_storage_unwritable_directory_raises_storage_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"a file, not a directory")
    storage = FileStorage(blocker / "data")

    with pytest.raises(StorageError):
        await storage.set("k", b"v")


async def test_snapshot_slot_reports_failures_as_values():
    storage = FlakyStorage({"slot": b"\xff\xfe"})
    slot = SnapshotSlot(storage, "slot", TextCodec(), empty=str)

    loaded = await slot.read()
    assert not loaded.success
    assert loaded.value == ""

    storage.fail_writes = True
    written = await slot.write("hello")
    assert not written.persisted
    assert storage.snapshot()["slot"] == b"\xff\xfe"

    storage.fail_writes = False
    assert (await slot.write("hello")).persisted
    assert (await slot.read()).value == "hello"


@pytest.mark.parametrize(
    "backend, expected",
    [("memory", InMemoryStorage), ("file", FileStorage), ("redis", RedisStorage)],
)
def test_create_storage_picks_backend(backend, expected, tmp_path):
    settings = Settings(_env_file=None, STORAGE_BACKEND=backend, STORAGE_DIR=str(tmp_path))

    assert isinstance(create_storage(settings), expected)


class FakeRedis:
    def __init__(self, fail: bool = False):
        self.data = {}
        self.fail = fail
        self.closed = False

    async def get(self, key):
        self._maybe_fail()
        return self.data.get(key)

    async def set(self, key, value):
        self._maybe_fail()
        self.data[key] = value

    async def delete(self, key):
        self._maybe_fail()
        return 1 if self.data.pop(key, None) is not None else 0

    async def ping(self):
        self._maybe_fail()
        return True

    async def aclose(self):
        self.closed = True

    def _maybe_fail(self):
        if self.fail:
            raise redis.ConnectionError("connection refused")


async def test_redis_storage_prefixes_keys():
    client = FakeRedis()
    storage = RedisStorage("redis://localhost:6379/0", client=client)

    await storage.set("plants_key", b"blob")

    assert client.data == {"my_garden:plants_key": b"blob"}
    assert await storage.get("plants_key") == b"blob"
    assert await storage.delete("plants_key")
    assert await storage.health_check()

    await storage.close()
    assert client.closed


async def test_redis_errors_become_storage_errors():
    storage = RedisStorage("redis://localhost:6379/0", client=FakeRedis(fail=True))

    with pytest.raises(StorageError) as excinfo:
        await storage.set("plants_key", b"blob")

    assert excinfo.value.details["operation"] == "set"
    assert not await storage.health_check()
