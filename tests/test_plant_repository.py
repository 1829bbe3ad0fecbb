from datetime import date

import pytest

from conftest import FlakyStorage
from my_garden.modules.plant_management.domain.models.plant import Plant
from my_garden.modules.plant_management.infrastructure.persistence.codec import PlantListCodec
from my_garden.modules.plant_management.infrastructure.persistence.plant_repository_impl import (
    SnapshotPlantRepository,
)
from my_garden.shared.core.exceptions import (
    DecodingError,
    EncodingError,
    PlantNotFoundError,
    ValidationError,
)

KEY = "plants_key"


class BrokenEncoder(PlantListCodec):
    def encode(self, plants):
        raise EncodingError("cannot encode")


def plant(name: str) -> Plant:
    return Plant(name=name, watering_frequency_days=3, last_watered_date=date(2024, 1, 1))


@pytest.fixture
async def repository(storage) -> SnapshotPlantRepository:
    repo = SnapshotPlantRepository(storage, key=KEY)
    await repo.load()
    return repo


async def names(repo) -> list:
    return [p.name for p in await repo.list_all()]


async def test_missing_slot_loads_as_empty_garden(storage):
    result = await SnapshotPlantRepository(storage, key=KEY).load()

    assert result.success
    assert result.value == []


async def test_append_persists_whole_collection(storage, repository):
    assert (await repository.append(plant("A"))).persisted
    assert (await repository.append(plant("B"))).persisted

    reloaded = SnapshotPlantRepository(storage, key=KEY)
    result = await reloaded.load()

    assert result.success
    assert [p.name for p in result.value] == ["A", "B"]


async def test_remove_first_keeps_relative_order(repository):
    for name in ("A", "B", "C"):
        await repository.append(plant(name))

    removed, persist = await repository.remove_at([0])

    assert [p.name for p in removed] == ["A"]
    assert persist.persisted
    assert await names(repository) == ["B", "C"]


async def test_remove_several_positions(repository):
    for name in ("A", "B", "C", "D"):
        await repository.append(plant(name))

    removed, _ = await repository.remove_at([3, 0, 3])

    assert [p.name for p in removed] == ["A", "D"]
    assert await names(repository) == ["B", "C"]


async def test_out_of_range_index_mutates_nothing(storage, repository):
    await repository.append(plant("A"))
    before = storage.snapshot()

    with pytest.raises(ValidationError):
        await repository.remove_at([0, 4])

    assert await names(repository) == ["A"]
    assert storage.snapshot() == before


async def test_update_images_appends_in_order(repository):
    await repository.append(plant("A"))
    plant_id = (await repository.list_all())[0].plant_id

    await repository.update_images(plant_id, b"first")
    updated, persist = await repository.update_images(plant_id, b"second")

    assert persist.persisted
    assert updated.images == [b"first", b"second"]
    assert (await repository.get_by_id(plant_id)).images == [b"first", b"second"]


async def test_update_images_unknown_plant(repository):
    with pytest.raises(PlantNotFoundError):
        await repository.update_images("missing", b"img")


async def test_returned_plants_are_copies(repository):
    await repository.append(plant("A"))
    listed = (await repository.list_all())[0]

    listed.add_image(b"not stored")

    assert (await repository.get_by_id(listed.plant_id)).images == []


async def test_write_failure_keeps_previous_blob_and_memory_change(storage, repository):
    await repository.append(plant("A"))
    persisted_blob = storage.snapshot()[KEY]
    storage.fail_writes = True

    persist = await repository.append(plant("B"))

    assert not persist.persisted
    assert persist.error.error_code == "STORAGE_ERROR"
    assert await names(repository) == ["A", "B"]
    assert storage.snapshot()[KEY] == persisted_blob


async def test_encode_failure_keeps_previous_blob(storage):
    good = SnapshotPlantRepository(storage, key=KEY)
    await good.append(plant("A"))
    persisted_blob = storage.snapshot()[KEY]

    broken = SnapshotPlantRepository(storage, key=KEY, codec=BrokenEncoder())
    await broken.load()
    persist = await broken.append(plant("B"))

    assert not persist.persisted
    assert isinstance(persist.error, EncodingError)
    assert storage.snapshot()[KEY] == persisted_blob


async def test_corrupt_blob_loads_as_empty_garden():
    storage = FlakyStorage({KEY: b"\x00garbage"})
    repo = SnapshotPlantRepository(storage, key=KEY)

    result = await repo.load()

    assert not result.success
    assert result.value == []
    assert isinstance(result.error, DecodingError)
    assert await repo.list_all() == []
