import pytest

from repositories.models import (
    DEFAULT_DESTINATION_ICON,
    DestinationCreate,
    DestinationType,
    DestinationUpdate,
)


def _nepal(**overrides):
    data = {
        "name": "Nepal",
        "type": "international",
        "imageUrl": "u",
        "formUrl": "f",
    }
    data.update(overrides)
    return DestinationCreate(**data)


@pytest.mark.asyncio
async def test_create_applies_defaults(empty_storage):
    repo = empty_storage.destinations

    destination = await repo.create(_nepal())

    assert destination.id
    assert destination.icon == DEFAULT_DESTINATION_ICON
    assert destination.is_active is True
    assert destination.created_at is not None


@pytest.mark.asyncio
async def test_create_with_empty_icon_uses_default(empty_storage):
    destination = await empty_storage.destinations.create(_nepal(icon=""))

    assert destination.icon == DEFAULT_DESTINATION_ICON


@pytest.mark.asyncio
async def test_create_keeps_explicit_icon_and_inactive_flag(empty_storage):
    destination = await empty_storage.destinations.create(
        _nepal(icon="bi-airplane", isActive=False)
    )

    assert destination.icon == "bi-airplane"
    assert destination.is_active is False
    assert await empty_storage.destinations.get_all() == []


@pytest.mark.asyncio
async def test_soft_delete_hides_from_listings_but_keeps_record(storage):
    repo = storage.destinations
    destination = await repo.create(_nepal())

    international = await repo.get_by_type(DestinationType.INTERNATIONAL)
    assert destination.id in [d.id for d in international]

    assert await repo.delete(destination.id) is True

    international = await repo.get_by_type(DestinationType.INTERNATIONAL)
    assert destination.id not in [d.id for d in international]
    assert destination.id not in [d.id for d in await repo.get_all()]

    deleted = await repo.get_by_id(destination.id)
    assert deleted is not None
    assert deleted.is_active is False
    assert deleted.name == "Nepal"


@pytest.mark.asyncio
async def test_get_by_type_accepts_plain_string(storage):
    domestic = await storage.destinations.get_by_type("domestic")

    assert domestic
    assert all(d.type == DestinationType.DOMESTIC for d in domestic)


@pytest.mark.asyncio
async def test_get_by_type_unknown_type_returns_empty(storage):
    assert await storage.destinations.get_by_type("bogus") == []


@pytest.mark.asyncio
async def test_update_merges_patch(empty_storage):
    repo = empty_storage.destinations
    destination = await repo.create(_nepal())

    updated = await repo.update(
        destination.id, DestinationUpdate(name="Nepal & Bhutan", icon=None)
    )

    assert updated.name == "Nepal & Bhutan"
    assert updated.icon == DEFAULT_DESTINATION_ICON
    assert updated.form_url == "f"
    assert updated.created_at == destination.created_at
    assert (await repo.get_by_id(destination.id)).name == "Nepal & Bhutan"


@pytest.mark.asyncio
async def test_update_can_reactivate(empty_storage):
    repo = empty_storage.destinations
    destination = await repo.create(_nepal())
    await repo.delete(destination.id)

    await repo.update(destination.id, DestinationUpdate(is_active=True))

    assert [d.id for d in await repo.get_all()] == [destination.id]


@pytest.mark.asyncio
async def test_missing_destination_is_absent_not_an_error(empty_storage):
    repo = empty_storage.destinations

    assert await repo.get_by_id("missing") is None
    assert await repo.update("missing", DestinationUpdate(name="x")) is None
    assert await repo.delete("missing") is False
