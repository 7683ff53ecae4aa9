import pytest

from hasmany.protocols.model import ChildModelProtocol, InstanceProtocol
from hasmany.testing import MemoryModel

pytestmark = pytest.mark.anyio


class Track(MemoryModel):
    class Meta:
        tablename = "tracks"


class Untitled(MemoryModel):
    pass


@pytest.fixture(autouse=True)
def reset_records():
    Track.reset()
    yield
    Track.reset()


def test_meta():
    assert Track.meta.tablename == "tracks"
    assert Untitled.meta.tablename == "untitleds"


def test_stores_are_per_class():
    Track.reset([{"title": "a"}])

    assert Untitled.records == []
    assert Track.records == [{"title": "a", "id": 1}]


def test_satisfies_the_model_contracts():
    assert isinstance(Track, ChildModelProtocol)
    assert isinstance(Track(title="a"), InstanceProtocol)


async def test_save_inserts_then_updates():
    track = Track(title="a")

    await track.save()
    assert track.id == 1

    track.title = "b"
    await track.save()

    assert Track.records == [{"id": 1, "title": "b"}]


async def test_ids_are_not_reused():
    Track.reset([{"title": "a"}, {"title": "b"}])
    await Track.remove_one({"id": 1})

    track = await Track.create({"title": "c"})

    assert track.id == 3


async def test_find_with_missing_field():
    Track.reset([{"title": "a"}, {"title": "b", "genre": None}])

    assert [track.title for track in await Track.find({"genre": None})] == ["b"]


async def test_find_or_create_merges_query_and_data():
    track = await Track.find_or_create({"title": "a"}, {"genre": "rock"})

    assert Track.records == [{"id": 1, "title": "a", "genre": "rock"}]
    assert (await Track.find_or_create({"title": "a"}, {"genre": "jazz"})).id == track.id


async def test_remove_iterator_yields_prior_state():
    Track.reset([{"title": "a"}, {"title": "b"}])

    removed = [track async for track in Track.remove_iterator({"title": "a"})]

    assert [track.model_dump() for track in removed] == [{"id": 1, "title": "a"}]
    assert await Track.count() == 1
