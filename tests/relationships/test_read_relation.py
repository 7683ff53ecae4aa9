import pytest

from hasmany import HasMany, HasManyRelation, ReadRelationProtocol, WriteRelationProtocol
from hasmany.testing import MemoryModel

pytestmark = pytest.mark.anyio


class Child(MemoryModel):
    class Meta:
        tablename = "child"


class Parent(MemoryModel):
    children = HasMany(Child, foreign_key="owner_id", mutable=False)

    class Meta:
        tablename = "parent"


def records_match(record, expected):
    assert record.id == expected["id"]
    assert record.name == expected["name"]
    assert record.owner_id == expected["owner_id"]


@pytest.fixture(autouse=True)
def reset_records():
    Parent.reset([{"name": "parent"}, {"name": "other parent"}])
    Child.reset()
    yield
    Parent.reset()
    Child.reset()


async def test_relation_is_read_only():
    parent = await Parent.find_one()

    assert isinstance(parent.children, HasManyRelation)
    assert isinstance(parent.children, ReadRelationProtocol)
    assert not isinstance(parent.children, WriteRelationProtocol)
    assert not hasattr(parent.children, "create")


async def test_relation_is_async_iterable():
    Child.reset(
        [
            {"name": "async-iterable 1", "owner_id": 1},
            {"name": "async-iterable 2", "owner_id": 1},
        ]
    )
    parent = await Parent.find_one()

    seen = 0
    async for child in parent.children:
        records_match(child, Child.records[seen])
        seen += 1

    assert seen == 2


async def test_iteration_reissues_the_query():
    Child.reset([{"name": "first", "owner_id": 1}])
    parent = await Parent.find_one()
    stream = parent.children.find_iterator()

    assert [child.name async for child in stream] == ["first"]

    await Child.create({"name": "second", "owner_id": 1})

    assert [child.name async for child in stream] == ["first", "second"]


async def test_find():
    Child.reset([{"name": "find 1", "owner_id": 1}, {"name": "find 2", "owner_id": 1}])
    parent = await Parent.find_one()

    children = await parent.children.find()

    assert len(children) == 2
    for child, record in zip(children, Child.records):
        records_match(child, record)


async def test_find_only_returns_children_of_the_parent():
    Child.reset(
        [
            {"name": "a", "owner_id": 1},
            {"name": "b", "owner_id": 2},
            {"name": "c", "owner_id": 1},
        ]
    )
    parent = await Parent.find_one({"id": 1})
    other = await Parent.find_one({"id": 2})

    assert [child.name for child in await parent.children.find()] == ["a", "c"]
    assert [child.name for child in await other.children.find()] == ["b"]
    for child in await parent.children.find():
        assert child.owner_id == parent.id


async def test_find_with_query():
    Child.reset(
        [
            {"name": "a", "owner_id": 1},
            {"name": "b", "owner_id": 1},
            {"name": "a", "owner_id": 2},
        ]
    )
    parent = await Parent.find_one()

    children = await parent.children.find({"name": "a"})

    assert [(child.id, child.owner_id) for child in children] == [(1, 1)]


async def test_find_foreign_key_in_query_is_overridden():
    Child.reset([{"name": "a", "owner_id": 1}, {"name": "b", "owner_id": 2}])
    parent = await Parent.find_one()

    children = await parent.children.find({"owner_id": 2})

    assert [child.name for child in children] == ["a"]


async def test_find_does_not_change_the_query():
    parent = await Parent.find_one()
    query = {"name": "a"}

    await parent.children.find(query)

    assert query == {"name": "a"}


async def test_find_one():
    Child.reset([{"name": "findOne", "owner_id": 1}])
    parent = await Parent.find_one()

    child = await parent.children.find_one()

    records_match(child, Child.records[0])


async def test_find_one_absent():
    Child.reset([{"name": "elsewhere", "owner_id": 2}])
    parent = await Parent.find_one()

    assert await parent.children.find_one() is None


async def test_find_by_id():
    Child.reset([{"name": "findById", "owner_id": 1}])
    parent = await Parent.find_one()

    child = await parent.children.find_by_id(1)

    records_match(child, Child.records[0])


async def test_find_by_id_of_another_parent():
    Child.reset([{"name": "mine", "owner_id": 1}, {"name": "not mine", "owner_id": 2}])
    parent = await Parent.find_one()

    assert await parent.children.find_by_id(2) is None
    assert await parent.children.find_by_id(3) is None


async def test_count():
    Child.reset([{"name": "count 1", "owner_id": 1}, {"name": "count 2", "owner_id": 2}])
    parent = await Parent.find_one()

    assert await parent.children.count() == 1


async def test_count_with_query():
    Child.reset(
        [
            {"name": "x", "owner_id": 1},
            {"name": "y", "owner_id": 1},
            {"name": "x", "owner_id": 2},
        ]
    )
    parent = await Parent.find_one()

    assert await parent.children.count({"name": "x"}) == 1
    assert await parent.children.count({"name": "z"}) == 0


async def test_scenario_single_child_per_parent():
    Child.reset([{"id": 1, "owner_id": 1, "name": "a"}, {"id": 2, "owner_id": 2, "name": "b"}])
    parent = await Parent.find_one({"id": 1})

    assert await parent.children.count() == 1
    children = await parent.children.find()
    assert [child.model_dump() for child in children] == [{"id": 1, "owner_id": 1, "name": "a"}]


async def test_relation_str():
    parent = await Parent.find_one()

    assert str(parent.children) == "Child.owner_id=1"
    assert repr(parent.children) == "<HasManyRelation: Child.owner_id=1>"
