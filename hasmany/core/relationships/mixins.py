from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import TYPE_CHECKING, Any

from loguru import logger

from hasmany.core.relationships.binding import bind_to_parent, collect
from hasmany.core.relationships.streams import ScopedStream
from hasmany.exceptions import RelationshipIncompatible

if TYPE_CHECKING:
    from hasmany.protocols.model import ChildModelProtocol


class BoundRelationMixin:
    """
    Holds what a relation proxy is bound to and the scoping step every
    operation goes through.

    A proxy is created per attribute access and keeps no other state.
    """

    foreign_key: str
    instance: Any
    model: ChildModelProtocol

    def __init__(self, *, foreign_key: str, instance: Any, model: type[Any]) -> None:
        """
        Args:
            foreign_key (str): The field of the child model holding the parent id.
            instance (Any): The parent instance. It is only read, never changed.
            model (type[Any]): The child model class.
        """
        self.foreign_key = foreign_key
        self.instance = instance
        self.model = model

    def bind(self, query: Mapping[str, Any] | None) -> dict[str, Any]:
        """
        Applies the foreign key binding to a query or to write data.

        See `bind_to_parent`: caller fields first, then the foreign key set to
        the parent identifier, so the binding wins on collision.
        """
        return bind_to_parent(query, self.foreign_key, self.instance)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self}>"

    def __str__(self) -> str:
        return f"{self.model.__name__}.{self.foreign_key}={self.instance.id!r}"


class ReadRelationMixin(BoundRelationMixin):
    """
    Provides the read operations of a relation.

    Every method builds its effective query with `bind` and delegates to the
    child model. Nothing is cached, each call hits the child model again.
    """

    def __aiter__(self) -> AsyncIterator[Any]:
        """
        Iterates over all the children of the parent, `async for child in parent.children`.
        """
        return aiter(self.find_iterator())

    def find_iterator(self, query: Mapping[str, Any] | None = None) -> ScopedStream:
        """
        Returns a lazy stream of the children matching `query`.

        The query is issued when the stream is iterated, and again on each
        new iteration.

        Args:
            query (Mapping[str, Any] | None): Extra equality filters. `None` or
                an empty mapping match every child of the parent.

        Returns:
            ScopedStream: The re-iterable stream of matching children.
        """
        bound = self.bind(query)
        return ScopedStream(lambda: self.model.find_iterator(bound))

    async def find(self, query: Mapping[str, Any] | None = None) -> list[Any]:
        """
        Returns every child matching `query`, in the order produced by the
        child model.
        """
        return await collect(self.find_iterator(query))

    async def find_one(self, query: Mapping[str, Any] | None = None) -> Any | None:
        """
        Returns the first child matching `query` or `None`.
        """
        return await self.model.find_one(self.bind(query))

    async def find_by_id(self, id: Any) -> Any | None:
        """
        Returns the child with the given `id`, or `None` when there is no such
        child under this parent. A child with that id belonging to another
        parent is never returned.
        """
        return await self.model.find_one(self.bind({"id": id}))

    async def count(self, query: Mapping[str, Any] | None = None) -> int:
        """
        Returns the number of children matching `query` without loading them.
        """
        return await self.model.count(self.bind(query))


class WriteRelationMixin(BoundRelationMixin):
    """
    Provides the write operations of a relation.

    Data, queries and changes are all bound to the parent before they reach
    the child model, so no write can produce a child of another parent.

    Multi record operations (`update`, `remove` and their iterators) are not
    atomic. Records are processed one by one by the child model, and if it
    fails half way the records already processed stay changed. Wrap the calls
    in a transaction of the underlying layer when that matters.
    """

    def build(self, data: Mapping[str, Any] | None = None) -> Any:
        """
        Builds an unsaved child from `data` with the foreign key set to the
        parent. No I/O is performed.
        """
        return self.model.build(self.bind(data))

    async def create(self, data: Mapping[str, Any] | None = None) -> Any:
        """
        Builds a child from `data` and saves it.

        Returns:
            Any: The saved child.
        """
        return await self.build(data).save()

    async def add(self, item: Any) -> Any:
        """
        Attaches an existing child, saved or not, to the parent and saves it.

        Any previous value of the foreign key on `item` is overwritten.

        Args:
            item (Any): An instance of the child model.

        Returns:
            Any: Whatever the child's `save()` returns.

        Raises:
            RelationshipIncompatible: If `item` is not an instance of the child
                model. Nothing is written in that case.
        """
        if not isinstance(item, self.model):
            logger.warning(
                f"Refusing to add {type(item).__name__!r} to a relation of "
                f"{self.model.__name__!r}."
            )
            raise RelationshipIncompatible(detail=f"Invalid input to {self.foreign_key}.add(...)")
        setattr(item, self.foreign_key, self.instance.id)
        return await item.save()

    async def find_or_create(
        self,
        query: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Returns the child matching `query`, creating it from `query` and
        `data` when it does not exist yet.

        Calling it again with the same arguments returns the same record.
        """
        return await self.model.find_or_create(self.bind(query), self.bind(data))

    async def create_or_update(
        self,
        query: Mapping[str, Any] | None = None,
        changes: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Applies `changes` to the child matching `query`, or creates a child
        from `query` merged with `changes` when none matches.
        """
        return await self.model.create_or_update(self.bind(query), self.bind(changes))

    def update_iterator(
        self, query: Mapping[str, Any] | None, changes: Mapping[str, Any]
    ) -> ScopedStream:
        """
        Returns a lazy stream updating the children matching `query` with
        `changes`, yielding each updated record.

        Every iteration of the stream runs the update again.
        """
        bound_query = self.bind(query)
        bound_changes = self.bind(changes)
        return ScopedStream(lambda: self.model.update_iterator(bound_query, bound_changes))

    async def update(
        self, query: Mapping[str, Any] | None, changes: Mapping[str, Any]
    ) -> list[Any]:
        """
        Updates every child matching `query` with `changes`.

        Children not matching `query` are left untouched.

        Returns:
            list[Any]: The updated records, in the order they were processed.
        """
        updated = await collect(self.update_iterator(query, changes))
        logger.debug(f"Updated {len(updated)} record(s) through {self!r}.")
        return updated

    async def update_by_id(self, id: Any, changes: Mapping[str, Any]) -> Any | None:
        """
        Updates the child with the given `id`.

        Returns:
            Any | None: The updated child, or `None` if no child with that id
                exists under this parent.
        """
        return await self.model.update_one(self.bind({"id": id}), self.bind(changes))

    def remove_iterator(self, query: Mapping[str, Any] | None = None) -> ScopedStream:
        """
        Returns a lazy stream deleting the children matching `query`, yielding
        each record as it was before deletion.
        """
        bound = self.bind(query)
        return ScopedStream(lambda: self.model.remove_iterator(bound))

    async def remove(self, query: Mapping[str, Any] | None = None) -> list[Any]:
        """
        Deletes every child matching `query`.

        Returns:
            list[Any]: The deleted records, captured before deletion.
        """
        removed = await collect(self.remove_iterator(query))
        logger.debug(f"Removed {len(removed)} record(s) through {self!r}.")
        return removed

    async def remove_by_id(self, id: Any) -> Any | None:
        """
        Deletes the child with the given `id`.

        Returns:
            Any | None: The deleted child as it was before deletion, or `None`
                if no child with that id exists under this parent.
        """
        return await self.model.remove_one(self.bind({"id": id}))
