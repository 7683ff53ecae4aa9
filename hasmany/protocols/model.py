from collections.abc import AsyncIterator, Mapping
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class InstanceProtocol(Protocol):
    """
    The part of a model instance a relation relies on.

    Parents only have their `id` read. Children additionally get their foreign
    key assigned and `save()` called by `add` and `create`.
    """

    id: Any

    async def save(self) -> Any:
        """
        Persists the instance and returns the saved instance.
        """
        ...


@runtime_checkable
class ChildModelProtocol(Protocol):
    """
    Class level operations a child model must provide to be used as the "many"
    side of a relation.

    Queries are mappings of field name to the value to match, combined with
    AND. How they are executed is entirely up to the model. The iterator
    methods must return a fresh async iterator on every call.
    """

    def find_iterator(self, query: Mapping[str, Any]) -> AsyncIterator[Any]: ...

    async def find_one(self, query: Mapping[str, Any]) -> Optional[Any]: ...

    async def count(self, query: Mapping[str, Any]) -> int: ...

    def build(self, data: Mapping[str, Any]) -> Any:
        """
        Returns a new, unsaved, instance. Must not perform any I/O.
        """
        ...

    async def find_or_create(self, query: Mapping[str, Any], data: Mapping[str, Any]) -> Any: ...

    async def create_or_update(
        self, query: Mapping[str, Any], changes: Mapping[str, Any]
    ) -> Any: ...

    def update_iterator(
        self, query: Mapping[str, Any], changes: Mapping[str, Any]
    ) -> AsyncIterator[Any]: ...

    async def update_one(
        self, query: Mapping[str, Any], changes: Mapping[str, Any]
    ) -> Optional[Any]: ...

    def remove_iterator(self, query: Mapping[str, Any]) -> AsyncIterator[Any]:
        """
        Deletes every match and yields each record as it was before deletion.
        """
        ...

    async def remove_one(self, query: Mapping[str, Any]) -> Optional[Any]: ...
