from collections.abc import AsyncIterator, Mapping
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:  # pragma: nocover
    from hasmany.core.relationships.streams import ScopedStream


@runtime_checkable
class ReadRelationProtocol(Protocol):
    """
    Read capabilities of a relation bound to a parent instance.

    Every query is scoped to the parent: the foreign key binding is applied
    after the caller's fields, so a conflicting value in the query never wins.
    Absent records are reported with `None`, never with an exception.
    """

    foreign_key: str
    """
    The name of the field on the child model holding the parent identifier.
    """
    instance: Any
    """
    The parent instance the relation is bound to. Only its `id` is read.
    """
    model: Any
    """
    The child model class.
    """

    def __aiter__(self) -> AsyncIterator[Any]: ...

    def find_iterator(self, query: Optional[Mapping[str, Any]] = None) -> "ScopedStream":
        """
        Returns a lazy, re-iterable stream of the matching children.
        """
        ...

    async def find(self, query: Optional[Mapping[str, Any]] = None) -> list[Any]:
        """
        Returns every matching child, in the order the child model yields them.
        """
        ...

    async def find_one(self, query: Optional[Mapping[str, Any]] = None) -> Optional[Any]: ...

    async def find_by_id(self, id: Any) -> Optional[Any]: ...

    async def count(self, query: Optional[Mapping[str, Any]] = None) -> int: ...


@runtime_checkable
class WriteRelationProtocol(Protocol):
    """
    Write capabilities of a relation bound to a parent instance.

    Data and changes get the foreign key binding applied the same way queries
    do, so every record written through the relation belongs to the parent.
    """

    def build(self, data: Optional[Mapping[str, Any]] = None) -> Any: ...

    async def create(self, data: Optional[Mapping[str, Any]] = None) -> Any: ...

    async def add(self, item: Any) -> Any: ...

    async def find_or_create(
        self,
        query: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
    ) -> Any: ...

    async def create_or_update(
        self,
        query: Optional[Mapping[str, Any]] = None,
        changes: Optional[Mapping[str, Any]] = None,
    ) -> Any: ...

    async def update(
        self, query: Optional[Mapping[str, Any]], changes: Mapping[str, Any]
    ) -> list[Any]: ...

    def update_iterator(
        self, query: Optional[Mapping[str, Any]], changes: Mapping[str, Any]
    ) -> "ScopedStream": ...

    async def update_by_id(self, id: Any, changes: Mapping[str, Any]) -> Optional[Any]: ...

    async def remove(self, query: Optional[Mapping[str, Any]] = None) -> list[Any]: ...

    def remove_iterator(self, query: Optional[Mapping[str, Any]] = None) -> "ScopedStream": ...

    async def remove_by_id(self, id: Any) -> Optional[Any]: ...
