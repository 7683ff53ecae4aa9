from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from typing import Generic, TypeVar

from hasmany.core.relationships.binding import collect

T = TypeVar("T")


class ScopedStream(Generic[T]):
    """
    A lazy, re-iterable async sequence.

    Nothing is queried when the stream is created. Each `async for` calls the
    factory again and pulls items one by one from the fresh iterator, so every
    iteration reflects the current state of the storage. Items are not buffered.

    Streams over write operations (`update_iterator`, `remove_iterator`) run
    the write again on every iteration.
    """

    __slots__ = ("factory",)

    def __init__(self, factory: Callable[[], AsyncIterator[T]]) -> None:
        self.factory = factory

    def __aiter__(self) -> AsyncIterator[T]:
        return aiter(self.factory())

    async def all(self) -> list[T]:
        """
        Runs one iteration and returns the items as a list.
        """
        return await collect(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.factory!r}>"
