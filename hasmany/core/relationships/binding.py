from __future__ import annotations

from collections.abc import AsyncIterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")


def bind_to_parent(
    query: Mapping[str, Any] | None, foreign_key: str, instance: Any
) -> dict[str, Any]:
    """
    Scopes a query, or the data of a write, to a parent instance.

    The caller's fields are copied first, then the foreign key is set to the
    parent identifier unconditionally. A caller supplied value for the foreign
    key is therefore always overwritten. The input mapping is never modified.

    Args:
        query (Mapping[str, Any] | None): The caller's fields. `None` is
            treated like an empty mapping.
        foreign_key (str): The name of the foreign key on the child model.
        instance (Any): The parent instance. Only its `id` is read.

    Returns:
        dict[str, Any]: A new dictionary with the binding applied.
    """
    bound = dict(query) if query else {}
    bound[foreign_key] = instance.id
    return bound


async def collect(iterable: AsyncIterable[T]) -> list[T]:
    """
    Drains an async iterable into a list, keeping the order of the items.
    """
    return [item async for item in iterable]
