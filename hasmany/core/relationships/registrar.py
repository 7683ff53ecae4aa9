from __future__ import annotations

from typing import Any

from loguru import logger

from hasmany.core.relationships.fields import HasMany
from hasmany.core.relationships.utils import get_tablename


def has_many(
    parent: type[Any],
    model: type[Any],
    *,
    related_name: str | None = None,
    foreign_key: str | None = None,
    mutable: bool | None = None,
) -> None:
    """
    Declares a one-to-many relation on an existing parent class.

    Same as writing `related_name = HasMany(model, ...)` in the class body.
    Can be called several times for the same parent and child as long as the
    names differ, e.g. `authored_posts` and `edited_posts`.

    Args:
        parent (type[Any]): The parent model class receiving the accessor.
        model (type[Any]): The child model class.
        related_name (str | None): Name of the accessor. Defaults to the child
            table name.
        foreign_key (str | None): Field of the child holding the parent id.
            Defaults to the `foreign_key_template` setting applied to the
            parent table name.
        mutable (bool | None): Whether write operations are exposed. Defaults
            to the `default_mutable` setting.
    """
    name = related_name or get_tablename(model)
    descriptor = HasMany(model, foreign_key=foreign_key, mutable=mutable)
    # setattr on an existing class does not trigger __set_name__
    setattr(parent, name, descriptor)
    descriptor.__set_name__(parent, name)
    # the class is complete, resolve the defaults with the current settings
    descriptor.resolve()


class HasManyMixin:
    """
    Gives a model class the `has_many` registration classmethod.
    """

    @classmethod
    def has_many(
        cls,
        model: type[Any],
        *,
        related_name: str | None = None,
        foreign_key: str | None = None,
        mutable: bool | None = None,
    ) -> None:
        has_many(cls, model, related_name=related_name, foreign_key=foreign_key, mutable=mutable)


def add_has_many(base: type[Any]) -> type[Any]:
    """
    Installs the `has_many` classmethod on a base model class that does not
    inherit from `HasManyMixin`. Every subclass can then declare relations
    with `Model.has_many(...)`.

    Installing twice is a no-op.

    Returns:
        type[Any]: The same class, for chaining.
    """
    if not isinstance(base.__dict__.get("has_many"), classmethod):
        base.has_many = HasManyMixin.__dict__["has_many"]
        logger.debug(f"Installed has_many on {base.__name__}.")
    return base
