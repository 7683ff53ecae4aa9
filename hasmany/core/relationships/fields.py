from __future__ import annotations

from typing import Any, overload

from loguru import logger

from hasmany.conf import settings
from hasmany.core.relationships.relation import (
    HasManyMutableRelation,
    HasManyRelation,
    RelationConfig,
)
from hasmany.core.relationships.utils import get_tablename
from hasmany.exceptions import ImproperlyConfigured


class HasMany:
    """
    Declares a one-to-many relation on a parent model.

    It acts as a read-only descriptor. Reading it from a parent instance
    returns a new relation proxy bound to that instance. Reading it from the
    class returns the descriptor itself.

        class Post(MemoryModel):
            comments = HasMany(Comment, mutable=True)

    The attribute name is the relation name. The foreign key defaults to the
    `foreign_key_template` setting applied to the parent table name
    (`post_id` here) and `mutable` defaults to the `default_mutable` setting.

    When declared in a class body the defaults are resolved on first use, once
    the parent class is fully built and its table name is known.

    The defaults are resolved against the class declaring the relation, not
    the class it is read from. A subclass with its own table name still binds
    on the foreign key of the declaring class (`post_id` for a `Reel(Post)`
    subclass). Declare the relation again on the subclass to change that.
    """

    def __init__(
        self,
        model: type[Any],
        *,
        foreign_key: str | None = None,
        mutable: bool | None = None,
    ) -> None:
        """
        Args:
            model (type[Any]): The child model class.
            foreign_key (str | None): The field of the child model holding the
                parent id.
            mutable (bool | None): Whether the relation exposes write operations.
        """
        self.model = model
        self.foreign_key = foreign_key
        self.mutable = mutable
        self.owner: type[Any] | None = None
        self.name: str = ""
        self._config: RelationConfig | None = None

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self.owner = owner
        self.name = name
        self._config = None

    @property
    def config(self) -> RelationConfig:
        """
        The resolved relation configuration.

        Raises:
            ImproperlyConfigured: If the descriptor was never attached to a
                class, or the settings cannot produce a foreign key name.
        """
        if self._config is None:
            return self.resolve()
        return self._config

    def resolve(self) -> RelationConfig:
        """
        Resolves the defaults against the owner class and the current settings
        and stores the result as `config`.
        """
        if self.owner is None:
            raise ImproperlyConfigured(
                detail=f"Relation to {self.model.__name__!r} was never attached to a class."
            )
        config = RelationConfig(
            model=self.model,
            related_name=self.name,
            foreign_key=self.foreign_key or default_foreign_key(self.owner),
            mutable=settings.default_mutable if self.mutable is None else self.mutable,
        )
        logger.debug(
            f"Installed has-many relation {self.owner.__name__}.{self.name} -> "
            f"{self.model.__name__}.{config.foreign_key} "
            f"({'mutable' if config.mutable else 'read-only'})."
        )
        self._config = config
        return config

    @overload
    def __get__(self, instance: None, owner: Any = None) -> HasMany: ...

    @overload
    def __get__(
        self, instance: Any, owner: Any = None
    ) -> HasManyRelation | HasManyMutableRelation: ...

    def __get__(self, instance: Any, owner: Any = None) -> Any:
        if instance is None:
            return self
        return self.config.get_relation(instance)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"Relation {self.name!r} is read-only.")

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self}>"

    def __str__(self) -> str:
        owner = self.owner.__name__ if self.owner is not None else "?"
        return f"({owner}.{self.name}={self.model.__name__})"


def default_foreign_key(parent: type[Any]) -> str:
    """
    Derives the foreign key name from the parent table name and the
    `foreign_key_template` setting.

    Raises:
        ImproperlyConfigured: If the template lacks the `{tablename}` placeholder.
    """
    template = settings.foreign_key_template
    if "{tablename}" not in template:
        raise ImproperlyConfigured(
            detail=f"foreign_key_template {template!r} must contain '{{tablename}}'."
        )
    return template.format(tablename=get_tablename(parent))
