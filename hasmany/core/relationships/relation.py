from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from hasmany.core.relationships.mixins import ReadRelationMixin, WriteRelationMixin


class HasManyRelation(ReadRelationMixin):
    """
    Read-only view over the children of one parent instance.

    Supports `async for`, `find_iterator`, `find`, `find_one`, `find_by_id` and
    `count`. Instances are cheap and short lived, a new one is built every time
    the relation attribute is read from the parent.
    """


class HasManyMutableRelation(ReadRelationMixin, WriteRelationMixin):
    """
    Read and write view over the children of one parent instance.

    On top of the read operations of `HasManyRelation` it supports `build`,
    `create`, `add`, `find_or_create`, `create_or_update`, `update`,
    `update_iterator`, `update_by_id`, `remove`, `remove_iterator` and
    `remove_by_id`.
    """


class RelationConfig(BaseModel):
    """
    The resolved declaration of a has-many relation. Immutable.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    model: type[Any]
    related_name: str
    foreign_key: str
    mutable: bool = False

    @property
    def relation_class(self) -> type[HasManyRelation] | type[HasManyMutableRelation]:
        return HasManyMutableRelation if self.mutable else HasManyRelation

    def get_relation(self, instance: Any) -> HasManyRelation | HasManyMutableRelation:
        """
        Builds a new relation proxy bound to `instance`.
        """
        return self.relation_class(
            foreign_key=self.foreign_key, instance=instance, model=self.model
        )
