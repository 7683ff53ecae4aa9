from .binding import bind_to_parent
from .fields import HasMany
from .registrar import HasManyMixin, add_has_many, has_many
from .relation import HasManyMutableRelation, HasManyRelation, RelationConfig
from .streams import ScopedStream

__all__ = [
    "HasMany",
    "HasManyMixin",
    "HasManyMutableRelation",
    "HasManyRelation",
    "RelationConfig",
    "ScopedStream",
    "add_has_many",
    "bind_to_parent",
    "has_many",
]
