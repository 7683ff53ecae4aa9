from __future__ import annotations

__version__ = "0.1.0"
from typing import TYPE_CHECKING

from ._monkay import Instance, create_monkay

if TYPE_CHECKING:
    from .conf.global_settings import HasManySettings
    from .core.extensions import HasManyExtension
    from .core.relationships import (
        HasMany,
        HasManyMixin,
        HasManyMutableRelation,
        HasManyRelation,
        RelationConfig,
        ScopedStream,
        add_has_many,
        bind_to_parent,
        has_many,
    )
    from .exceptions import ImproperlyConfigured, RelationshipIncompatible
    from .protocols.relationship import ReadRelationProtocol, WriteRelationProtocol


__all__ = [
    "Instance",
    "monkay",
    "settings",
    "HasManySettings",
    "HasManyExtension",
    # relations
    "HasMany",
    "HasManyMixin",
    "HasManyRelation",
    "HasManyMutableRelation",
    "RelationConfig",
    "ScopedStream",
    "add_has_many",
    "bind_to_parent",
    "has_many",
    # protocols
    "ReadRelationProtocol",
    "WriteRelationProtocol",
    # exceptions
    "ImproperlyConfigured",
    "RelationshipIncompatible",
]
monkay = create_monkay(globals())

del create_monkay
