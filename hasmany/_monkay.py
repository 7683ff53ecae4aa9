from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from monkay import Monkay

if TYPE_CHECKING:
    from hasmany.conf.global_settings import HasManySettings


@dataclass
class Instance:
    """
    Represents the host application as seen by the relation layer.

    `model` is the base model class of the host framework. Extensions, like
    `HasManyExtension`, patch it when the instance is set with
    `apply_extensions=True`.
    """

    model: type[Any] | None = None


def create_monkay(global_dict: dict) -> Monkay[Instance, HasManySettings]:
    """
    Initializes the Monkay container for the package.

    Sets up the lazy imports of the public names, the settings loaded from
    `HASMANY_SETTINGS_MODULE` and the extension machinery.

    Args:
        global_dict (dict): The globals of the package `__init__`.

    Returns:
        Monkay[Instance, HasManySettings]: The configured Monkay instance.
    """
    monkay: Monkay[Instance, HasManySettings] = Monkay(
        global_dict,
        with_extensions=True,
        with_instance=True,
        settings_path=lambda: os.environ.get(
            "HASMANY_SETTINGS_MODULE", "hasmany.conf.global_settings.HasManySettings"
        )
        or "",
        settings_extensions_name="extensions",
        settings_preloads_name="preloads",
        uncached_imports={"settings"},
        lazy_imports={
            "settings": lambda: monkay.settings,
            "HasManySettings": "hasmany.conf.global_settings:HasManySettings",
            "HasManyExtension": "hasmany.core.extensions:HasManyExtension",
            "ImproperlyConfigured": "hasmany.exceptions:ImproperlyConfigured",
            "RelationshipIncompatible": "hasmany.exceptions:RelationshipIncompatible",
        },
        skip_all_update=True,
    )

    for name in [
        "HasMany",
        "HasManyMixin",
        "HasManyMutableRelation",
        "HasManyRelation",
        "RelationConfig",
        "ScopedStream",
        "add_has_many",
        "bind_to_parent",
        "has_many",
    ]:
        monkay.add_lazy_import(name, f"hasmany.core.relationships.{name}")

    for name in ["ReadRelationProtocol", "WriteRelationProtocol"]:
        monkay.add_lazy_import(name, f"hasmany.protocols.relationship.{name}")

    return monkay
