from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hasmany.core.relationships.registrar import add_has_many
from hasmany.exceptions import ImproperlyConfigured

if TYPE_CHECKING:
    from monkay import Monkay

    from hasmany import Instance
    from hasmany.conf.global_settings import HasManySettings


@dataclass
class HasManyExtension:
    """
    Monkay `ExtensionProtocol` adding `has_many` to the base model of the host.

    Register it with `hasmany.monkay.add_extension(HasManyExtension())` or via
    the `extensions` setting, then set an `Instance` carrying the base model:

        hasmany.monkay.set_instance(hasmany.Instance(model=BaseModel))
    """

    name: str = "hasmany"

    def apply(self, monkay_instance: Monkay[Instance, HasManySettings]) -> None:
        instance = monkay_instance.instance
        if instance is None or instance.model is None:
            raise ImproperlyConfigured(
                detail="HasManyExtension requires an Instance with a model."
            )
        add_has_many(instance.model)
