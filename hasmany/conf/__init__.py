from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any, cast

if TYPE_CHECKING:
    from monkay import Monkay

    from hasmany import HasManySettings, Instance


@lru_cache
def get_hasmany_monkay() -> Monkay[Instance, HasManySettings]:
    from hasmany import monkay

    monkay.evaluate_settings(on_conflict="error", ignore_import_errors=False)

    return monkay


class SettingsForward:
    def __getattribute__(self, name: str) -> Any:
        monkay = get_hasmany_monkay()
        return getattr(monkay.settings, name)


settings: HasManySettings = cast("HasManySettings", SettingsForward())


__all__ = ["settings"]
