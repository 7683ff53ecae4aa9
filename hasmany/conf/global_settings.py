from __future__ import annotations

from monkay import ExtensionProtocol
from pydantic_settings import BaseSettings, SettingsConfigDict


class RelationSettings(BaseSettings):
    """
    Defaults applied when a relation is declared without explicit values.
    """

    default_mutable: bool = False
    """
    Whether relations expose the write operations (`build`, `create`, `add`,
    `update`, `remove` and friends) when `mutable` is not passed.

    Defaults to `False`, relations are read-only unless asked otherwise.
    """
    foreign_key_template: str = "{tablename}_id"
    """
    Template used to derive the foreign key name from the parent table name
    when `foreign_key` is not passed. Must contain the `{tablename}` placeholder.
    """


class HasManySettings(RelationSettings):
    """
    Main settings class, loaded by monkay from `HASMANY_SETTINGS_MODULE`.
    """

    model_config = SettingsConfigDict(extra="allow")

    preloads: list[str] | tuple[str, ...] = ()
    """
    A list or tuple of module paths imported when the settings are evaluated.
    """
    extensions: list[ExtensionProtocol] | tuple[ExtensionProtocol, ...] = ()
    """
    A list or tuple of Monkay `ExtensionProtocol` instances to be loaded, for
    example `HasManyExtension()`.
    """
