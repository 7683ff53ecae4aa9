from __future__ import annotations

from typing import Any


def get_tablename(model: type[Any]) -> str:
    """
    Returns the table (or collection) name of a model class.

    Looks for `meta.tablename`, then `tablename`, then `__tablename__`. Models
    exposing none of them fall back to the lowercased class name with an `s`
    appended, the same name a model gets when its table is not named.

    Args:
        model (type[Any]): The model class.

    Returns:
        str: The table name.
    """
    meta = getattr(model, "meta", None)
    tablename = getattr(meta, "tablename", None)
    if not tablename:
        tablename = getattr(model, "tablename", None) or getattr(model, "__tablename__", None)
    if not tablename or not isinstance(tablename, str):
        tablename = f"{model.__name__.lower()}s"
    return tablename
