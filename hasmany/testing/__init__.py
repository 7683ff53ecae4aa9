from typing import TYPE_CHECKING

from monkay import Monkay

if TYPE_CHECKING:
    from .memory import MemoryMeta, MemoryModel

__all__ = ["MemoryMeta", "MemoryModel"]


Monkay(
    globals(),
    lazy_imports={
        "MemoryMeta": ".memory.MemoryMeta",
        "MemoryModel": ".memory.MemoryModel",
    },
)
