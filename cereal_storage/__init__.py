"""Cereal storage: capacity accounting for single-cereal containers."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__version__ = "0.1.0"

if TYPE_CHECKING:  # pragma: no cover - imported only for type checkers
    from .cereals import Cereal
    from .config import StorageConfig, load_config
    from .report import build_storage_table, render_storage
    from .storage import (
        CerealStorage,
        CerealStorageImpl,
        ContainerNotFoundError,
        InvalidArgumentError,
        NoCapacityError,
    )

__all__ = [
    "Cereal",
    "CerealStorage",
    "CerealStorageImpl",
    "ContainerNotFoundError",
    "InvalidArgumentError",
    "NoCapacityError",
    "StorageConfig",
    "build_storage_table",
    "load_config",
    "render_storage",
]

_EXPORTS = {
    "Cereal": "cereal_storage.cereals",
    "CerealStorage": "cereal_storage.storage",
    "CerealStorageImpl": "cereal_storage.storage",
    "ContainerNotFoundError": "cereal_storage.storage",
    "InvalidArgumentError": "cereal_storage.storage",
    "NoCapacityError": "cereal_storage.storage",
    "StorageConfig": "cereal_storage.config",
    "load_config": "cereal_storage.config",
    "build_storage_table": "cereal_storage.report",
    "render_storage": "cereal_storage.report",
}


def __getattr__(name: str) -> Any:
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name])
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted({*globals(), *__all__})
