"""Validated configuration for building a cereal storage."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .storage import CerealStorageImpl, InvalidArgumentError


class StorageConfig(BaseModel):
    """Capacities of a storage, fixed for its lifetime."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    container_capacity: float = Field(ge=0.0, allow_inf_nan=False)
    storage_capacity: float = Field(allow_inf_nan=False)

    @model_validator(mode="after")
    def _storage_fits_a_container(self) -> "StorageConfig":
        if self.storage_capacity < self.container_capacity:
            raise ValueError(
                "storage_capacity must not be lower than container_capacity"
            )
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StorageConfig":
        """Validate ``data``, accepting either a ``storage`` table or bare keys."""

        if not isinstance(data, Mapping):
            raise InvalidArgumentError("storage configuration must be a mapping")
        payload = data.get("storage", data)
        if not isinstance(payload, Mapping):
            raise InvalidArgumentError("storage configuration must be a mapping")
        try:
            return cls.model_validate(dict(payload))
        except ValidationError as exc:
            raise InvalidArgumentError(str(exc)) from exc

    def build(self) -> CerealStorageImpl:
        """Return a new, empty storage with these capacities."""

        return CerealStorageImpl.from_config(self)


def load_config(path: str | Path) -> StorageConfig:
    """Read a :class:`StorageConfig` from a TOML file."""

    with Path(path).open("rb") as handle:
        try:
            data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise InvalidArgumentError(f"Invalid storage configuration: {exc}") from exc
    return StorageConfig.from_mapping(data)


__all__ = ["StorageConfig", "load_config"]
