"""Capacity accounting for a storage of single-cereal containers."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping

from .cereals import Cereal

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .config import StorageConfig

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised for negative amounts, bad capacities or unknown cereals."""


class ContainerNotFoundError(LookupError):
    """Raised when no container is allocated for the requested cereal."""

    def __init__(self, cereal: Cereal) -> None:
        super().__init__(f"No container for {cereal.name} in storage")
        self.cereal = cereal


class NoCapacityError(RuntimeError):
    """Raised when a new container would not fit into the storage."""


def _as_float(value: float, what: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{what} must be a number, got {value!r}") from exc


def _non_negative(value: float, what: str) -> float:
    number = _as_float(value, what)
    if math.isnan(number) or number < 0:
        raise InvalidArgumentError(f"{what} cannot be negative, got {value!r}")
    return number


class CerealStorage(ABC):
    """Storage made of fixed-capacity containers, one per cereal.

    ``container_capacity`` bounds the amount held by a single container and
    ``storage_capacity`` bounds the number of containers, expressed in units
    of container capacity.
    """

    @property
    @abstractmethod
    def container_capacity(self) -> float:
        ...

    @property
    @abstractmethod
    def storage_capacity(self) -> float:
        ...

    @abstractmethod
    def add_cereal(self, cereal: Cereal | str, amount: float) -> float:
        """Add ``amount`` of cereal, returning the excess that did not fit.

        The container is created on first use. Raises
        :class:`NoCapacityError` when a new container is needed but the
        storage is already saturated, even if ``amount`` is zero.
        """

    @abstractmethod
    def get_cereal(self, cereal: Cereal | str, amount: float) -> float:
        """Take up to ``amount`` of cereal and return the amount taken.

        The container stays allocated even when it becomes empty.
        """

    @abstractmethod
    def remove_container(self, cereal: Cereal | str) -> bool:
        """Remove the container if it is empty.

        Returns ``False`` and keeps the container when it still holds cereal.
        """

    @abstractmethod
    def get_amount(self, cereal: Cereal | str) -> float:
        """Amount of cereal currently stored in its container."""

    @abstractmethod
    def get_space(self, cereal: Cereal | str) -> float:
        """Free space left in the cereal's container."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable rendering of the stored amounts."""

    def __str__(self) -> str:
        return self.describe()


class CerealStorageImpl(CerealStorage):
    """In-memory :class:`CerealStorage`."""

    def __init__(self, container_capacity: float, storage_capacity: float) -> None:
        container_capacity = _non_negative(container_capacity, "container_capacity")
        storage_capacity = _as_float(storage_capacity, "storage_capacity")
        if math.isnan(storage_capacity) or storage_capacity < container_capacity:
            raise InvalidArgumentError(
                "storage_capacity must not be lower than container_capacity"
            )
        self._container_capacity = container_capacity
        self._storage_capacity = storage_capacity
        self._containers: dict[Cereal, float] = {}

    @classmethod
    def from_config(cls, config: StorageConfig) -> "CerealStorageImpl":
        return cls(config.container_capacity, config.storage_capacity)

    @property
    def container_capacity(self) -> float:
        return self._container_capacity

    @property
    def storage_capacity(self) -> float:
        return self._storage_capacity

    # -- Introspection -------------------------------------------------
    @property
    def containers(self) -> Mapping[Cereal, float]:
        return MappingProxyType(self._containers)

    def __len__(self) -> int:
        return len(self._containers)

    def __iter__(self) -> Iterator[Cereal]:
        return iter(list(self._containers))

    def __contains__(self, cereal: object) -> bool:
        try:
            return Cereal.from_value(cereal) in self._containers  # type: ignore[arg-type]
        except InvalidArgumentError:
            return False

    @property
    def free_slots(self) -> int:
        """Number of further containers the storage would still accept."""

        slots = 0
        allocated = len(self._containers)
        for _ in range(len(Cereal) - allocated):
            if not self._has_room_for(allocated + slots):
                break
            slots += 1
        return slots

    def _has_room_for(self, allocated: int) -> bool:
        # Saturation counts containers, not the cereal stored in them.
        # 0 * inf is NaN, which never saturates.
        return not (allocated * self._container_capacity >= self._storage_capacity)

    def _require(self, cereal: Cereal | str) -> Cereal:
        key = Cereal.from_value(cereal)
        if key not in self._containers:
            logger.debug("No container allocated for %s", key.name)
            raise ContainerNotFoundError(key)
        return key

    # -- Mutation ------------------------------------------------------
    def add_cereal(self, cereal: Cereal | str, amount: float) -> float:
        amount = _non_negative(amount, "amount")
        key = Cereal.from_value(cereal)
        if key not in self._containers:
            if not self._has_room_for(len(self._containers)):
                logger.debug(
                    "Rejected new container for %s: %d containers fill storage",
                    key.name,
                    len(self._containers),
                )
                raise NoCapacityError(
                    f"Storage cannot hold another container for {key.name}"
                )
            logger.debug("Allocated container for %s", key.name)
        new_amount = self._containers.get(key, 0.0) + amount
        self._containers[key] = min(new_amount, self._container_capacity)
        excess = max(0.0, new_amount - self._container_capacity)
        logger.debug(
            "Stored %s of %s, now %s (excess %s)",
            amount,
            key.name,
            self._containers[key],
            excess,
        )
        return excess

    def get_cereal(self, cereal: Cereal | str, amount: float) -> float:
        amount = _non_negative(amount, "amount")
        key = self._require(cereal)
        current = self._containers[key]
        taken = min(current, amount)
        self._containers[key] = current - taken
        logger.debug("Took %s of %s, %s left", taken, key.name, self._containers[key])
        return taken

    def remove_container(self, cereal: Cereal | str) -> bool:
        key = self._require(cereal)
        if self._containers[key] != 0:
            logger.debug("Kept non-empty container for %s", key.name)
            return False
        del self._containers[key]
        logger.debug("Removed empty container for %s", key.name)
        return True

    # -- Queries -------------------------------------------------------
    def get_amount(self, cereal: Cereal | str) -> float:
        return self._containers[self._require(cereal)]

    def get_space(self, cereal: Cereal | str) -> float:
        return self._container_capacity - self._containers[self._require(cereal)]

    def describe(self) -> str:
        pairs = ", ".join(
            f"{cereal.name}={amount}" for cereal, amount in self._containers.items()
        )
        return "{" + pairs + "}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(container_capacity={self._container_capacity}, "
            f"storage_capacity={self._storage_capacity}, contents={self.describe()})"
        )


__all__ = [
    "CerealStorage",
    "CerealStorageImpl",
    "ContainerNotFoundError",
    "InvalidArgumentError",
    "NoCapacityError",
]
