"""The closed set of cereals a storage can hold."""

from __future__ import annotations

from enum import Enum


class Cereal(str, Enum):
    """Kinds of cereal, each stored in a dedicated container."""

    BUCKWHEAT = "buckwheat"
    BULGUR = "bulgur"
    MILLET = "millet"
    RICE = "rice"
    PEAS = "peas"

    @staticmethod
    def from_value(value: "Cereal | str") -> "Cereal":
        """Return the matching cereal by value or member name.

        Unlike open-ended categories there is no fallback member: an unknown
        identifier raises :class:`~cereal_storage.storage.InvalidArgumentError`.
        """

        if isinstance(value, Cereal):
            return value
        normalized = str(value).strip().lower()
        for cereal in Cereal:
            if cereal.value == normalized:
                return cereal
        from .storage import InvalidArgumentError

        raise InvalidArgumentError(f"Unknown cereal: {value!r}")


__all__ = ["Cereal"]
