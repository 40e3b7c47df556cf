"""Read-only and configurable property sets for objects such as cameras."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping


class UnknownPropertyError(KeyError):
    """Raised when a property name is not known to an object."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown property: {self.name!r}"


class ObjectInformation(ABC):
    """An object that exposes named string properties."""

    @abstractmethod
    def get_property(self, name: str) -> str:
        """Return the value of a property, or raise UnknownPropertyError."""

    @abstractmethod
    def get_all_properties(self) -> dict[str, str]:
        """Return every property as a name-to-value mapping."""


class ObjectConfigurator(ObjectInformation):
    """An object whose properties can also be changed."""

    @abstractmethod
    def set_property(self, name: str, value: str) -> None:
        """Change the value of a property, or raise on failure."""


class ObjectInformationMap(ObjectInformation):
    """Fixed property set backed by a mapping given at construction."""

    def __init__(self, info: Mapping[str, str]) -> None:
        self._info = {key: info[key] for key in sorted(info)}

    def get_property(self, name: str) -> str:
        try:
            return self._info[name]
        except KeyError:
            raise UnknownPropertyError(name) from None

    def get_all_properties(self) -> dict[str, str]:
        return dict(self._info)