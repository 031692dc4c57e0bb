"""Validated identifier and value types used by resource entities.

These are small immutable wrappers around strings. Validation happens once,
at construction, so emission code can treat them as trusted values.
"""

import re
from dataclasses import dataclass
from typing import Dict, Union

from ..exceptions import InvalidResourceNameError

Tags = Dict[str, str]

_STORAGE_ACCOUNT_NAME = re.compile(r"^[a-z0-9]{3,24}$")
_STORAGE_RESOURCE_NAME = re.compile(r"^[a-z0-9](?!.*--)[a-z0-9-]{1,61}[a-z0-9]$")
_RESERVED_CONTAINER_NAMES = frozenset({"$root", "$web"})


@dataclass(frozen=True)
class ResourceName:
    """Slash separated resource name path, e.g. ``mystore/default/data``."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidResourceNameError(
                "Resource name cannot be empty", name=self.value, name_kind="resource"
            )

    def __truediv__(self, segment: Union[str, "ResourceName"]) -> "ResourceName":
        segment_value = segment.value if isinstance(segment, ResourceName) else segment
        if not segment_value:
            raise InvalidResourceNameError(
                f"Cannot append an empty segment to '{self.value}'",
                name=self.value,
                name_kind="segment",
            )
        return ResourceName(f"{self.value}/{segment_value}")

    @property
    def segments(self) -> list[str]:
        return self.value.split("/")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Location:
    """An Azure region."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidResourceNameError(
                "Location must be a non-empty string",
                name=self.value,
                name_kind="location",
            )

    @property
    def arm_value(self) -> str:
        # "West Europe" and "westeurope" name the same region
        return self.value.lower().replace(" ", "")

    def __str__(self) -> str:
        return self.arm_value


@dataclass(frozen=True)
class StorageAccountName:
    """Storage account name: 3-24 lowercase letters or digits."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _STORAGE_ACCOUNT_NAME.match(
            self.value
        ):
            raise InvalidResourceNameError(
                f"Invalid storage account name '{self.value}'",
                name=self.value,
                name_kind="storage account",
                recovery_suggestion="Use 3-24 lowercase letters and numbers only",
            )

    @property
    def resource_name(self) -> ResourceName:
        return ResourceName(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StorageResourceName:
    """Name of a container, file share or queue inside a storage account.

    3-63 characters of lowercase letters, digits and single hyphens, starting
    and ending with a letter or digit. The reserved ``$root`` and ``$web``
    container names are also accepted.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidResourceNameError(
                "Storage resource name must be a string",
                name=repr(self.value),
                name_kind="storage resource",
            )
        if self.value in _RESERVED_CONTAINER_NAMES:
            return
        if not _STORAGE_RESOURCE_NAME.match(self.value):
            raise InvalidResourceNameError(
                f"Invalid storage resource name '{self.value}'",
                name=self.value,
                name_kind="storage resource",
                recovery_suggestion=(
                    "Use 3-63 lowercase letters, numbers and single hyphens"
                ),
            )

    @property
    def resource_name(self) -> ResourceName:
        return ResourceName(self.value)

    def __str__(self) -> str:
        return self.value
