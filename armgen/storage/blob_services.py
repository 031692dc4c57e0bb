"""Blob container resource.

Emits: Microsoft.Storage/storageAccounts/blobServices/containers
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List

from ..core.arm_resource import ArmResource
from ..core.identifiers import ResourceName, StorageResourceName
from ..core.resource_id import ResourceId, ResourceType
from .types import AccountReference, StorageContainerAccess, account_resource_name, containers


@dataclass(frozen=True)
class Container(ArmResource):
    resource_type: ClassVar[ResourceType] = containers

    name: StorageResourceName
    storage_account: AccountReference
    accessibility: StorageContainerAccess = StorageContainerAccess.PRIVATE

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "storage_account", account_resource_name(self.storage_account)
        )

    @property
    def resource_name(self) -> ResourceName:
        return self.name.resource_name

    @property
    def full_name(self) -> ResourceName:
        return self.storage_account / "default" / self.name.value

    @property
    def dependencies(self) -> List[ResourceId]:
        return [ResourceId.create(self.storage_account)]

    def json_model(self) -> Dict[str, Any]:
        model = containers.create(self.full_name, depends_on=self.dependencies)
        model["properties"] = {"publicAccess": self.accessibility.arm_value}
        return model
