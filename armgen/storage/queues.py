"""Storage queue resource.

Emits: Microsoft.Storage/storageAccounts/queueServices/queues
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List

from ..core.arm_resource import ArmResource
from ..core.identifiers import ResourceName, StorageResourceName
from ..core.resource_id import ResourceId, ResourceType
from .types import AccountReference, account_resource_name, queues


@dataclass(frozen=True)
class Queue(ArmResource):
    resource_type: ClassVar[ResourceType] = queues

    name: StorageResourceName
    storage_account: AccountReference

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
        # Queues carry no properties
        return queues.create(self.full_name, depends_on=self.dependencies)
