"""File share resource.

Emits: Microsoft.Storage/storageAccounts/fileServices/shares
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional

from ..core.arm_resource import ArmResource
from ..core.identifiers import ResourceName, StorageResourceName
from ..core.resource_id import ResourceId, ResourceType
from ..exceptions import InvalidResourceValueError
from .types import AccountReference, account_resource_name, file_shares

# Quota in GB applied when a share does not set one
DEFAULT_SHARE_QUOTA_GB = 5120


@dataclass(frozen=True)
class FileShare(ArmResource):
    resource_type: ClassVar[ResourceType] = file_shares

    name: StorageResourceName
    storage_account: AccountReference
    share_quota: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "storage_account", account_resource_name(self.storage_account)
        )
        if self.share_quota is not None and self.share_quota <= 0:
            raise InvalidResourceValueError(
                f"Share quota must be positive, got {self.share_quota}",
                field_name="share_quota",
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

    @property
    def effective_quota(self) -> int:
        if self.share_quota is None:
            return DEFAULT_SHARE_QUOTA_GB
        return self.share_quota

    def json_model(self) -> Dict[str, Any]:
        model = file_shares.create(self.full_name, depends_on=self.dependencies)
        model["properties"] = {"shareQuota": self.effective_quota}
        return model
