"""Blob lifecycle management policy resource.

Emits: Microsoft.Storage/storageAccounts/managementPolicies

An account has at most one policy, always named ``default``. Its rules are
emitted in the order given; the storage service evaluates them in that order.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

from ..core.arm_resource import ArmResource
from ..core.identifiers import ResourceName
from ..core.resource_id import ResourceId, ResourceType
from ..exceptions import InvalidResourceValueError
from .types import AccountReference, account_resource_name, management_policies

POLICY_NAME = "default"


@dataclass(frozen=True)
class LifecycleRule:
    """One lifecycle rule.

    Each threshold is a number of days; None means the transition is not
    configured, which is different from a threshold of 0.
    """

    name: Union[ResourceName, str]
    cool_blob_after: Optional[int] = None
    archive_blob_after: Optional[int] = None
    delete_blob_after: Optional[int] = None
    delete_snapshot_after: Optional[int] = None
    filters: Sequence[str] = ()

    def __post_init__(self) -> None:
        if isinstance(self.name, str):
            object.__setattr__(self, "name", ResourceName(self.name))
        if isinstance(self.filters, str):
            raise InvalidResourceValueError(
                f"Lifecycle rule '{self.name}' filters must be a list of prefixes, "
                f"not the string '{self.filters}'",
                field_name="filters",
            )
        object.__setattr__(self, "filters", tuple(self.filters))
        for field_name in (
            "cool_blob_after",
            "archive_blob_after",
            "delete_blob_after",
            "delete_snapshot_after",
        ):
            days = getattr(self, field_name)
            if days is not None and days < 0:
                raise InvalidResourceValueError(
                    f"Lifecycle rule '{self.name}' has negative {field_name}: {days}",
                    field_name=field_name,
                )

    def to_arm(self) -> Dict[str, Any]:
        base_blob: Dict[str, Any] = {}
        if self.cool_blob_after is not None:
            base_blob["tierToCool"] = {
                "daysAfterModificationGreaterThan": self.cool_blob_after
            }
        if self.archive_blob_after is not None:
            base_blob["tierToArchive"] = {
                "daysAfterModificationGreaterThan": self.archive_blob_after
            }
        if self.delete_blob_after is not None:
            base_blob["delete"] = {
                "daysAfterModificationGreaterThan": self.delete_blob_after
            }

        actions: Dict[str, Any] = {"baseBlob": base_blob}
        if self.delete_snapshot_after is not None:
            actions["snapshot"] = {
                "delete": {"daysAfterCreationGreaterThan": self.delete_snapshot_after}
            }

        return {
            "enabled": True,
            "name": self.name.value,
            "type": "Lifecycle",
            "definition": {
                "actions": actions,
                "filters": {
                    "blobTypes": ["blockBlob"],
                    "prefixMatch": list(self.filters),
                },
            },
        }


@dataclass(frozen=True)
class ManagementPolicy(ArmResource):
    resource_type: ClassVar[ResourceType] = management_policies

    storage_account: AccountReference
    rules: Tuple[LifecycleRule, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "storage_account", account_resource_name(self.storage_account)
        )
        object.__setattr__(self, "rules", tuple(self.rules))

    @property
    def resource_name(self) -> ResourceName:
        return self.storage_account / POLICY_NAME

    @property
    def dependencies(self) -> List[ResourceId]:
        return [ResourceId.create(self.storage_account)]

    def json_model(self) -> Dict[str, Any]:
        model = management_policies.create(
            self.resource_name, depends_on=self.dependencies
        )
        model["properties"] = {
            "policy": {"rules": [rule.to_arm() for rule in self.rules]}
        }
        return model
