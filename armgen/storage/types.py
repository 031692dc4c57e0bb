"""Resource types and enumerations for the storage resource family."""

from enum import Enum
from typing import Union

from ..core.identifiers import ResourceName, StorageAccountName
from ..core.resource_id import ResourceType

storage_accounts = ResourceType("Microsoft.Storage/storageAccounts", "2019-04-01")
containers = ResourceType(
    "Microsoft.Storage/storageAccounts/blobServices/containers", "2018-03-01-preview"
)
file_shares = ResourceType(
    "Microsoft.Storage/storageAccounts/fileServices/shares", "2019-06-01"
)
queues = ResourceType(
    "Microsoft.Storage/storageAccounts/queueServices/queues", "2019-06-01"
)
management_policies = ResourceType(
    "Microsoft.Storage/storageAccounts/managementPolicies", "2019-06-01"
)
role_assignments = ResourceType(
    "Microsoft.Storage/storageAccounts/providers/roleAssignments",
    "2018-09-01-preview",
)

STORAGE_RESOURCE_TYPES = (
    storage_accounts,
    containers,
    file_shares,
    queues,
    management_policies,
    role_assignments,
)

AccountReference = Union[StorageAccountName, ResourceName, str]


class StorageAccountKind(str, Enum):
    """Storage account kinds, valued by their ARM ``kind`` string."""

    V1 = "Storage"
    V2 = "StorageV2"
    BLOB_ONLY = "BlobStorage"
    FILES_ONLY = "FileStorage"
    BLOCK_BLOB_ONLY = "BlockBlobStorage"

    @property
    def arm_value(self) -> str:
        return self.value


class StorageSku(str, Enum):
    STANDARD_LRS = "Standard_LRS"
    STANDARD_GRS = "Standard_GRS"
    STANDARD_RAGRS = "Standard_RAGRS"
    STANDARD_ZRS = "Standard_ZRS"
    STANDARD_GZRS = "Standard_GZRS"
    STANDARD_RAGZRS = "Standard_RAGZRS"
    PREMIUM_LRS = "Premium_LRS"
    PREMIUM_ZRS = "Premium_ZRS"

    @property
    def arm_value(self) -> str:
        return self.value


class StorageContainerAccess(str, Enum):
    """Public access level of a blob container, valued by ``publicAccess``."""

    PRIVATE = "None"
    CONTAINER = "Container"
    BLOB = "Blob"

    @property
    def arm_value(self) -> str:
        return self.value


def account_resource_name(account: AccountReference) -> ResourceName:
    """Normalize the owning account reference held by sub-resources."""
    if isinstance(account, ResourceName):
        return account
    if isinstance(account, StorageAccountName):
        return account.resource_name
    return ResourceName(account)
