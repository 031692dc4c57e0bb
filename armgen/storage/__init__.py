"""Storage resource family: accounts, containers, shares, queues, policies and roles."""

from .account import StaticWebsite, StorageAccount
from .blob_services import Container
from .builder import StorageAccountConfig
from .file_shares import DEFAULT_SHARE_QUOTA_GB, FileShare
from .management_policies import LifecycleRule, ManagementPolicy
from .queues import Queue
from .role_assignments import RoleAssignment
from .types import (
    STORAGE_RESOURCE_TYPES,
    StorageAccountKind,
    StorageContainerAccess,
    StorageSku,
    containers,
    file_shares,
    management_policies,
    queues,
    role_assignments,
    storage_accounts,
)

__all__ = [
    "DEFAULT_SHARE_QUOTA_GB",
    "STORAGE_RESOURCE_TYPES",
    "Container",
    "FileShare",
    "LifecycleRule",
    "ManagementPolicy",
    "Queue",
    "RoleAssignment",
    "StaticWebsite",
    "StorageAccount",
    "StorageAccountConfig",
    "StorageAccountKind",
    "StorageContainerAccess",
    "StorageSku",
    "containers",
    "file_shares",
    "management_policies",
    "queues",
    "role_assignments",
    "storage_accounts",
]
