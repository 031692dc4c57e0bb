"""Fluent builder for a storage account and everything inside it.

Usage:
    account = (
        StorageAccountConfig("mystore", location="westeurope")
        .add_private_container("data")
        .add_queue("jobs")
        .add_lifecycle_rule("cleanup", delete_blob_after=30, filters=["logs/"])
        .grant_access(PrincipalId.from_user_assigned_identity("app"), StorageBlobDataReader)
    )
    template.add_resources(account.build_resources())
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..core.arm_resource import ArmResource
from ..core.expressions import ArmExpression, PrincipalId, RoleId
from ..core.identifiers import Location, StorageAccountName, StorageResourceName
from ..core.resource_id import ResourceId
from .account import StaticWebsite, StorageAccount
from .blob_services import Container
from .file_shares import FileShare
from .management_policies import LifecycleRule, ManagementPolicy
from .queues import Queue
from .role_assignments import RoleAssignment
from .types import StorageAccountKind, StorageContainerAccess, StorageSku, storage_accounts

logger = logging.getLogger(__name__)

# API version used by listKeys() in the account key expression
LIST_KEYS_API_VERSION = "2017-10-01"


@dataclass
class StorageAccountConfig:
    """Collects the settings of one storage account.

    Every ``add_*`` / settings method returns the config so calls can be
    chained. Names are validated as they are added.
    """

    name: Union[StorageAccountName, str]
    location: Union[Location, str] = "westeurope"
    sku: StorageSku = StorageSku.STANDARD_LRS
    kind: StorageAccountKind = StorageAccountKind.V2
    hierarchical_namespace: Optional[bool] = None
    website: Optional[StaticWebsite] = None
    tags: Dict[str, str] = field(default_factory=dict)
    dependencies: List[ResourceId] = field(default_factory=list)
    containers: List[Tuple[StorageResourceName, StorageContainerAccess]] = field(
        default_factory=list
    )
    file_shares: List[Tuple[StorageResourceName, Optional[int]]] = field(
        default_factory=list
    )
    queues: List[StorageResourceName] = field(default_factory=list)
    rules: List[LifecycleRule] = field(default_factory=list)
    role_grants: List[Tuple[PrincipalId, RoleId]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.name, str):
            self.name = StorageAccountName(self.name)
        if isinstance(self.location, str):
            self.location = Location(self.location)

    # Account settings

    def with_sku(self, sku: StorageSku) -> "StorageAccountConfig":
        self.sku = sku
        return self

    def with_kind(self, kind: StorageAccountKind) -> "StorageAccountConfig":
        self.kind = kind
        return self

    def enable_data_lake(self, enabled: bool = True) -> "StorageAccountConfig":
        """Turn on the hierarchical namespace; data lake accounts are always V2."""
        self.hierarchical_namespace = enabled
        if enabled:
            self.kind = StorageAccountKind.V2
        return self

    def static_website(
        self, content_path: str, index_page: str, error_page: Optional[str] = None
    ) -> "StorageAccountConfig":
        self.website = StaticWebsite(
            index_page=index_page, content_path=content_path, error_page=error_page
        )
        return self

    def add_tags(self, **tags: str) -> "StorageAccountConfig":
        self.tags.update(tags)
        return self

    def depends_on(self, *resource_ids: ResourceId) -> "StorageAccountConfig":
        self.dependencies.extend(resource_ids)
        return self

    # Children

    def add_container(
        self, name: str, access: StorageContainerAccess
    ) -> "StorageAccountConfig":
        self.containers.append((StorageResourceName(name), access))
        return self

    def add_private_container(self, name: str) -> "StorageAccountConfig":
        return self.add_container(name, StorageContainerAccess.PRIVATE)

    def add_public_container(self, name: str) -> "StorageAccountConfig":
        return self.add_container(name, StorageContainerAccess.CONTAINER)

    def add_blob_container(self, name: str) -> "StorageAccountConfig":
        return self.add_container(name, StorageContainerAccess.BLOB)

    def add_file_share(
        self, name: str, quota_gb: Optional[int] = None
    ) -> "StorageAccountConfig":
        self.file_shares.append((StorageResourceName(name), quota_gb))
        return self

    def add_queue(self, name: str) -> "StorageAccountConfig":
        self.queues.append(StorageResourceName(name))
        return self

    def add_lifecycle_rule(
        self,
        name: str,
        cool_blob_after: Optional[int] = None,
        archive_blob_after: Optional[int] = None,
        delete_blob_after: Optional[int] = None,
        delete_snapshot_after: Optional[int] = None,
        filters: Sequence[str] = (),
    ) -> "StorageAccountConfig":
        self.rules.append(
            LifecycleRule(
                name=name,
                cool_blob_after=cool_blob_after,
                archive_blob_after=archive_blob_after,
                delete_blob_after=delete_blob_after,
                delete_snapshot_after=delete_snapshot_after,
                filters=filters,
            )
        )
        return self

    def grant_access(
        self, principal: PrincipalId, role: RoleId
    ) -> "StorageAccountConfig":
        self.role_grants.append((principal, role))
        return self

    # Expressions for other resources and template outputs

    @property
    def resource_id(self) -> ResourceId:
        return ResourceId.create(self.name.resource_name, storage_accounts)

    @property
    def key(self) -> ArmExpression:
        """Primary access key of the account."""
        resource_id_expr = self.resource_id.eval()[1:-1]
        return ArmExpression(
            f"listKeys({resource_id_expr}, '{LIST_KEYS_API_VERSION}').keys[0].value",
            self.resource_id,
        )

    @property
    def connection_string(self) -> ArmExpression:
        return ArmExpression(
            "concat('DefaultEndpointsProtocol=https;AccountName="
            f"{self.name.value};AccountKey=', {self.key.value})",
            self.resource_id,
        )

    @property
    def web_endpoint(self) -> ArmExpression:
        resource_id_expr = self.resource_id.eval()[1:-1]
        return ArmExpression(
            f"reference({resource_id_expr}).primaryEndpoints.web", self.resource_id
        )

    # Resources

    def build_account(self) -> StorageAccount:
        return StorageAccount(
            name=self.name,
            location=self.location,
            sku=self.sku,
            kind=self.kind,
            depends_on=tuple(self.dependencies),
            enable_hierarchical_namespace=self.hierarchical_namespace,
            static_website=self.website,
            tags=self.tags,
        )

    def build_resources(self) -> List[ArmResource]:
        """Create the account followed by its child resources.

        Order: account, containers, file shares, queues, management policy
        (only when rules were added), role assignments.
        """
        account_name = self.name.resource_name
        resources: List[ArmResource] = [self.build_account()]

        resources.extend(
            Container(name=name, storage_account=account_name, accessibility=access)
            for name, access in self.containers
        )
        resources.extend(
            FileShare(name=name, storage_account=account_name, share_quota=quota)
            for name, quota in self.file_shares
        )
        resources.extend(
            Queue(name=name, storage_account=account_name) for name in self.queues
        )
        if self.rules:
            resources.append(
                ManagementPolicy(storage_account=account_name, rules=tuple(self.rules))
            )
        resources.extend(
            RoleAssignment(
                storage_account=self.name,
                role_definition_id=role,
                principal_id=principal,
            )
            for principal, role in self.role_grants
        )

        logger.debug(
            f"Storage account '{self.name.value}' built into {len(resources)} resources"
        )
        return resources
