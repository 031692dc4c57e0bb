"""Storage account resource.

Emits: Microsoft.Storage/storageAccounts
Post-deploy: optional static website activation and content upload
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Tuple

from ..core.arm_resource import ArmResource, PostDeploy
from ..core.identifiers import Location, ResourceName, StorageAccountName
from ..core.resource_id import ResourceId, ResourceType
from ..deployment.az_cli import deploy_static_website
from .types import StorageAccountKind, StorageSku, storage_accounts

logger = logging.getLogger(__name__)

# (account_name, index_page, error_page, content_path) -> combined output
StaticWebsiteDeployer = Callable[[str, str, Optional[str], str], str]


@dataclass(frozen=True)
class StaticWebsite:
    index_page: str
    content_path: str
    error_page: Optional[str] = None


@dataclass(frozen=True)
class StorageAccount(ArmResource, PostDeploy):
    """An Azure storage account.

    ``enable_hierarchical_namespace`` is tri-state: None leaves the setting
    out of the template (``properties`` is emitted as ``{}``), True or False
    emit ``isHnsEnabled`` explicitly.
    """

    resource_type: ClassVar[ResourceType] = storage_accounts

    name: StorageAccountName
    location: Location
    sku: StorageSku = StorageSku.STANDARD_LRS
    kind: StorageAccountKind = StorageAccountKind.V2
    depends_on: Tuple[ResourceId, ...] = ()
    enable_hierarchical_namespace: Optional[bool] = None
    static_website: Optional[StaticWebsite] = None
    tags: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "depends_on", tuple(self.depends_on))
        object.__setattr__(self, "tags", dict(self.tags))

    @property
    def resource_name(self) -> ResourceName:
        return self.name.resource_name

    @property
    def dependencies(self) -> List[ResourceId]:
        return list(self.depends_on)

    def json_model(self) -> Dict[str, Any]:
        model = storage_accounts.create(
            self.resource_name, self.location, self.dependencies, self.tags
        )
        model["sku"] = {"name": self.sku.arm_value}
        model["kind"] = self.kind.arm_value
        if self.enable_hierarchical_namespace is not None:
            model["properties"] = {"isHnsEnabled": self.enable_hierarchical_namespace}
        else:
            model["properties"] = {}
        return model

    def run(
        self,
        resource_group_name: str,
        deployer: Optional[StaticWebsiteDeployer] = None,
    ) -> Optional[str]:
        """Enable the static website and upload its content, if configured.

        Args:
            resource_group_name: Resource group the account was deployed to
            deployer: Static website collaborator; defaults to the az CLI one

        Returns:
            Combined output of both steps, or None without a static website

        Raises:
            PostDeployError: If either step failed
        """
        if self.static_website is None:
            return None

        site = self.static_website
        deployer = deployer or deploy_static_website
        logger.info(
            f"Deploying content of {site.content_path} folder to $web container "
            f"for storage account {self.name.value} (resource group {resource_group_name})"
        )
        return deployer(
            self.name.value, site.index_page, site.error_page, site.content_path
        )
