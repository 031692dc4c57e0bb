"""Generic resource model shared by all resource families."""

from .arm_resource import ArmResource, PostDeploy
from .expressions import ArmExpression, PrincipalId, RoleId, managed_identities
from .guid import deterministic_guid
from .identifiers import (
    Location,
    ResourceName,
    StorageAccountName,
    StorageResourceName,
    Tags,
)
from .resource_id import ResourceId, ResourceType, render_dependencies

__all__ = [
    "ArmExpression",
    "ArmResource",
    "Location",
    "PostDeploy",
    "PrincipalId",
    "ResourceId",
    "ResourceName",
    "ResourceType",
    "RoleId",
    "StorageAccountName",
    "StorageResourceName",
    "Tags",
    "deterministic_guid",
    "managed_identities",
    "render_dependencies",
]
