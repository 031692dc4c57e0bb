"""armgen: typed Azure Resource Manager template generation.

Resource entities describe the desired infrastructure; ``ArmTemplate``
resolves their dependencies and renders one deployment document.
"""

from .core import (
    ArmExpression,
    ArmResource,
    Location,
    PostDeploy,
    PrincipalId,
    ResourceId,
    ResourceName,
    ResourceType,
    RoleId,
    deterministic_guid,
)
from .template import ArmTemplate, validate_template

__version__ = "0.1.0"

__all__ = [
    "ArmExpression",
    "ArmResource",
    "ArmTemplate",
    "Location",
    "PostDeploy",
    "PrincipalId",
    "ResourceId",
    "ResourceName",
    "ResourceType",
    "RoleId",
    "deterministic_guid",
    "validate_template",
]
