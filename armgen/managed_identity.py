"""User-assigned managed identity resource.

Emits: Microsoft.ManagedIdentity/userAssignedIdentities
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Mapping

from .core.arm_resource import ArmResource
from .core.expressions import PrincipalId, managed_identities
from .core.identifiers import Location, ResourceName
from .core.resource_id import ResourceId, ResourceType


@dataclass(frozen=True)
class UserAssignedIdentity(ArmResource):
    resource_type: ClassVar[ResourceType] = managed_identities

    name: ResourceName
    location: Location
    tags: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.name, str):
            object.__setattr__(self, "name", ResourceName(self.name))
        object.__setattr__(self, "tags", dict(self.tags))

    @property
    def resource_name(self) -> ResourceName:
        return self.name

    @property
    def dependencies(self) -> List[ResourceId]:
        return []

    @property
    def principal_id(self) -> PrincipalId:
        return PrincipalId.from_user_assigned_identity(self.name)

    def json_model(self) -> Dict[str, Any]:
        model = managed_identities.create(
            self.name, self.location, tags=self.tags or None
        )
        model["properties"] = {}
        return model
