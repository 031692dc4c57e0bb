"""Role assignment scoped to a storage account.

Emits: Microsoft.Storage/storageAccounts/providers/roleAssignments

The assignment name is derived from its inputs rather than chosen by the
caller, so generating the same template twice yields the same name and the
deployment engine updates the assignment instead of duplicating it.
"""

import uuid
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List

from ..core.arm_resource import ArmResource
from ..core.expressions import PrincipalId, RoleId
from ..core.guid import deterministic_guid
from ..core.identifiers import ResourceName, StorageAccountName
from ..core.resource_id import ResourceId, ResourceType
from .types import role_assignments, storage_accounts

AUTHORIZATION_PROVIDER = "Microsoft.Authorization"


@dataclass(frozen=True)
class RoleAssignment(ArmResource):
    resource_type: ClassVar[ResourceType] = role_assignments

    storage_account: StorageAccountName
    role_definition_id: RoleId
    principal_id: PrincipalId

    @property
    def assignment_guid(self) -> uuid.UUID:
        seed = (
            self.storage_account.value
            + self.principal_id.expression.value
            + str(self.role_definition_id)
        )
        return deterministic_guid(seed)

    @property
    def resource_name(self) -> ResourceName:
        return (
            self.storage_account.resource_name
            / AUTHORIZATION_PROVIDER
            / str(self.assignment_guid)
        )

    @property
    def dependencies(self) -> List[ResourceId]:
        dependencies = [
            ResourceId.create(self.storage_account.resource_name, storage_accounts)
        ]
        if self.principal_id.owner is not None:
            dependencies.append(self.principal_id.owner)
        return dependencies

    @property
    def display_name(self) -> str:
        owner = self.principal_id.owner
        if owner is None:
            return self.role_definition_id.name
        return f"{self.role_definition_id.name} ({owner.name.value})"

    def json_model(self) -> Dict[str, Any]:
        model = role_assignments.create(
            self.resource_name, depends_on=self.dependencies
        )
        model["tags"] = {"displayName": self.display_name}
        model["properties"] = {
            "roleDefinitionId": self.role_definition_id.arm_value.eval(),
            "principalId": self.principal_id.expression.eval(),
        }
        return model
