"""ARM template expressions and the identities that use them.

An ``ArmExpression`` is the text inside ``[...]`` in a template value. When
the expression reads from another resource in the same template, ``owner``
records that resource so callers can add the dependency edge.
"""

import uuid
from dataclasses import dataclass
from typing import Optional, Union

from .identifiers import ResourceName
from .resource_id import ResourceId, ResourceType

managed_identities = ResourceType(
    "Microsoft.ManagedIdentity/userAssignedIdentities", "2018-11-30"
)


@dataclass(frozen=True)
class ArmExpression:
    value: str
    owner: Optional[ResourceId] = None

    @classmethod
    def literal(cls, text: str) -> "ArmExpression":
        escaped = text.replace("'", "''")
        return cls(f"'{escaped}'")

    def with_owner(self, owner: ResourceId) -> "ArmExpression":
        return ArmExpression(self.value, owner)

    def eval(self) -> str:
        return f"[{self.value}]"

    def __str__(self) -> str:
        return self.eval()


@dataclass(frozen=True)
class PrincipalId:
    """An identity that can be granted a role."""

    expression: ArmExpression

    @classmethod
    def from_object_id(cls, object_id: Union[str, uuid.UUID]) -> "PrincipalId":
        """Principal known by its directory object id; no template owner."""
        return cls(ArmExpression.literal(str(object_id)))

    @classmethod
    def from_user_assigned_identity(
        cls, identity_name: Union[str, ResourceName]
    ) -> "PrincipalId":
        """Principal of a user-assigned managed identity declared in the template."""
        identity_id = ResourceId.create(identity_name, managed_identities)
        resource_id_expr = identity_id.eval()[1:-1]
        return cls(
            ArmExpression(f"reference({resource_id_expr}).principalId", identity_id)
        )

    @property
    def owner(self) -> Optional[ResourceId]:
        return self.expression.owner


@dataclass(frozen=True)
class RoleId:
    """A role definition, by display name and definition GUID."""

    name: str
    id: uuid.UUID

    @property
    def arm_value(self) -> ArmExpression:
        return ArmExpression(
            f"subscriptionResourceId('Microsoft.Authorization/roleDefinitions', '{self.id}')"
        )

    def __str__(self) -> str:
        return str(self.id)
