"""Capabilities shared by every resource kind that can appear in a template.

Resource kinds should be:
- Immutable: frozen records, validated when constructed
- Pure: ``json_model`` depends only on the record's own fields
- Self-describing: type, name and dependencies are declared, not inferred
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Optional

from .identifiers import ResourceName
from .resource_id import ResourceId, ResourceType


class ArmResource(ABC):
    """Anything that can be emitted into an ARM deployment template.

    Usage:
        @dataclass(frozen=True)
        class Queue(ArmResource):
            resource_type: ClassVar[ResourceType] = queues
            ...

            def json_model(self):
                return queues.create(self.full_name, depends_on=self.dependencies)
    """

    # Subclasses MUST override this
    resource_type: ClassVar[ResourceType]

    @property
    @abstractmethod
    def resource_name(self) -> ResourceName:
        """The entity's own identity, used for uniqueness and cross references."""

    @property
    def full_name(self) -> ResourceName:
        """Name as emitted in the template; child resources override this."""
        return self.resource_name

    @property
    def resource_id(self) -> ResourceId:
        """Typed id of this resource within a template."""
        return ResourceId(self.full_name, self.resource_type)

    @property
    @abstractmethod
    def dependencies(self) -> List[ResourceId]:
        """Resources that must be deployed before this one."""

    @abstractmethod
    def json_model(self) -> Dict[str, Any]:
        """Return the fully resolved, JSON serializable resource body."""
        raise NotImplementedError


class PostDeploy(ABC):
    """Side effect run after the template has been deployed."""

    @abstractmethod
    def run(self, resource_group_name: str) -> Optional[str]:
        """Execute the post-deploy step.

        Args:
            resource_group_name: Resource group the template was deployed to

        Returns:
            Output message, or None when there was nothing to do

        Raises:
            PostDeployError: If the step failed
        """
        raise NotImplementedError
