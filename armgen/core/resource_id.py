"""Resource types and hierarchical resource addressing.

A ``ResourceType`` names a kind of ARM resource and the API version it is
emitted against. A ``ResourceId`` points at one instance of a resource,
optionally typed, and renders itself as the reference expression used in
``dependsOn``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .identifiers import Location, ResourceName


@dataclass(frozen=True)
class ResourceType:
    """ARM resource kind, e.g. ``Microsoft.Storage/storageAccounts`` at 2019-04-01."""

    type: str
    api_version: str

    def create(
        self,
        name: ResourceName,
        location: Optional[Location] = None,
        depends_on: Optional[Iterable["ResourceId"]] = None,
        tags: Optional[Mapping[str, str]] = None,
    ) -> Dict[str, Any]:
        """Build the common resource envelope.

        Arguments left as None are omitted from the result. ``depends_on`` is
        deduplicated on its rendered form, keeping the first occurrence.

        Args:
            name: Full resource name path
            location: Optional resource location
            depends_on: Optional resource ids this resource depends on
            tags: Optional tag mapping

        Returns:
            Envelope dictionary with type, apiVersion and name set
        """
        envelope: Dict[str, Any] = {
            "type": self.type,
            "apiVersion": self.api_version,
            "name": name.value,
        }
        if location is not None:
            envelope["location"] = location.arm_value
        if depends_on is not None:
            envelope["dependsOn"] = render_dependencies(depends_on)
        if tags is not None:
            envelope["tags"] = dict(tags)
        return envelope

    def __str__(self) -> str:
        return self.type


@dataclass(frozen=True)
class ResourceId:
    """Reference to a resource instance.

    An untyped id refers to a resource by name alone and renders as the bare
    name. A typed id renders as a ``resourceId(...)`` expression.
    """

    name: ResourceName
    resource_type: Optional[ResourceType] = None

    @classmethod
    def create(
        cls,
        name: Union[ResourceName, str],
        resource_type: Optional[ResourceType] = None,
    ) -> "ResourceId":
        if isinstance(name, str):
            name = ResourceName(name)
        return cls(name=name, resource_type=resource_type)

    def __truediv__(self, segment: Union[str, ResourceName]) -> "ResourceId":
        return ResourceId(name=self.name / segment, resource_type=self.resource_type)

    @property
    def is_typed(self) -> bool:
        return self.resource_type is not None

    def eval(self) -> str:
        """Render this id as it appears inside ``dependsOn``."""
        if self.resource_type is None:
            return self.name.value
        parts = [self.resource_type.type, *self.name.segments]
        arguments = ", ".join(f"'{_quote(part)}'" for part in parts)
        return f"[resourceId({arguments})]"

    def __str__(self) -> str:
        if self.resource_type is None:
            return self.name.value
        return f"{self.resource_type.type}/{self.name.value}"


def _quote(part: str) -> str:
    return part.replace("'", "''")


def render_dependencies(depends_on: Iterable[ResourceId]) -> List[str]:
    rendered: List[str] = []
    for dependency in depends_on:
        value = dependency.eval()
        if value not in rendered:
            rendered.append(value)
    return rendered
