"""Dependency analyzer for ARM template emission.

This module resolves every declared dependency of a resource set to a
resource in the same set, rejects duplicates and cycles, and orders the
resources so that each one follows everything it depends on. The dependsOn
edges are what the deployment engine uses to decide which resources may be
created in parallel, so an edge that does not resolve is an error rather
than something to drop silently.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import networkx as nx

from ..core.arm_resource import ArmResource
from ..core.resource_id import ResourceId
from ..exceptions import (
    DependencyCycleError,
    DependencyResolutionError,
    DuplicateResourceError,
)

logger = logging.getLogger(__name__)

NodeKey = Tuple[str, str]


def node_key(resource_id: ResourceId) -> NodeKey:
    """Identity of a typed resource id; resource types compare case-insensitively."""
    resource_type = resource_id.resource_type.type.lower() if resource_id.resource_type else ""
    return resource_type, resource_id.name.value


@dataclass
class ResourceDependency:
    """A resource with its resolved dependencies."""

    resource: ArmResource
    index: int
    depends_on: List[int] = field(default_factory=list)
    external: List[ResourceId] = field(default_factory=list)


class DependencyAnalyzer:
    """Builds the dependency graph of a resource set and orders it."""

    def __init__(self, allow_external: bool = False) -> None:
        """
        Args:
            allow_external: Keep references to resources outside the set
                instead of failing
        """
        self.allow_external = allow_external

    def analyze(self, resources: Sequence[ArmResource]) -> List[ResourceDependency]:
        """Resolve dependencies and return resources in deployment order.

        Resources with no path between them keep their insertion order.

        Args:
            resources: Resources in insertion order

        Returns:
            ResourceDependency objects ordered so dependencies come first

        Raises:
            DuplicateResourceError: Two resources share a resource id
            DependencyResolutionError: A reference is missing or ambiguous
            DependencyCycleError: The dependencies form a cycle
        """
        logger.info(f"Analyzing dependencies for {len(resources)} resources")

        by_key: Dict[NodeKey, int] = {}
        by_name: Dict[str, List[int]] = {}
        for index, resource in enumerate(resources):
            key = node_key(resource.resource_id)
            if key in by_key:
                raise DuplicateResourceError(
                    f"Resource '{resource.resource_id}' is declared more than once",
                    resource_id=str(resource.resource_id),
                )
            by_key[key] = index
            by_name.setdefault(resource.full_name.value, []).append(index)

        graph = nx.DiGraph()
        entries: List[ResourceDependency] = []
        for index, resource in enumerate(resources):
            graph.add_node(index)
            entry = ResourceDependency(resource=resource, index=index)
            for dependency in resource.dependencies:
                target = self._resolve(resource, dependency, by_key, by_name)
                if target is None:
                    entry.external.append(dependency)
                    continue
                if target not in entry.depends_on:
                    entry.depends_on.append(target)
                    graph.add_edge(target, index)
            entries.append(entry)

        if not nx.is_directed_acyclic_graph(graph):
            cycle = nx.find_cycle(graph)
            names = [str(resources[source].resource_id) for source, _ in cycle]
            names.append(names[0])
            raise DependencyCycleError(
                "Resource dependencies form a cycle", cycle=names
            )

        order = list(nx.lexicographical_topological_sort(graph))
        edge_count = graph.number_of_edges()
        logger.info(
            f"Resolved {edge_count} dependency edges between {len(resources)} resources"
        )
        return [entries[index] for index in order]

    def _resolve(
        self,
        resource: ArmResource,
        dependency: ResourceId,
        by_key: Dict[NodeKey, int],
        by_name: Dict[str, List[int]],
    ) -> Optional[int]:
        if dependency.is_typed:
            target = by_key.get(node_key(dependency))
            candidates = [] if target is None else [target]
        else:
            candidates = by_name.get(dependency.name.value, [])

        if len(candidates) == 1:
            logger.debug(
                f"{resource.resource_id} depends on "
                f"{dependency.eval()} (resource #{candidates[0]})"
            )
            return candidates[0]

        if len(candidates) > 1:
            raise DependencyResolutionError(
                f"Dependency '{dependency.eval()}' of '{resource.resource_id}' "
                f"matches {len(candidates)} resources",
                resource_id=str(resource.resource_id),
                dependency=dependency.eval(),
                recovery_suggestion="Use a typed resource id for this dependency",
            )

        if self.allow_external:
            logger.warning(
                f"Dependency '{dependency.eval()}' of '{resource.resource_id}' "
                "is not part of this template; keeping it as an external reference"
            )
            return None

        raise DependencyResolutionError(
            f"Dependency '{dependency.eval()}' of '{resource.resource_id}' "
            "is not part of this template",
            resource_id=str(resource.resource_id),
            dependency=dependency.eval(),
        )
