"""Template emission: dependency resolution and deployment document assembly."""

from .arm_template import ArmTemplate, validate_template
from .dependency_analyzer import DependencyAnalyzer, ResourceDependency

__all__ = [
    "ArmTemplate",
    "DependencyAnalyzer",
    "ResourceDependency",
    "validate_template",
]
