"""ARM deployment template assembly.

This module collects resource entities into one deployment document. Emission
is all or nothing: dependencies are resolved and every resource rendered
before any output is returned, so a caller never receives a partial template.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from ..config.models import GeneratorConfig
from ..core.arm_resource import ArmResource, PostDeploy
from ..core.expressions import ArmExpression
from ..exceptions import TemplateEmissionError
from .dependency_analyzer import DependencyAnalyzer

logger = logging.getLogger(__name__)

REQUIRED_TEMPLATE_KEYS = [
    "$schema",
    "contentVersion",
    "parameters",
    "variables",
    "resources",
    "outputs",
]

REQUIRED_RESOURCE_KEYS = ["type", "apiVersion", "name"]


class ArmTemplate:
    """A set of resources rendered as one ARM deployment template."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        resources: Optional[Iterable[ArmResource]] = None,
    ) -> None:
        """
        Args:
            config: Optional generator configuration; defaults apply otherwise
            resources: Optional initial resources
        """
        self.config = config or GeneratorConfig()
        self._resources: List[ArmResource] = list(resources or [])
        self._parameters: Dict[str, Dict[str, Any]] = {}
        self._variables: Dict[str, Any] = {}
        self._outputs: Dict[str, Dict[str, Any]] = {}

    @property
    def resources(self) -> List[ArmResource]:
        return list(self._resources)

    def add_resource(self, resource: ArmResource) -> "ArmTemplate":
        self._resources.append(resource)
        return self

    def add_resources(self, resources: Iterable[ArmResource]) -> "ArmTemplate":
        self._resources.extend(resources)
        return self

    def add_parameter(
        self,
        name: str,
        parameter_type: str = "string",
        default_value: Optional[Any] = None,
        description: Optional[str] = None,
    ) -> "ArmTemplate":
        parameter: Dict[str, Any] = {"type": parameter_type}
        if default_value is not None:
            parameter["defaultValue"] = default_value
        if description:
            parameter["metadata"] = {"description": description}
        self._parameters[name] = parameter
        return self

    def add_variable(self, name: str, value: Any) -> "ArmTemplate":
        self._variables[name] = value
        return self

    def add_output(
        self,
        name: str,
        value: Union[str, ArmExpression],
        output_type: str = "string",
    ) -> "ArmTemplate":
        if isinstance(value, ArmExpression):
            value = value.eval()
        self._outputs[name] = {"type": output_type, "value": value}
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Render the complete template.

        Returns:
            Template dictionary with resources in dependency order

        Raises:
            TemplateError: If dependencies cannot be resolved or a resource
                cannot be rendered
        """
        analyzer = DependencyAnalyzer(
            allow_external=self.config.dependencies.allow_external
        )
        ordered = analyzer.analyze(self._resources)

        resources = [self._render(entry.resource) for entry in ordered]

        template: Dict[str, Any] = {
            "$schema": self.config.template.schema_url,
            "contentVersion": self.config.template.content_version,
            "parameters": dict(self._parameters),
            "variables": dict(self._variables),
            "resources": resources,
            "outputs": dict(self._outputs),
        }

        logger.info(f"Emitted ARM template with {len(resources)} resources")
        return template

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=self.config.template.indent)

    def write(self, file_path: Path) -> Path:
        """Render the template and write it to ``file_path``.

        Nothing is written when rendering fails.
        """
        content = self.to_json()
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, "w") as f:
            f.write(content)
        logger.info(f"Wrote ARM template to {file_path}")
        return file_path

    def post_deploy_tasks(self) -> List[PostDeploy]:
        return [r for r in self._resources if isinstance(r, PostDeploy)]

    def run_post_deploy(self, resource_group_name: str) -> List[str]:
        """Run the post-deploy step of every resource that has one, in order.

        Raises:
            PostDeployError: On the first failing resource
        """
        results = []
        for task in self.post_deploy_tasks():
            result = task.run(resource_group_name)
            if result is not None:
                results.append(result)
        return results

    def _render(self, resource: ArmResource) -> Dict[str, Any]:
        resource_id = str(resource.resource_id)
        resource_type = resource.resource_type.type

        try:
            model = resource.json_model()
        except Exception as e:
            raise TemplateEmissionError(
                f"Resource '{resource_id}' failed to render: {e}",
                resource_id=resource_id,
                resource_type=resource_type,
                cause=e,
            ) from e

        if not isinstance(model, dict):
            raise TemplateEmissionError(
                f"Resource '{resource_id}' rendered {type(model).__name__}, not an object",
                resource_id=resource_id,
                resource_type=resource_type,
            )

        missing = [key for key in REQUIRED_RESOURCE_KEYS if not model.get(key)]
        if missing:
            raise TemplateEmissionError(
                f"Resource '{resource_id}' is missing {', '.join(missing)}",
                resource_id=resource_id,
                resource_type=resource_type,
            )

        try:
            json.dumps(model, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise TemplateEmissionError(
                f"Resource '{resource_id}' is not JSON serializable: {e}",
                resource_id=resource_id,
                resource_type=resource_type,
                cause=e,
            ) from e

        return model


def validate_template(template_data: Dict[str, Any]) -> bool:
    """Validate a rendered ARM template envelope.

    Args:
        template_data: Template dictionary

    Returns:
        True if template is valid, False otherwise
    """
    for key in REQUIRED_TEMPLATE_KEYS:
        if key not in template_data:
            return False

    if not str(template_data["$schema"]).startswith(
        "https://schema.management.azure.com"
    ):
        return False

    if not template_data["contentVersion"]:
        return False

    if not isinstance(template_data["resources"], list):
        return False

    for resource in template_data["resources"]:
        if not isinstance(resource, dict):
            return False
        if any(key not in resource for key in REQUIRED_RESOURCE_KEYS):
            return False

    return True
