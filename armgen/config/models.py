"""
Configuration models for template generation.

Provides type-safe configuration using pydantic with validation,
defaults, and schema enforcement.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEPLOYMENT_TEMPLATE_SCHEMA = (
    "https://schema.management.azure.com/schemas/2019-04-01/deploymentTemplate.json#"
)


class TemplateConfig(BaseModel):
    """Settings for the deployment document envelope and its serialization."""

    schema_url: str = Field(
        default=DEPLOYMENT_TEMPLATE_SCHEMA,
        description="Value of the template's $schema key",
    )
    content_version: str = Field(
        default="1.0.0.0",
        description="Value of the template's contentVersion key",
    )
    indent: Annotated[int, Field(ge=0, le=8)] = Field(
        default=2,
        description="JSON indentation used when writing templates",
    )

    model_config = ConfigDict(extra="forbid")  # Reject unknown fields

    @field_validator("schema_url")
    @classmethod
    def validate_schema_url(cls, v: str) -> str:
        """Only Azure deployment template schemas are accepted."""
        if not v.startswith("https://schema.management.azure.com"):
            raise ValueError("schema_url must point at schema.management.azure.com")
        return v

    @field_validator("content_version")
    @classmethod
    def validate_content_version(cls, v: str) -> str:
        parts = v.split(".")
        if len(parts) != 4 or not all(p.isdigit() for p in parts):
            raise ValueError("content_version must look like 1.0.0.0")
        return v


class DependencyConfig(BaseModel):
    """Settings for dependency resolution."""

    allow_external: bool = Field(
        default=False,
        description="Keep dependsOn references to resources outside the template",
    )

    model_config = ConfigDict(extra="forbid")


class GeneratorConfig(BaseModel):
    """Root configuration for armgen."""

    template: TemplateConfig = Field(
        default_factory=TemplateConfig,
        description="Template envelope settings",
    )
    dependencies: DependencyConfig = Field(
        default_factory=DependencyConfig,
        description="Dependency resolution settings",
    )

    model_config = ConfigDict(extra="forbid")
