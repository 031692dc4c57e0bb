"""
Configuration management for template generation.

Provides type-safe configuration loading and validation with support
for multiple configuration sources and priority-based merging.
"""

from .loader import ConfigError, ConfigLoader, load_config
from .models import (
    DEPLOYMENT_TEMPLATE_SCHEMA,
    DependencyConfig,
    GeneratorConfig,
    TemplateConfig,
)

__all__ = [
    "DEPLOYMENT_TEMPLATE_SCHEMA",
    "ConfigError",
    "ConfigLoader",
    "DependencyConfig",
    "GeneratorConfig",
    "TemplateConfig",
    "load_config",
]
