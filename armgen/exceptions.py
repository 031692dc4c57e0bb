"""
Custom Exception Hierarchy for armgen

This module provides the exception hierarchy shared by the resource model,
template emission and post-deploy hooks, carrying structured error context
for logging and debugging.
"""

from typing import Any, Dict, List, Optional


class ArmGenError(Exception):
    """
    Base exception class for all armgen related errors.

    Provides structured error information including context, error codes,
    and optional recovery suggestions.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        recovery_suggestion: Optional[str] = None,
    ) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message
            error_code: Optional error code for programmatic handling
            context: Optional dictionary with error context
            cause: Optional underlying exception that caused this error
            recovery_suggestion: Optional suggestion for error recovery
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause
        self.recovery_suggestion = recovery_suggestion

    def __str__(self) -> str:
        """Return a formatted error message with context."""
        result = self.message
        if self.error_code:
            result = f"[{self.error_code}] {result}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            result += f" (context: {context_str})"
        if self.cause:
            result += f" (caused by: {self.cause})"
        if self.recovery_suggestion:
            result += f" (suggestion: {self.recovery_suggestion})"
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None,
            "recovery_suggestion": self.recovery_suggestion,
        }


# Construction-related exceptions
class ConstructionError(ArmGenError):
    """Base class for errors raised while constructing resource entities."""

    pass


class InvalidResourceNameError(ConstructionError):
    """Raised when a resource name fails validation."""

    def __init__(
        self,
        message: str,
        name: Optional[str] = None,
        name_kind: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.get("context", {})
        if name is not None:
            context["name"] = name
        if name_kind:
            context["name_kind"] = name_kind
        kwargs["context"] = context
        kwargs.setdefault("error_code", "INVALID_RESOURCE_NAME")
        super().__init__(message, **kwargs)


class InvalidResourceValueError(ConstructionError):
    """Raised when a resource field holds a value outside its allowed range."""

    def __init__(
        self, message: str, field_name: Optional[str] = None, **kwargs: Any
    ) -> None:
        context = kwargs.get("context", {})
        if field_name:
            context["field"] = field_name
        kwargs["context"] = context
        kwargs.setdefault("error_code", "INVALID_RESOURCE_VALUE")
        super().__init__(message, **kwargs)


# Template-related exceptions
class TemplateError(ArmGenError):
    """Base class for template emission errors."""

    pass


class TemplateEmissionError(TemplateError):
    """Raised when a resource cannot produce a valid JSON model.

    This always indicates a defect in a resource kind, never bad user input.
    """

    def __init__(
        self,
        message: str,
        resource_id: Optional[str] = None,
        resource_type: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.get("context", {})
        if resource_id:
            context["resource_id"] = resource_id
        if resource_type:
            context["resource_type"] = resource_type
        kwargs["context"] = context
        kwargs.setdefault("error_code", "TEMPLATE_EMISSION_FAILED")
        super().__init__(message, **kwargs)


class DuplicateResourceError(TemplateError):
    """Raised when two resources in one template share a resource id."""

    def __init__(
        self, message: str, resource_id: Optional[str] = None, **kwargs: Any
    ) -> None:
        context = kwargs.get("context", {})
        if resource_id:
            context["resource_id"] = resource_id
        kwargs["context"] = context
        kwargs.setdefault("error_code", "DUPLICATE_RESOURCE")
        super().__init__(message, **kwargs)


class DependencyResolutionError(TemplateError):
    """Raised when a dependsOn reference cannot be resolved within a template."""

    def __init__(
        self,
        message: str,
        resource_id: Optional[str] = None,
        dependency: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.get("context", {})
        if resource_id:
            context["resource_id"] = resource_id
        if dependency:
            context["dependency"] = dependency
        kwargs["context"] = context
        kwargs.setdefault("error_code", "DEPENDENCY_UNRESOLVED")
        kwargs.setdefault(
            "recovery_suggestion",
            "Add the referenced resource to the template or allow external dependencies",
        )
        super().__init__(message, **kwargs)


class DependencyCycleError(TemplateError):
    """Raised when resource dependencies form a cycle."""

    def __init__(
        self, message: str, cycle: Optional[List[str]] = None, **kwargs: Any
    ) -> None:
        context = kwargs.get("context", {})
        if cycle:
            context["cycle"] = " -> ".join(cycle)
        kwargs["context"] = context
        kwargs.setdefault("error_code", "DEPENDENCY_CYCLE")
        super().__init__(message, **kwargs)


# Post-deploy exceptions
class AzCliError(ArmGenError):
    """Raised when an `az` CLI invocation fails or times out."""

    def __init__(
        self,
        message: str,
        command: Optional[List[str]] = None,
        returncode: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.get("context", {})
        if command:
            context["command"] = " ".join(command)
        if returncode is not None:
            context["returncode"] = returncode
        kwargs["context"] = context
        kwargs.setdefault("error_code", "AZ_CLI_FAILED")
        kwargs.setdefault(
            "recovery_suggestion", "Try running 'az login' or check the az CLI output"
        )
        super().__init__(message, **kwargs)


class PostDeployError(ArmGenError):
    """Raised when a post-deploy step fails.

    All step failures are kept in ``step_errors`` so that no underlying
    message is lost.
    """

    def __init__(
        self,
        message: str,
        resource_name: Optional[str] = None,
        step_errors: Optional[List[str]] = None,
        **kwargs: Any,
    ) -> None:
        context = kwargs.get("context", {})
        if resource_name:
            context["resource_name"] = resource_name
        kwargs["context"] = context
        kwargs.setdefault("error_code", "POST_DEPLOY_FAILED")
        super().__init__(message, **kwargs)
        self.step_errors = list(step_errors or [])


# Configuration-related exceptions
class ConfigurationError(ArmGenError):
    """Base class for configuration-related errors."""

    pass
