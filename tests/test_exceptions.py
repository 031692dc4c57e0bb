"""Tests for the armgen exception hierarchy."""

import pytest

from armgen.config import ConfigError
from armgen.exceptions import (
    ArmGenError,
    AzCliError,
    ConfigurationError,
    ConstructionError,
    DependencyCycleError,
    DependencyResolutionError,
    DuplicateResourceError,
    InvalidResourceNameError,
    InvalidResourceValueError,
    PostDeployError,
    TemplateEmissionError,
    TemplateError,
)


@pytest.mark.parametrize(
    "error_class,base",
    [
        (InvalidResourceNameError, ConstructionError),
        (InvalidResourceValueError, ConstructionError),
        (TemplateEmissionError, TemplateError),
        (DuplicateResourceError, TemplateError),
        (DependencyResolutionError, TemplateError),
        (DependencyCycleError, TemplateError),
        (AzCliError, ArmGenError),
        (PostDeployError, ArmGenError),
        (ConfigError, ConfigurationError),
    ],
)
def test_hierarchy(error_class, base):
    assert issubclass(error_class, base)
    assert issubclass(error_class, ArmGenError)


def test_str_includes_code_context_and_suggestion():
    error = InvalidResourceNameError(
        "Invalid storage account name 'X'",
        name="X",
        name_kind="storage account",
        recovery_suggestion="Use lowercase",
    )

    text = str(error)
    assert text.startswith("[INVALID_RESOURCE_NAME] Invalid storage account name 'X'")
    assert "name=X" in text
    assert "(suggestion: Use lowercase)" in text


def test_to_dict():
    cause = ValueError("root cause")
    error = TemplateEmissionError(
        "failed", resource_id="a/b", resource_type="T/x", cause=cause
    )

    assert error.to_dict() == {
        "error_type": "TemplateEmissionError",
        "message": "failed",
        "error_code": "TEMPLATE_EMISSION_FAILED",
        "context": {"resource_id": "a/b", "resource_type": "T/x"},
        "cause": "root cause",
        "recovery_suggestion": None,
    }


def test_cycle_context_is_readable():
    error = DependencyCycleError("cycle", cycle=["a", "b", "a"])
    assert error.context["cycle"] == "a -> b -> a"


def test_az_cli_error_context():
    error = AzCliError("failed", command=["az", "login"], returncode=1)

    assert error.context == {"command": "az login", "returncode": 1}
    assert "az login" in error.recovery_suggestion


def test_post_deploy_error_keeps_every_step():
    error = PostDeployError("failed", resource_name="site", step_errors=["a", "b"])

    assert error.step_errors == ["a", "b"]
    assert error.context == {"resource_name": "site"}
    assert PostDeployError("failed").step_errors == []
