"""Tests for ARM template assembly."""

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List
from unittest.mock import MagicMock

import pytest

from armgen.config import GeneratorConfig
from armgen.core import ArmResource, PrincipalId, ResourceName, ResourceType
from armgen.exceptions import (
    DependencyCycleError,
    DependencyResolutionError,
    PostDeployError,
    TemplateEmissionError,
)
from armgen.storage import StaticWebsite, StorageAccount, StorageAccountConfig
from armgen.storage.roles import StorageBlobDataReader
from armgen.template import ArmTemplate, validate_template

broken_type = ResourceType("Test.Broken/things", "2020-01-01")


@dataclass(frozen=True)
class BrokenResource(ArmResource):
    """Resource kind whose json_model returns whatever it is given."""

    resource_type: ClassVar[ResourceType] = broken_type

    name: str
    model: Any

    @property
    def resource_name(self) -> ResourceName:
        return ResourceName(self.name)

    @property
    def dependencies(self) -> List:
        return []

    def json_model(self) -> Dict[str, Any]:
        if isinstance(self.model, Exception):
            raise self.model
        return self.model


def _full_template(identity) -> ArmTemplate:
    config = (
        StorageAccountConfig("mystore")
        .add_private_container("data")
        .add_file_share("files")
        .add_queue("jobs")
        .add_lifecycle_rule("cleanup", cool_blob_after=30, filters=["logs/"])
        .grant_access(identity.principal_id, StorageBlobDataReader)
    )
    template = ArmTemplate()
    template.add_resources(config.build_resources())
    template.add_resource(identity)
    template.add_output("storageKey", config.key)
    return template


class TestArmTemplate:
    def test_empty_template_envelope(self):
        template = ArmTemplate().to_dict()

        assert template == {
            "$schema": "https://schema.management.azure.com/schemas/2019-04-01/deploymentTemplate.json#",
            "contentVersion": "1.0.0.0",
            "parameters": {},
            "variables": {},
            "resources": [],
            "outputs": {},
        }
        assert validate_template(template)

    def test_full_template_orders_identity_before_assignment(self, identity):
        resources = _full_template(identity).to_dict()["resources"]
        types = [r["type"] for r in resources]

        assert types == [
            "Microsoft.Storage/storageAccounts",
            "Microsoft.Storage/storageAccounts/blobServices/containers",
            "Microsoft.Storage/storageAccounts/fileServices/shares",
            "Microsoft.Storage/storageAccounts/queueServices/queues",
            "Microsoft.Storage/storageAccounts/managementPolicies",
            "Microsoft.ManagedIdentity/userAssignedIdentities",
            "Microsoft.Storage/storageAccounts/providers/roleAssignments",
        ]

    def test_to_json_is_byte_identical(self, identity):
        assert _full_template(identity).to_json() == _full_template(identity).to_json()

    def test_outputs_parameters_and_variables(self):
        template = (
            ArmTemplate()
            .add_parameter("env", default_value="dev", description="Environment")
            .add_variable("prefix", "app")
            .add_output("plain", "value")
        ).to_dict()

        assert template["parameters"] == {
            "env": {
                "type": "string",
                "defaultValue": "dev",
                "metadata": {"description": "Environment"},
            }
        }
        assert template["variables"] == {"prefix": "app"}
        assert template["outputs"] == {"plain": {"type": "string", "value": "value"}}

    def test_expression_output_is_evaluated(self, identity):
        outputs = _full_template(identity).to_dict()["outputs"]
        assert outputs["storageKey"]["value"].startswith("[listKeys(")

    def test_unresolved_dependency_fails_whole_template(self, storage_account):
        config = StorageAccountConfig("otherstore").add_queue("jobs")
        template = ArmTemplate(resources=[storage_account, *config.build_resources()[1:]])

        with pytest.raises(DependencyResolutionError):
            template.to_dict()

    def test_unresolved_dependency_allowed_by_config(self):
        config = GeneratorConfig.model_validate({"dependencies": {"allow_external": True}})
        queue = StorageAccountConfig("otherstore").add_queue("jobs").build_resources()[1]

        resources = ArmTemplate(config=config, resources=[queue]).to_dict()["resources"]

        assert resources[0]["dependsOn"] == ["otherstore"]

    def test_role_assignment_without_identity_fails(self, storage_account):
        config = StorageAccountConfig("mystore").grant_access(
            PrincipalId.from_user_assigned_identity("missing"), StorageBlobDataReader
        )
        template = ArmTemplate(resources=config.build_resources())

        with pytest.raises(DependencyResolutionError):
            template.to_dict()

    def test_cycle_fails(self):
        first = StorageAccountConfig("first")
        second = StorageAccountConfig("second")
        first.depends_on(second.resource_id)
        second.depends_on(first.resource_id)

        template = ArmTemplate(resources=[first.build_account(), second.build_account()])
        with pytest.raises(DependencyCycleError):
            template.to_dict()

    @pytest.mark.parametrize(
        "model",
        [
            ValueError("boom"),
            ["not", "a", "dict"],
            {"type": "Test.Broken/things", "apiVersion": "2020-01-01"},
            {
                "type": "Test.Broken/things",
                "apiVersion": "2020-01-01",
                "name": "thing",
                "properties": {"value": object()},
            },
        ],
    )
    def test_defective_resource_raises_emission_error(self, model):
        template = ArmTemplate(resources=[BrokenResource("thing", model)])

        with pytest.raises(TemplateEmissionError) as exc_info:
            template.to_dict()
        assert exc_info.value.context["resource_type"] == "Test.Broken/things"

    def test_indent_from_config(self, storage_account):
        config = GeneratorConfig.model_validate({"template": {"indent": 0}})
        output = ArmTemplate(config=config, resources=[storage_account]).to_json()
        assert output.splitlines()[1].startswith('"$schema"')

    def test_write_creates_file(self, tmp_path, storage_account):
        target = tmp_path / "out" / "azuredeploy.json"

        ArmTemplate(resources=[storage_account]).write(target)

        written = json.loads(target.read_text())
        assert written["resources"][0]["name"] == "mystore"

    def test_write_leaves_nothing_on_failure(self, tmp_path):
        target = tmp_path / "azuredeploy.json"
        template = ArmTemplate(resources=[BrokenResource("thing", ValueError("x"))])

        with pytest.raises(TemplateEmissionError):
            template.write(target)
        assert not target.exists()


class TestPostDeploy:
    def test_only_post_deploy_resources_are_tasks(self, identity, storage_account):
        template = ArmTemplate(resources=[identity, storage_account])
        assert template.post_deploy_tasks() == [storage_account]

    def test_run_post_deploy_collects_outputs(self, account_name, location, monkeypatch):
        deployer = MagicMock(return_value="done")
        monkeypatch.setattr("armgen.storage.account.deploy_static_website", deployer)
        website = StorageAccount(
            name=account_name,
            location=location,
            static_website=StaticWebsite("index.html", "./site"),
        )

        results = ArmTemplate(resources=[website]).run_post_deploy("my-rg")

        assert results == ["done"]
        deployer.assert_called_once_with("mystore", "index.html", None, "./site")

    def test_run_post_deploy_skips_accounts_without_website(self, storage_account):
        assert ArmTemplate(resources=[storage_account]).run_post_deploy("my-rg") == []

    def test_run_post_deploy_propagates_failure(self, account_name, location, monkeypatch):
        monkeypatch.setattr(
            "armgen.storage.account.deploy_static_website",
            MagicMock(side_effect=PostDeployError("failed", step_errors=["x"])),
        )
        website = StorageAccount(
            name=account_name,
            location=location,
            static_website=StaticWebsite("index.html", "./site"),
        )

        with pytest.raises(PostDeployError):
            ArmTemplate(resources=[website]).run_post_deploy("my-rg")


class TestValidateTemplate:
    def test_missing_key_is_invalid(self):
        template = ArmTemplate().to_dict()
        del template["outputs"]
        assert not validate_template(template)

    def test_wrong_schema_is_invalid(self):
        template = ArmTemplate().to_dict()
        template["$schema"] = "https://example.com/schema.json"
        assert not validate_template(template)

    def test_resource_without_name_is_invalid(self):
        template = ArmTemplate().to_dict()
        template["resources"] = [{"type": "x", "apiVersion": "y"}]
        assert not validate_template(template)
