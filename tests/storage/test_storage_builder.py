"""Tests for the fluent storage account builder."""

import pytest

from armgen.core import PrincipalId
from armgen.exceptions import InvalidResourceNameError
from armgen.storage import (
    Container,
    FileShare,
    ManagementPolicy,
    Queue,
    RoleAssignment,
    StorageAccount,
    StorageAccountConfig,
    StorageAccountKind,
    StorageContainerAccess,
    StorageSku,
)
from armgen.storage.roles import StorageBlobDataReader


def test_minimal_config_builds_only_the_account():
    resources = StorageAccountConfig("mystore").build_resources()

    assert len(resources) == 1
    assert isinstance(resources[0], StorageAccount)
    assert resources[0].location.arm_value == "westeurope"


def test_resource_order():
    config = (
        StorageAccountConfig("mystore")
        .grant_access(PrincipalId.from_object_id("abc"), StorageBlobDataReader)
        .add_queue("jobs")
        .add_lifecycle_rule("cleanup", delete_blob_after=30)
        .add_file_share("files", quota_gb=100)
        .add_private_container("data")
    )

    kinds = [type(resource) for resource in config.build_resources()]

    assert kinds == [
        StorageAccount,
        Container,
        FileShare,
        Queue,
        ManagementPolicy,
        RoleAssignment,
    ]


def test_no_policy_without_rules():
    resources = StorageAccountConfig("mystore").add_queue("jobs").build_resources()
    assert not any(isinstance(r, ManagementPolicy) for r in resources)


def test_container_access_helpers():
    config = (
        StorageAccountConfig("mystore")
        .add_private_container("private")
        .add_public_container("public")
        .add_blob_container("blobs")
    )

    accesses = [
        r.accessibility for r in config.build_resources() if isinstance(r, Container)
    ]
    assert accesses == [
        StorageContainerAccess.PRIVATE,
        StorageContainerAccess.CONTAINER,
        StorageContainerAccess.BLOB,
    ]


def test_account_settings_flow_into_account():
    account = (
        StorageAccountConfig("mystore", location="North Europe")
        .with_sku(StorageSku.STANDARD_GRS)
        .with_kind(StorageAccountKind.BLOB_ONLY)
        .add_tags(env="dev")
        .static_website("./site", "index.html", "404.html")
        .build_account()
    )

    model = account.json_model()
    assert model["location"] == "northeurope"
    assert model["sku"] == {"name": "Standard_GRS"}
    assert model["kind"] == "BlobStorage"
    assert model["tags"] == {"env": "dev"}
    assert account.static_website.error_page == "404.html"


def test_data_lake_forces_v2():
    account = (
        StorageAccountConfig("mystore")
        .with_kind(StorageAccountKind.BLOB_ONLY)
        .enable_data_lake()
        .build_account()
    )

    assert account.kind == StorageAccountKind.V2
    assert account.json_model()["properties"] == {"isHnsEnabled": True}


def test_invalid_names_rejected_when_added():
    with pytest.raises(InvalidResourceNameError):
        StorageAccountConfig("My_Store")
    with pytest.raises(InvalidResourceNameError):
        StorageAccountConfig("mystore").add_queue("Bad--Name")


def test_expressions_reference_account():
    config = StorageAccountConfig("mystore")
    account_ref = "resourceId('Microsoft.Storage/storageAccounts', 'mystore')"

    assert config.key.eval() == (
        f"[listKeys({account_ref}, '2017-10-01').keys[0].value]"
    )
    assert config.web_endpoint.eval() == (
        f"[reference({account_ref}).primaryEndpoints.web]"
    )
    assert config.connection_string.value.startswith(
        "concat('DefaultEndpointsProtocol=https;AccountName=mystore;AccountKey=', listKeys("
    )
    assert config.key.owner == config.resource_id
