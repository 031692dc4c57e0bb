"""Tests for storage account role assignments."""

import uuid

import pytest

from armgen.core import PrincipalId, ResourceId, StorageAccountName, deterministic_guid
from armgen.core.expressions import managed_identities
from armgen.storage import RoleAssignment, storage_accounts
from armgen.storage.roles import (
    BUILT_IN_ROLES,
    StorageBlobDataContributor,
    StorageBlobDataReader,
)

OBJECT_ID = "00000000-1111-2222-3333-444444444444"


@pytest.fixture
def assignment(account_name):
    return RoleAssignment(
        storage_account=account_name,
        role_definition_id=StorageBlobDataContributor,
        principal_id=PrincipalId.from_object_id(OBJECT_ID),
    )


def test_name_is_stable_across_constructions(account_name, assignment):
    again = RoleAssignment(
        storage_account=account_name,
        role_definition_id=StorageBlobDataContributor,
        principal_id=PrincipalId.from_object_id(OBJECT_ID),
    )

    assert assignment.resource_name == again.resource_name
    assert assignment.json_model() == again.json_model()


def test_guid_derived_from_account_principal_and_role(assignment):
    expected = deterministic_guid(
        "mystore" + f"'{OBJECT_ID}'" + "ba92f5b4-2d11-453d-a403-e96b0029c9fe"
    )
    assert assignment.assignment_guid == expected
    assert isinstance(assignment.assignment_guid, uuid.UUID)


def test_name_shape(assignment):
    segments = assignment.resource_name.segments

    assert segments[:2] == ["mystore", "Microsoft.Authorization"]
    assert uuid.UUID(segments[2]) == assignment.assignment_guid


@pytest.mark.parametrize(
    "changed",
    [
        {"storage_account": StorageAccountName("otherstore")},
        {"role_definition_id": StorageBlobDataReader},
        {"principal_id": PrincipalId.from_object_id("99999999-1111-2222-3333-444444444444")},
    ],
)
def test_changing_any_input_changes_name(account_name, assignment, changed):
    fields = {
        "storage_account": account_name,
        "role_definition_id": StorageBlobDataContributor,
        "principal_id": PrincipalId.from_object_id(OBJECT_ID),
    }
    fields.update(changed)

    assert RoleAssignment(**fields).resource_name != assignment.resource_name


def test_literal_principal_json(assignment):
    model = assignment.json_model()

    assert model["type"] == "Microsoft.Storage/storageAccounts/providers/roleAssignments"
    assert model["apiVersion"] == "2018-09-01-preview"
    assert model["dependsOn"] == [
        "[resourceId('Microsoft.Storage/storageAccounts', 'mystore')]"
    ]
    assert model["tags"] == {"displayName": "Storage Blob Data Contributor"}
    assert model["properties"] == {
        "roleDefinitionId": (
            "[subscriptionResourceId('Microsoft.Authorization/roleDefinitions', "
            "'ba92f5b4-2d11-453d-a403-e96b0029c9fe')]"
        ),
        "principalId": f"['{OBJECT_ID}']",
    }


def test_managed_identity_principal_adds_owner_dependency(account_name):
    principal = PrincipalId.from_user_assigned_identity("appidentity")
    assignment = RoleAssignment(
        storage_account=account_name,
        role_definition_id=StorageBlobDataReader,
        principal_id=principal,
    )

    assert assignment.dependencies == [
        ResourceId.create("mystore", storage_accounts),
        ResourceId.create("appidentity", managed_identities),
    ]

    model = assignment.json_model()
    assert model["dependsOn"] == [
        "[resourceId('Microsoft.Storage/storageAccounts', 'mystore')]",
        "[resourceId('Microsoft.ManagedIdentity/userAssignedIdentities', 'appidentity')]",
    ]
    assert model["tags"] == {"displayName": "Storage Blob Data Reader (appidentity)"}
    assert model["properties"]["principalId"] == (
        "[reference(resourceId('Microsoft.ManagedIdentity/userAssignedIdentities', "
        "'appidentity')).principalId]"
    )


def test_built_in_roles_indexed_by_name():
    assert BUILT_IN_ROLES["Storage Blob Data Reader"] is StorageBlobDataReader
    assert len({role.id for role in BUILT_IN_ROLES.values()}) == len(BUILT_IN_ROLES)
