"""Shared fixtures for armgen tests."""

import pytest

from armgen.core import Location, ResourceName, StorageAccountName
from armgen.managed_identity import UserAssignedIdentity
from armgen.storage import StorageAccount


@pytest.fixture
def account_name() -> StorageAccountName:
    return StorageAccountName("mystore")


@pytest.fixture
def location() -> Location:
    return Location("westeurope")


@pytest.fixture
def storage_account(account_name, location) -> StorageAccount:
    """A plain V2 storage account with default settings."""
    return StorageAccount(name=account_name, location=location)


@pytest.fixture
def identity(location) -> UserAssignedIdentity:
    return UserAssignedIdentity(name=ResourceName("appidentity"), location=location)
