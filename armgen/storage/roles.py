"""Built-in role definitions relevant to storage accounts."""

import uuid

from ..core.expressions import RoleId

StorageAccountContributor = RoleId(
    "Storage Account Contributor", uuid.UUID("17d1049b-9a84-46fb-8f53-869881c3d3ab")
)
StorageBlobDataContributor = RoleId(
    "Storage Blob Data Contributor", uuid.UUID("ba92f5b4-2d11-453d-a403-e96b0029c9fe")
)
StorageBlobDataOwner = RoleId(
    "Storage Blob Data Owner", uuid.UUID("b7e6dc6d-f1e8-4753-8033-0f276bb0955b")
)
StorageBlobDataReader = RoleId(
    "Storage Blob Data Reader", uuid.UUID("2a2b9908-6ea1-4ae2-8e65-a410df84e7d1")
)
StorageQueueDataContributor = RoleId(
    "Storage Queue Data Contributor", uuid.UUID("974c5e8b-45b9-4653-ba55-5f855dd0fb88")
)
StorageQueueDataReader = RoleId(
    "Storage Queue Data Reader", uuid.UUID("19e7f393-937e-4f77-808e-94535e297925")
)
StorageFileDataSmbShareContributor = RoleId(
    "Storage File Data SMB Share Contributor",
    uuid.UUID("0c867c2a-1d8c-454a-a3db-ab2ea1bdc8bb"),
)
ReaderAndDataAccess = RoleId(
    "Reader and Data Access", uuid.UUID("c12c1c16-33a1-487b-954d-41c89c60f349")
)

BUILT_IN_ROLES = {
    role.name: role
    for role in (
        StorageAccountContributor,
        StorageBlobDataContributor,
        StorageBlobDataOwner,
        StorageBlobDataReader,
        StorageQueueDataContributor,
        StorageQueueDataReader,
        StorageFileDataSmbShareContributor,
        ReaderAndDataAccess,
    )
}
