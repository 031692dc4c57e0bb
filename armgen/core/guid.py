"""Deterministic GUID derivation.

Names derived here must stay stable across processes, machines and
releases: a role assignment re-emitted with the same inputs has to get the
same name so the deployment engine updates it instead of creating a second
one. The algorithm (UUIDv5, SHA-1) and namespace are pinned; changing either
renames every derived resource.
"""

import uuid

DETERMINISTIC_GUID_VERSION = 1

DETERMINISTIC_GUID_NAMESPACE = uuid.UUID("92f3929f-622a-4149-8f39-83a4bcd385c8")


def deterministic_guid(seed: str) -> uuid.UUID:
    """Derive a stable UUID from a seed string.

    Args:
        seed: Arbitrary seed text, hashed as UTF-8

    Returns:
        Version 5 UUID in the pinned namespace
    """
    return uuid.uuid5(DETERMINISTIC_GUID_NAMESPACE, seed)
