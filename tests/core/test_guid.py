"""Tests for deterministic GUID derivation."""

import itertools
import uuid

from armgen.core import deterministic_guid
from armgen.core.guid import DETERMINISTIC_GUID_NAMESPACE


def test_same_seed_same_guid():
    assert deterministic_guid("mystore-principal-role") == deterministic_guid(
        "mystore-principal-role"
    )


def test_guid_is_pinned_uuid5():
    seed = "mystore'abc'ba92f5b4-2d11-453d-a403-e96b0029c9fe"
    result = deterministic_guid(seed)
    assert result.version == 5
    assert result == uuid.uuid5(DETERMINISTIC_GUID_NAMESPACE, seed)


def test_distinct_seeds_do_not_collide():
    seeds = ["", "a", "b", "ab", "ba", "mystore", "mystore2", "MyStore"]
    guids = [deterministic_guid(seed) for seed in seeds]
    for first, second in itertools.combinations(guids, 2):
        assert first != second
