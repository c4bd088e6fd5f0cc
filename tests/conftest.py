"""Shared fixtures for the set tests."""
from __future__ import annotations

import random

import pytest

from ordset.sets.standard_set import StandardSet
from ordset.sets.threadsafe_set import ThreadsafeSet

# Fixed seed so generated samples are the same on every run
SEED = 42


@pytest.fixture(params=[StandardSet, ThreadsafeSet], ids=["standard", "threadsafe"])
def set_cls(request):
    """Run a test once against each variant."""
    return request.param


@pytest.fixture
def empty_set(set_cls):
    return set_cls()


@pytest.fixture
def demo() -> list[int]:
    return [1, 2, 3, 4, 5, 6, 7, 8]


@pytest.fixture
def random_ints() -> list[int]:
    """2000 ints drawn with replacement from 0..999, so duplicates are certain."""
    rng = random.Random(SEED)
    return [rng.randint(0, 999) for _ in range(2000)]
