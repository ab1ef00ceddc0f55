from __future__ import annotations

import pytest

from ipv4set.dense import DenseBitVectorSet
from ipv4set.trie import BinaryTrieSet


@pytest.fixture(scope="session")  # type: ignore[misc]
def addresses() -> list[str]:
    return [
        "192.168.0.1",
        "192.168.0.1",
        "192.168.0.2",
        "10.0.0.1",
        "8.8.8.8",
    ]


@pytest.fixture  # type: ignore[misc]
def dense() -> DenseBitVectorSet:
    return DenseBitVectorSet()


@pytest.fixture  # type: ignore[misc]
def trie() -> BinaryTrieSet:
    return BinaryTrieSet()


@pytest.fixture(  # type: ignore[misc]
    params=[
        pytest.param(DenseBitVectorSet, marks=pytest.mark.dense, id="dense"),
        pytest.param(BinaryTrieSet, id="trie"),
    ]
)
def membership(request: pytest.FixtureRequest) -> DenseBitVectorSet | BinaryTrieSet:
    return request.param()
