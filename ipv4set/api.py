"""ipv4set user-facing API.

.. note::

   The two backings answer every query identically. Pick
   :attr:`Backing.DENSE` when a large fraction of the address space may be
   inserted, and :attr:`Backing.TRIE` when only a sparse set of addresses
   is expected and 512 MiB up front is too much.

"""

from __future__ import annotations

import enum

from public import public

from .dense import DenseBitVectorSet
from .protocols import MembershipSet
from .trie import BinaryTrieSet
from .typehints import Addresses


@public  # type: ignore[misc]
class Backing(enum.Enum):
    """An enumeration of the available storage strategies."""

    DENSE = "dense"
    TRIE = "trie"


_BACKING_TYPES: dict[Backing, type[MembershipSet]] = {
    Backing.DENSE: DenseBitVectorSet,
    Backing.TRIE: BinaryTrieSet,
}


@public  # type: ignore[misc]
def membership_set(
    backing: Backing | str = Backing.DENSE, addresses: Addresses = ()
) -> MembershipSet:
    """Construct a membership set holding `addresses`.

    Parameters
    ----------
    backing
        A :class:`Backing` member or its value, e.g. ``"trie"``.
    addresses
        Dotted-quad strings to insert.

    Raises
    ------
    ValueError
        If `backing` does not name a backing
    InvalidAddressFormat
        If any of `addresses` is malformed

    Examples
    --------
    >>> from ipv4set import membership_set
    >>> addresses = membership_set("trie", ["10.0.0.1", "10.0.0.1", "8.8.8.8"])
    >>> len(addresses)
    2
    >>> "8.8.8.8" in addresses
    True

    """
    result = _BACKING_TYPES[Backing(backing)]()
    result.update(addresses)
    return result


@public  # type: ignore[misc]
def dense_set(addresses: Addresses = ()) -> DenseBitVectorSet:
    """Construct a :class:`~ipv4set.dense.DenseBitVectorSet` holding `addresses`."""
    result = DenseBitVectorSet()
    result.update(addresses)
    return result


@public  # type: ignore[misc]
def trie_set(addresses: Addresses = ()) -> BinaryTrieSet:
    """Construct a :class:`~ipv4set.trie.BinaryTrieSet` holding `addresses`."""
    result = BinaryTrieSet()
    result.update(addresses)
    return result
