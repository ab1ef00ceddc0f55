"""A membership set backed by a binary trie over the bits of each address.

Every inserted address carves a path of 32 edges from the root, taking the
``zero`` or ``one`` child at each level according to the address's bits,
most significant first. Addresses sharing a prefix share the nodes of that
prefix.

Nodes are kept in an arena: two parallel arrays indexed by node number hold
the index of each node's ``zero`` and ``one`` child. The root is node 0,
which can never be anyone's child, so a child index of 0 means the slot is
empty.

"""

from array import array
from typing import NamedTuple

from . import codec
from .protocols import MembershipSet
from .typehints import AddressKey

NODE_TYPECODE = "Q"

ROOT = 0
ABSENT = 0

#: Bit positions in the order they are consumed, most significant first
SHIFTS = range(codec.ADDRESS_BITS - 1, -1, -1)


class TrieNode(NamedTuple):
    """A read-only view of the two child slots of a trie node."""

    zero: int
    one: int


class BinaryTrieSet(MembershipSet):
    """An IPv4 membership set stored as a depth-32 binary trie.

    Memory grows with the number of distinct prefixes inserted rather than
    with the size of the address space. A sparse set of addresses is far
    cheaper than :class:`~ipv4set.dense.DenseBitVectorSet`, but saturating
    the space would take on the order of ``2 * 2**32`` nodes.

    Attributes
    ----------
    children
        A pair of arrays; ``children[bit][node]`` is the index of the child
        of `node` reached by `bit`, or ``0`` if it doesn't exist.

    """

    __slots__ = "children", "count"

    def __init__(self) -> None:
        """Construct a :class:`~ipv4set.trie.BinaryTrieSet` holding only a root."""
        self.children = (
            array(NODE_TYPECODE, [ABSENT]),
            array(NODE_TYPECODE, [ABSENT]),
        )
        self.count = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(unique_count={self.count:d}, "
            f"node_count={self.node_count:d})"
        )

    @property
    def node_count(self) -> int:
        """Return the number of nodes in the trie, including the root."""
        return len(self.children[0])

    @property
    def nbytes(self) -> int:
        """Return the size of the node arena in bytes."""
        return sum(len(slots) * slots.itemsize for slots in self.children)

    def node(self, index: int) -> TrieNode:
        """Return the child slots of the node at `index`."""
        zero, one = self.children
        return TrieNode(zero=zero[index], one=one[index])

    def insert_key(self, address: AddressKey) -> None:
        """Insert the 32-bit key `address`.

        Raises
        ------
        ValueError
            If `address` is outside ``[0, 2**32)``

        """
        codec.check_key(address)
        children = self.children
        zero, one = children
        node = ROOT
        created = False

        for shift in SHIFTS:
            slots = children[(address >> shift) & 1]
            child = slots[node]
            created = child == ABSENT
            if created:
                child = len(zero)
                zero.append(ABSENT)
                one.append(ABSENT)
                slots[node] = child
            node = child

        # only a freshly created leaf means the address is new
        if created:
            self.count += 1

    def search_key(self, address: AddressKey) -> bool:
        """Return whether the 32-bit key `address` has been inserted.

        Raises
        ------
        ValueError
            If `address` is outside ``[0, 2**32)``

        """
        codec.check_key(address)
        children = self.children
        node = ROOT
        for shift in SHIFTS:
            node = children[(address >> shift) & 1][node]
            if node == ABSENT:
                return False
        return True

    def unique_count(self) -> int:
        return self.count
