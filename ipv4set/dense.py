"""A membership set backed by one bit per IPv4 address."""

import logging

from .bitvector import BitVector
from .codec import ADDRESS_SPACE_SIZE
from .protocols import MembershipSet
from .typehints import AddressKey

logger = logging.getLogger(__name__)


class DenseBitVectorSet(MembershipSet):
    """An IPv4 membership set stored as a bit vector over the whole space.

    Bit ``k`` of the vector is set iff the address whose key is ``k`` has
    been inserted. The vector covers all ``2**32`` addresses and is
    allocated in full on construction, 512 MiB regardless of how many
    addresses are ever inserted. In exchange every operation is a single
    word lookup, and saturating the address space costs nothing extra.

    Examples
    --------
    >>> addresses = DenseBitVectorSet()
    >>> addresses.insert("10.0.0.1")
    >>> addresses.insert("10.0.0.1")
    >>> addresses.search("10.0.0.1"), addresses.search("10.0.0.2")
    (True, False)
    >>> addresses.unique_count()
    1

    """

    __slots__ = ("bits",)

    def __init__(self) -> None:
        """Construct an empty :class:`~ipv4set.dense.DenseBitVectorSet`."""
        self.bits = BitVector(ADDRESS_SPACE_SIZE)
        logger.debug(
            "allocated %d words (%d bytes) for the dense address set",
            len(self.bits.words),
            self.bits.nbytes,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(unique_count={self.unique_count():d})"

    @property
    def nbytes(self) -> int:
        """Return the size of the backing bit vector in bytes."""
        return self.bits.nbytes

    def insert_key(self, address: AddressKey) -> None:
        """Insert the 32-bit key `address`.

        Raises
        ------
        ValueError
            If `address` is outside ``[0, 2**32)``

        """
        self.bits.add(address)

    def search_key(self, address: AddressKey) -> bool:
        """Return whether the 32-bit key `address` has been inserted.

        Raises
        ------
        ValueError
            If `address` is outside ``[0, 2**32)``

        """
        return address in self.bits

    def unique_count(self) -> int:
        return len(self.bits)
