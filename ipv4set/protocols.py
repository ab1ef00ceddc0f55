"""The protocol shared by every IPv4 membership set."""

import abc
from typing import Any

from typing_extensions import Protocol, runtime_checkable

from . import codec
from .typehints import Addresses, AddressKey


@runtime_checkable
class MembershipSet(Protocol):
    """A set of IPv4 addresses supporting insertion and membership tests.

    Implementations provide the raw-key operations; the text entry points
    parse dotted quads with :func:`ipv4set.codec.parse` and delegate to them.

    """

    @abc.abstractmethod
    def insert_key(self, address: AddressKey) -> None:
        """Insert the 32-bit key `address`."""

    @abc.abstractmethod
    def search_key(self, address: AddressKey) -> bool:
        """Return whether the 32-bit key `address` has been inserted."""

    @abc.abstractmethod
    def unique_count(self) -> int:
        """Return the number of distinct addresses inserted so far."""

    def insert(self, address: str) -> None:
        """Insert the dotted-quad `address`.

        Raises
        ------
        InvalidAddressFormat
            If `address` is malformed, in which case the set is unchanged

        """
        self.insert_key(codec.parse(address))

    def search(self, address: str) -> bool:
        """Return whether the dotted-quad `address` has been inserted.

        Raises
        ------
        InvalidAddressFormat
            If `address` is malformed

        """
        return self.search_key(codec.parse(address))

    def update(self, addresses: Addresses) -> None:
        """Insert every dotted quad in `addresses`.

        Every address is parsed before any is inserted, so a malformed
        address leaves the set unchanged.

        """
        for key in list(map(codec.parse, addresses)):
            self.insert_key(key)

    def __contains__(self, address: Any) -> bool:
        """Check whether `address`, a dotted quad or a 32-bit key, is in the set.

        Unlike :meth:`search`, malformed addresses are reported as absent.

        """
        if isinstance(address, str):
            try:
                return self.search(address)
            except codec.InvalidAddressFormat:
                return False
        if isinstance(address, int) and 0 <= address <= codec.MAX_ADDRESS_KEY:
            return self.search_key(address)
        return False

    def __len__(self) -> int:
        return self.unique_count()
