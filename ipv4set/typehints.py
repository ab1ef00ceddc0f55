"""Various type definitions used throughout ipv4set."""

from typing import Iterable

#: The canonical 32-bit big-endian integer form of an IPv4 address.
AddressKey = int

Addresses = Iterable[str]
