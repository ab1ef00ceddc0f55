"""Conversion between dotted-quad strings and 32-bit address keys.

An address key is the four octets of an IPv4 address concatenated most
significant first, so ``"192.168.0.1"`` maps to ``0xC0A80001``.

"""

from __future__ import annotations

from .typehints import AddressKey

SEPARATOR = "."
OCTET_COUNT = 4
OCTET_BITS = 8
OCTET_MAX = (1 << OCTET_BITS) - 1

ADDRESS_BITS = OCTET_COUNT * OCTET_BITS
ADDRESS_SPACE_SIZE = 1 << ADDRESS_BITS
MAX_ADDRESS_KEY = ADDRESS_SPACE_SIZE - 1


class InvalidAddressFormat(ValueError):
    """Raised when a string is not a dotted-quad IPv4 address.

    Attributes
    ----------
    address
        The full string that failed to parse.
    segment
        The offending dot-separated segment, or ``None`` when the string
        does not have exactly four segments.

    """

    def __init__(self, address: str, segment: str | None = None) -> None:
        self.address = address
        self.segment = segment
        if segment is None:
            count = len(address.split(SEPARATOR))
            message = (
                f"expected {OCTET_COUNT} {SEPARATOR!r}-separated segments, "
                f"got {count}: {address!r}"
            )
        else:
            message = (
                f"invalid octet {segment!r} in {address!r}, "
                f"octets must be integers in [0, {OCTET_MAX}]"
            )
        super().__init__(message)


def parse_octet(segment: str, *, address: str) -> int:
    """Parse a single decimal octet of `address`.

    At most three ASCII digits are accepted. Signs, whitespace, underscores
    and zero padding beyond three digits, which :class:`int` would otherwise
    tolerate, are rejected.

    Raises
    ------
    InvalidAddressFormat
        If `segment` is not a base-10 integer in ``[0, 255]``

    """
    if (
        not segment
        or not segment.isascii()
        or not segment.isdigit()
        or len(segment) > 3
    ):
        raise InvalidAddressFormat(address, segment)
    value = int(segment)
    if value > OCTET_MAX:
        raise InvalidAddressFormat(address, segment)
    return value


def parse(address: str) -> AddressKey:
    """Convert a dotted-quad `address` into its 32-bit key.

    Parameters
    ----------
    address
        A string such as ``"10.0.0.1"``.

    Raises
    ------
    InvalidAddressFormat
        If `address` does not split into exactly four octets in ``[0, 255]``

    Examples
    --------
    >>> parse("192.168.0.1") == 0xC0A80001
    True
    >>> parse("255.255.255.255") == MAX_ADDRESS_KEY
    True

    """
    segments = address.split(SEPARATOR)
    if len(segments) != OCTET_COUNT:
        raise InvalidAddressFormat(address)

    key = 0
    for segment in segments:
        key = (key << OCTET_BITS) | parse_octet(segment, address=address)
    return key


def check_key(key: int) -> AddressKey:
    """Return `key` if it is a valid address key.

    Raises
    ------
    ValueError
        If `key` is outside ``[0, 2**32)``

    """
    if not 0 <= key <= MAX_ADDRESS_KEY:
        raise ValueError(
            f"key not in range [0, {MAX_ADDRESS_KEY:#x}], key == {key}"
        )
    return key


def format_key(key: AddressKey) -> str:
    """Render `key` as a dotted-quad string.

    >>> format_key(0x08080808)
    '8.8.8.8'

    """
    check_key(key)
    shifts = range(ADDRESS_BITS - OCTET_BITS, -1, -OCTET_BITS)
    return SEPARATOR.join(str((key >> shift) & OCTET_MAX) for shift in shifts)
