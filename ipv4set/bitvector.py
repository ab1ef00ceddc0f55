"""A fixed-size vector of bits packed into 32-bit words."""

from array import array
from typing import Any, Tuple

WORD_TYPECODE = "I"
WORD_WIDTH = 32

assert (
    array(WORD_TYPECODE).itemsize * 8 == WORD_WIDTH
), f"array typecode {WORD_TYPECODE!r} is not {WORD_WIDTH} bits wide"


def word_count(size: int, *, width: int = WORD_WIDTH) -> int:
    """Return the number of `width`-bit words needed to hold `size` bits."""
    return -(-size // width)


class BitVector:
    """A fixed-size vector of bits that counts how many of them are set.

    Storage for every bit is allocated up front and the vector never grows.
    Bits can only be set, never cleared.

    """

    __slots__ = "size", "words", "count"

    def __init__(self, size: int) -> None:
        """Construct a vector of `size` bits, all zero.

        Raises
        ------
        ValueError
            If `size` is negative

        """
        if size < 0:
            raise ValueError(f"size not greater than or equal to 0, size == {size}")
        self.size = size
        self.words = array(WORD_TYPECODE, [0]) * word_count(size)
        self.count = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size:d}, count={self.count:d})"

    def __len__(self) -> int:
        """Return the number of set bits."""
        return self.count

    def __contains__(self, bit: Any) -> bool:
        """Check whether `bit` is set."""
        word_index, mask = self.locate(bit)
        return (self.words[word_index] & mask) != 0

    @property
    def nbytes(self) -> int:
        """Return the size of the backing store in bytes."""
        words = self.words
        return len(words) * words.itemsize

    def locate(self, bit: int) -> Tuple[int, int]:
        """Return the index of the word holding `bit` and the mask selecting it.

        Raises
        ------
        ValueError
            If `bit` is outside ``[0, size)``

        """
        if not 0 <= bit < self.size:
            raise ValueError(f"bit not in range [0, {self.size:d}), bit == {bit}")
        word_index, offset = divmod(bit, WORD_WIDTH)
        return word_index, 1 << offset

    def add(self, bit: int) -> bool:
        """Set `bit`, returning whether it was previously unset.

        Raises
        ------
        ValueError
            If `bit` is outside ``[0, size)``

        """
        word_index, mask = self.locate(bit)
        words = self.words
        word = words[word_index]
        if word & mask:
            return False
        words[word_index] = word | mask
        self.count += 1
        return True

    def popcount(self) -> int:
        """Count the set bits by scanning every word.

        This is linear in the size of the vector; :func:`len` is constant.

        """
        return sum(bin(word).count("1") for word in self.words if word)
