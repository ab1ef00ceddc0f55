"""Top-level package for ipv4set."""

import importlib.metadata as importlib_metadata

from ipv4set.codec import InvalidAddressFormat, format_key, parse  # noqa: F401
from ipv4set.dense import DenseBitVectorSet  # noqa: F401
from ipv4set.protocols import MembershipSet  # noqa: F401
from ipv4set.trie import BinaryTrieSet  # noqa: F401
from ipv4set.api import *  # noqa: F401,F403

__version__ = importlib_metadata.version(__name__)
