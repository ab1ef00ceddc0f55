"""Deduplicate a stream of IPv4 addresses from the command line.

Reads one dotted-quad address per line, inserts every address into a
membership set and prints how many distinct addresses were seen.

"""

import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO, Union

import tabulate
import toolz

from ipv4set import codec
from ipv4set.api import Backing, membership_set

logger = logging.getLogger(__name__)


def address_argument(text: str) -> str:
    """Validate `text` as a dotted quad for :mod:`argparse`."""
    codec.parse(text)
    return text


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Count the distinct IPv4 addresses in the input.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "input_files",
        metavar="FILE",
        nargs="*",
        type=argparse.FileType("r"),
        default=[sys.stdin],
        help="Files of addresses, one per line. Defaults to stdin.",
    )
    p.add_argument(
        "-b",
        "--backing",
        type=str,
        choices=[backing.value for backing in Backing],
        default=Backing.DENSE.value,
        help="How to store the set of addresses.",
    )
    p.add_argument(
        "-s",
        "--search",
        type=address_argument,
        action="append",
        default=[],
        help="An address to look up after the input has been read.",
    )
    p.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Warn about malformed lines instead of failing.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debugging output.",
    )
    return p.parse_args(argv)


def main(
    *,
    input_files: Iterable[TextIO],
    backing: Union[Backing, str],
    search: Sequence[str],
    skip_invalid: bool,
    output: TextIO,
) -> int:
    """Insert every address in `input_files` and report on the result.

    Returns
    -------
    int
        The process exit status: 0 on success, 1 if a malformed address was
        read and `skip_invalid` is false.

    """
    backing = Backing(backing)
    addresses = membership_set(backing)
    lines = filter(None, map(str.strip, toolz.concat(input_files)))
    read = rejected = 0

    for read, line in enumerate(lines, start=1):
        try:
            addresses.insert(line)
        except codec.InvalidAddressFormat as e:
            if not skip_invalid:
                logger.error("address %d: %s", read, e)
                return 1
            logger.warning("skipping address %d: %s", read, e)
            rejected += 1

    logger.debug("read %d addresses into %r", read, addresses)
    summary = [
        ("backing", backing.value),
        ("addresses read", read),
        ("rejected", rejected),
        ("unique", addresses.unique_count()),
    ]
    print(tabulate.tabulate(summary, tablefmt="plain"), file=output)

    if search:
        results = [(address, addresses.search(address)) for address in search]
        print(file=output)
        print(tabulate.tabulate(results, headers=("address", "seen")), file=output)
    return 0


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return main(
            input_files=args.input_files,
            backing=args.backing,
            search=args.search,
            skip_invalid=args.skip_invalid,
            output=sys.stdout,
        )
    finally:
        for input_file in args.input_files:
            if input_file is not sys.stdin:
                input_file.close()


if __name__ == "__main__":  # pragma: no cover
    sys.exit(run())
