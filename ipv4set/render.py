"""Render the structure of a binary trie as a Graphviz graph."""

import argparse
import sys
from typing import BinaryIO, MutableSequence, Sequence, Tuple

import pydot

from ipv4set import codec
from ipv4set.trie import ROOT, BinaryTrieSet

DEFAULT_ADDRESSES = ("192.168.0.1", "192.168.0.2", "10.0.0.1", "8.8.8.8")


class TrieRenderer:
    """Render the nodes and edges of a :class:`~ipv4set.trie.BinaryTrieSet`."""

    __slots__ = ("trie",)

    def __init__(self, trie: BinaryTrieSet) -> None:
        """Construct a :class:`~ipv4set.render.TrieRenderer`."""
        self.trie = trie

    def make_graph(self, *, font: str = "Helvetica") -> pydot.Dot:
        """Return a graph with one vertex per trie node.

        Edges are labelled with the bit they consume and each leaf is
        labelled with the address its path spells out.

        """
        trie = self.trie
        graph = pydot.Dot(graph_type="digraph")
        graph.add_node(pydot.Node(str(ROOT), shape="circle", label="root"))

        # node index, depth and the key bits consumed on the way to the node
        stack: MutableSequence[Tuple[int, int, int]] = [(ROOT, 0, 0)]

        while stack:
            node, depth, prefix = stack.pop()
            children = trie.node(node)
            for bit, child in enumerate(children):
                if not child:
                    continue
                child_depth = depth + 1
                child_prefix = (prefix << 1) | bit
                if child_depth == codec.ADDRESS_BITS:
                    vertex = pydot.Node(
                        str(child),
                        shape="box",
                        label=codec.format_key(child_prefix),
                        fontname=font,
                    )
                else:
                    vertex = pydot.Node(str(child), shape="point")
                    stack.append((child, child_depth, child_prefix))
                graph.add_node(vertex)
                graph.add_edge(
                    pydot.Edge(str(node), str(child), label=str(bit), fontname=font)
                )
        return graph

    def render(self, output: BinaryIO, *, format: str = "dot", font: str) -> None:
        """Write the graph of the trie to `output`.

        Parameters
        ----------
        output
            A writable binary output stream.
        format
            ``"dot"`` writes the graph source; anything else is handed to
            the Graphviz executables, which must be installed.
        font
            The font to use for labels.

        """
        graph = self.make_graph(font=font)
        if format == "dot":
            output.write(graph.to_string().encode("utf-8"))
        else:
            output.write(graph.create(format=format))


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Render the binary trie built from a set of IPv4 addresses.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "-o",
        "--output-file",
        type=argparse.FileType("wb"),
        default=sys.stdout.buffer,
        help="Where to write the rendered graph. Defaults to stdout.",
    )
    p.add_argument(
        "-a",
        "--address",
        type=str,
        action="append",
        default=[],
        help="An address to insert into the trie.",
    )
    p.add_argument(
        "-t",
        "--format",
        type=str,
        default="dot",
        help="Output format, any format supported by Graphviz.",
    )
    p.add_argument(
        "-F",
        "--font",
        type=str,
        default="Helvetica",
        help="Label font.",
    )
    return p.parse_args()


def main(
    *, output_file: BinaryIO, address: Sequence[str], format: str, font: str
) -> None:
    """Render the trie holding `address`."""
    trie = BinaryTrieSet()
    trie.update(address or DEFAULT_ADDRESSES)
    TrieRenderer(trie).render(output_file, format=format, font=font)


if __name__ == "__main__":  # pragma: no cover
    args = parse_args()
    main(
        output_file=args.output_file,
        address=args.address,
        format=args.format,
        font=args.font,
    )
