import io
import os
import subprocess
import sys

import pytest

from ipv4set.render import TrieRenderer
from ipv4set.trie import BinaryTrieSet


@pytest.fixture  # type: ignore[misc]
def renderer(addresses):
    trie = BinaryTrieSet()
    trie.update(addresses)
    return TrieRenderer(trie)


def test_make_graph(renderer):
    graph = renderer.make_graph()
    trie = renderer.trie
    assert len(graph.get_nodes()) == trie.node_count
    assert len(graph.get_edges()) == trie.node_count - 1


def test_leaf_labels(renderer):
    graph = renderer.make_graph()
    labels = {
        node.get_label().strip('"')
        for node in graph.get_nodes()
        if node.get_shape() == "box"
    }
    assert labels == {"192.168.0.1", "192.168.0.2", "10.0.0.1", "8.8.8.8"}


def test_edge_labels(renderer):
    graph = renderer.make_graph()
    labels = {edge.get_label().strip('"') for edge in graph.get_edges()}
    assert labels == {"0", "1"}


def test_empty_trie():
    graph = TrieRenderer(BinaryTrieSet()).make_graph()
    assert len(graph.get_nodes()) == 1
    assert not graph.get_edges()


def test_render_dot(renderer):
    output = io.BytesIO()
    renderer.render(output, format="dot", font="Helvetica")
    text = output.getvalue().decode("utf-8")
    assert text.lstrip().startswith("digraph")
    assert "8.8.8.8" in text


def test_main_default_args() -> None:
    try:
        subprocess.check_call(
            [f"{sys.executable}", "-m", "ipv4set.render", "-o", os.devnull]
        )
    except subprocess.CalledProcessError as e:  # pragma: no cover
        print(e.stderr, file=sys.stderr)
        raise


def test_main_custom_addresses() -> None:
    output = subprocess.check_output(
        [
            f"{sys.executable}",
            "-m",
            "ipv4set.render",
            "-a",
            "127.0.0.1",
            "-a",
            "127.0.0.2",
        ],
        universal_newlines=True,
    )
    assert "127.0.0.1" in output
    assert "127.0.0.2" in output
