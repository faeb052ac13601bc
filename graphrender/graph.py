"""A minimal audio processor graph: nodes holding processors, joined by connections."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any


class Processor:
    """A named unit of audio processing.

    The base processor passes every block through unchanged; subclasses
    override :meth:`process_block` to do real work.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name

    def process_block(self, buffer: Any, midi_messages: Any) -> None:
        """Process one block of audio and MIDI in place."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


@dataclass(frozen=True)
class Node:
    """A processor placed in a graph under a unique id."""

    node_id: int
    processor: Processor


@dataclass(frozen=True, order=True)
class Connection:
    """An edge carrying audio from one node to another."""

    source: int
    destination: int


class ProcessorGraph:
    """Holds nodes and the connections between them."""

    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}
        self._connections: set[Connection] = set()
        self._ids = itertools.count(1)

    @property
    def nodes(self) -> list[Node]:
        """All nodes in the order they were added."""
        return list(self._nodes.values())

    @property
    def connections(self) -> list[Connection]:
        """All connections, ordered by source and then destination."""
        return sorted(self._connections)

    def add_node(self, processor: Processor) -> Node:
        """Place ``processor`` in the graph and return its new node."""
        node = Node(next(self._ids), processor)
        self._nodes[node.node_id] = node
        return node

    def add_connection(self, source: int, destination: int) -> bool:
        """Connect two nodes by id.

        Returns False if either node is unknown, the nodes are the same,
        or the connection already exists.
        """
        if source not in self._nodes or destination not in self._nodes:
            return False
        if source == destination:
            return False
        connection = Connection(source, destination)
        if connection in self._connections:
            return False
        self._connections.add(connection)
        return True

    def get_node(self, node_id: int) -> Node:
        """Return the node with ``node_id``; raise KeyError if there is none."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise KeyError(f"no node with id {node_id}") from None