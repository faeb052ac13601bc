"""Renders the chains feeding a graph's root node in parallel on a thread pool."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

from .graph import ProcessorGraph
from .waitgroup import WaitGroup


@dataclass
class RenderPath:
    """A chain of node ids, from the node nearest the root to the first in the chain."""

    nodes: list[int] = field(default_factory=list)

    @property
    def start(self) -> int:
        """The node at which rendering of this chain begins."""
        return self.nodes[-1]


class RenderJob:
    """Processes one node of a path and then schedules the node after it."""

    def __init__(
        self,
        pool: ThreadPoolExecutor,
        wait_group: WaitGroup,
        graph: ProcessorGraph,
        path: RenderPath,
        node_id: int,
        buffer: Any,
        midi_messages: Any,
        errors: list[BaseException] | None = None,
    ) -> None:
        self.pool = pool
        self.wait_group = wait_group
        self.graph = graph
        self.path = path
        self.node_id = node_id
        self.buffer = buffer
        self.midi_messages = midi_messages
        self.errors = errors if errors is not None else []

    def run(self) -> None:
        """Process this job's node, then queue the next node of the path."""
        try:
            node = self.graph.get_node(self.node_id)
            node.processor.process_block(self.buffer, self.midi_messages)
        except BaseException as exc:
            self._abandon(exc)
            return
        self.wait_group.done()
        for index, node_id in enumerate(self.path.nodes):
            if node_id == self.node_id and index != 0:
                self._follow_with(self.path.nodes[index - 1])

    def _follow_with(self, node_id: int) -> None:
        job = RenderJob(
            self.pool,
            self.wait_group,
            self.graph,
            self.path,
            node_id,
            self.buffer,
            self.midi_messages,
            self.errors,
        )
        self.pool.submit(job.run)

    def _abandon(self, exc: BaseException) -> None:
        # The rest of the path will never run, so release its share of the count.
        self.errors.append(exc)
        remaining = self.path.nodes.index(self.node_id) + 1
        for _ in range(remaining):
            self.wait_group.done()


class MultiThreadGraphRender:
    """Splits a graph into the chains feeding its root and renders them concurrently."""

    def __init__(
        self, graph: ProcessorGraph, root_node_id: int, num_threads: int = 4
    ) -> None:
        if num_threads < 1:
            raise ValueError("num_threads must be at least 1")
        self.graph = graph
        self.root_node_id = root_node_id
        self.paths: list[RenderPath] = []
        self._pool = ThreadPoolExecutor(
            max_workers=num_threads, thread_name_prefix="render"
        )
        self._closed = False
        self.rebuild()

    def rebuild(self) -> list[RenderPath]:
        """Recompute the render paths from the graph's current connections."""
        connections = self.graph.connections
        sources = {connection.source for connection in connections}
        root = None
        for connection in connections:
            if connection.destination not in sources:
                root = connection.destination

        paths = []
        if root is not None:
            for connection in connections:
                if connection.destination == root:
                    nodes = [connection.source]
                    self._collect(connection.source, connections, nodes, (connection.source,))
                    paths.append(RenderPath(nodes))
        self.paths = paths
        return paths

    def _collect(self, node_id, connections, container, trail) -> None:
        for connection in connections:
            if connection.destination == node_id:
                if connection.source in trail:
                    raise ValueError(
                        f"graph has a cycle through node {connection.source}"
                    )
                container.append(connection.source)
                self._collect(
                    connection.source, connections, container, trail + (connection.source,)
                )

    def process(self, buffer: Any, midi_messages: Any) -> None:
        """Render every path, each on its own job, and wait for all to finish.

        The first error raised by a processor is raised again here.
        """
        if self._closed:
            raise RuntimeError("renderer is closed")
        wait_group = WaitGroup()
        errors: list[BaseException] = []
        wait_group.add(sum(len(path.nodes) for path in self.paths))
        for path in self.paths:
            job = RenderJob(
                self._pool,
                wait_group,
                self.graph,
                path,
                path.start,
                buffer,
                midi_messages,
                errors,
            )
            self._pool.submit(job.run)
        wait_group.wait()
        if errors:
            raise errors[0]

    def format_path(self, path: RenderPath) -> str:
        """Describe a path as the names of its processors."""
        return "".join(
            f" {self.graph.get_node(node_id).processor.name} ->" for node_id in path.nodes
        )

    def debug(self) -> None:
        """Print every render path."""
        for path in self.paths:
            print(self.format_path(path) + "\n")

    def close(self) -> None:
        """Shut down the thread pool."""
        if not self._closed:
            self._closed = True
            self._pool.shutdown(wait=True)

    def __enter__(self) -> MultiThreadGraphRender:
        return self

    def __exit__(self, *args) -> None:
        self.close()