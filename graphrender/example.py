"""A demonstration graph of tracks and effects feeding a master mixer."""

from __future__ import annotations

import argparse
import random
import time
from typing import Any, Callable

from .graph import Node, Processor, ProcessorGraph
from .render import MultiThreadGraphRender


class ExampleProcessor(Processor):
    """Announces each block and simulates work by sleeping a random time."""

    def __init__(
        self,
        name: str,
        min_delay_ms: int = 1000,
        max_delay_ms: int = 5000,
        rng: random.Random | None = None,
    ) -> None:
        if min_delay_ms < 0 or min_delay_ms > max_delay_ms:
            raise ValueError("delay range must satisfy 0 <= min_delay_ms <= max_delay_ms")
        super().__init__(name)
        self.min_delay_ms = min_delay_ms
        self.max_delay_ms = max_delay_ms
        self._rng = rng if rng is not None else random.Random()

    def process_block(self, buffer: Any, midi_messages: Any) -> None:
        print(f"Processing {self.name}", flush=True)
        delay_ms = self._rng.randint(self.min_delay_ms, self.max_delay_ms)
        time.sleep(delay_ms / 1000)
        print(f"Processed {self.name}", flush=True)


def make_connection(graph: ProcessorGraph, first: Node, second: Node) -> bool:
    """Connect ``first`` to ``second``; return whether the graph accepted it."""
    return graph.add_connection(first.node_id, second.node_id)


_TRACKS = (
    ("Track 1", "EQ 1", "Limiter 1"),
    ("Track 2", "EQ 2", "Limiter 2", "Reverb 2"),
    ("Track 3", "EQ 3"),
)


def build_example_graph(
    processor_factory: Callable[[str], Processor] = ExampleProcessor,
) -> tuple[ProcessorGraph, Node]:
    """Build three effect chains feeding a master mixer; return the graph and mixer node."""
    graph = ProcessorGraph()
    root = graph.add_node(processor_factory("Master Mixer"))
    for chain in _TRACKS:
        nodes = [graph.add_node(processor_factory(name)) for name in chain]
        for first, second in zip(nodes, nodes[1:] + [root]):
            make_connection(graph, first, second)
    return graph, root


def main(argv: list[str] | None = None) -> int:
    """Build the example graph, show its render paths and render one block."""
    parser = argparse.ArgumentParser(description="Render the example processor graph.")
    parser.add_argument("--threads", type=int, default=4, help="worker threads")
    args = parser.parse_args(argv)
    graph, root = build_example_graph()
    with MultiThreadGraphRender(graph, root.node_id, num_threads=args.threads) as render:
        render.debug()
        render.process([], [])
    return 0