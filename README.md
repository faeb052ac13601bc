# graphrender

`graphrender` renders a graph of audio processors on a thread pool.

You build a `ProcessorGraph` from `Processor` objects and the connections
between them. All the chains in the graph feed one root node, such as a master
mixer. `MultiThreadGraphRender` splits the graph into render paths, one for
each connection into the root. It then processes those paths at the same time
on worker threads. Within a path, nodes run one after another, starting at the
farthest source and ending at the node that feeds the root. `process` returns
once every node in every path has finished.

## Installation

```
pip install .
```

Requires Python 3.10 or later. There are no third-party dependencies.

## Usage

```python
from graphrender.graph import Processor, ProcessorGraph
from graphrender.render import MultiThreadGraphRender


class Gain(Processor):
    def process_block(self, buffer, midi_messages):
        buffer[:] = [sample * 0.5 for sample in buffer]


graph = ProcessorGraph()
root = graph.add_node(Gain("Master Mixer"))
track = graph.add_node(Gain("Track 1"))
eq = graph.add_node(Gain("EQ 1"))
graph.add_connection(track.node_id, eq.node_id)
graph.add_connection(eq.node_id, root.node_id)

with MultiThreadGraphRender(graph, root.node_id, num_threads=4) as render:
    render.debug()              # prints each render path, e.g. " EQ 1 -> Track 1 ->"
    buffer = [1.0, 1.0]
    render.process(buffer, [])  # blocks until every path is done
```

### The graph (`graphrender.graph`)

- `Processor(name)` is a named processing unit. Its default `process_block(buffer, midi_messages)` does nothing. Subclasses override it.
- `ProcessorGraph.add_node(processor)` gives the processor a new integer id and returns a `Node`, which has `node_id` and `processor`.
- `ProcessorGraph.add_connection(source, destination)` joins two nodes by id. It returns `False` if either id is unknown, if the two ids are the same, or if the connection already exists.
- `ProcessorGraph.get_node(node_id)` returns a node. It raises `KeyError` for an unknown id.
- `nodes` lists the nodes in the order they were added. `connections` lists `Connection(source, destination)` values sorted by source and then by destination.

### Rendering (`graphrender.render`)

- `MultiThreadGraphRender(graph, root_node_id, num_threads=4)` computes the render paths as soon as it is created. It raises `ValueError` if `num_threads` is less than 1, or if a cycle is found while the paths are collected.
- `rebuild()` recomputes `paths` from the graph's current connections and returns the new list of `RenderPath` objects. Each path's `nodes` run from the node next to the root back to the start of its chain.
- `process(buffer, midi_messages)` renders every path and waits for them all to finish. If a processor raises an exception, the rest of that path is skipped, and `process` raises the first error once the other paths are done. Calling `process` after `close()` raises `RuntimeError`.
- `format_path(path)` returns a path as a string of processor names. `debug()` prints every path.
- `close()` shuts down the thread pool. The renderer is also a context manager and calls `close()` when the block exits.

### WaitGroup (`graphrender.waitgroup`)

`process` uses `WaitGroup` to wait for its jobs, and you can use it on its own:

- `add(n)` adds `n` pending tasks. It raises `ValueError` if the count would go below zero.
- `done()` marks one task as finished.
- `wait(timeout=None)` blocks until the count reaches zero. It returns `False` if the timeout passes first.
- `count` is the number of tasks still pending.

## Example

The bundled example builds three tracks with effect chains, all feeding a
master mixer. Each `ExampleProcessor` prints a line when it starts a block and
another when it finishes. Between the two it sleeps for a random 1 to 5
seconds, so the output shows the paths running in parallel.

```
graphrender-example --threads 4
```

To build the same graph from your own code, call
`graphrender.example.build_example_graph(processor_factory)`. It returns the
graph and its root node.

## What this package does not do

The package only schedules and runs `process_block` calls. It does not do the
audio work itself:

- It does not open audio devices.
- It does not read or write audio files.
- It does not define a buffer or MIDI format.
- It does not mix the outputs of the paths into the root node. `process` never calls the root node's own processor.

The buffer and MIDI objects you pass to `process` are handed to every
processor unchanged, and all paths share them.

## Tests

```
pip install .[test]
pytest
```