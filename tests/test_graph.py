import pytest

from graphrender.graph import Connection, Node, Processor, ProcessorGraph


def test_add_node_assigns_unique_ids():
    graph = ProcessorGraph()
    first = graph.add_node(Processor("a"))
    second = graph.add_node(Processor("b"))
    assert first.node_id != second.node_id
    assert graph.nodes == [first, second]


def test_get_node_returns_added_processor():
    graph = ProcessorGraph()
    processor = Processor("mixer")
    node = graph.add_node(processor)
    found = graph.get_node(node.node_id)
    assert found == node
    assert found.processor is processor
    assert found.processor.name == "mixer"


def test_get_unknown_node_raises():
    graph = ProcessorGraph()
    with pytest.raises(KeyError):
        graph.get_node(42)


def test_add_connection_between_known_nodes():
    graph = ProcessorGraph()
    a = graph.add_node(Processor("a"))
    b = graph.add_node(Processor("b"))
    assert graph.add_connection(a.node_id, b.node_id) is True
    assert graph.connections == [Connection(a.node_id, b.node_id)]


def test_add_connection_rejects_unknown_self_and_duplicate():
    graph = ProcessorGraph()
    a = graph.add_node(Processor("a"))
    b = graph.add_node(Processor("b"))
    assert graph.add_connection(a.node_id, 999) is False
    assert graph.add_connection(a.node_id, a.node_id) is False
    assert graph.add_connection(a.node_id, b.node_id) is True
    assert graph.add_connection(a.node_id, b.node_id) is False
    assert len(graph.connections) == 1


def test_connections_are_sorted():
    graph = ProcessorGraph()
    a, b, c = (graph.add_node(Processor(name)) for name in "abc")
    graph.add_connection(c.node_id, a.node_id)
    graph.add_connection(a.node_id, c.node_id)
    graph.add_connection(a.node_id, b.node_id)
    connections = graph.connections
    assert connections == sorted(connections)
    assert connections[0] == Connection(a.node_id, b.node_id)


def test_base_processor_leaves_block_unchanged():
    buffer = [0.5, -0.25]
    midi = ["note"]
    Processor("plain").process_block(buffer, midi)
    assert buffer == [0.5, -0.25]
    assert midi == ["note"]


def test_node_is_immutable():
    processor = Processor("x")
    node = Node(1, processor)
    with pytest.raises(AttributeError):
        node.node_id = 2
    assert node.node_id == 1
    assert node.processor is processor
    assert node.processor.name == "x"