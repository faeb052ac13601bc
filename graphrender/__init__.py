"""Multi-threaded rendering of audio processor graphs along independent paths."""

__version__ = "0.0.1"
__all__ = ["example", "graph", "render", "waitgroup"]