# works_graph/graph/__init__.py

from .dot import render_graph, write_graph

__all__ = ["render_graph", "write_graph"]
