# works_graph/graph/builder.py

from __future__ import annotations

from typing import Any, Dict, List

import networkx as nx

from works_graph.graph.schema import EdgeType, NodeType
from works_graph.models.works import Works


def build_citation_graph(document: Works) -> nx.MultiDiGraph:
    """
    Build a MultiDiGraph view of a works document.

    Nodes are keyed by WorkId and carry the work's display fields; there
    is one WORK_CITES_WORK edge per Reference, keeping its display
    overrides as edge attributes. A MultiDiGraph is used because a work
    may list the same target more than once.

    References to undeclared works still produce an edge; networkx then
    creates a bare node for the target, flagged with ``declared=False``.
    """
    G = nx.MultiDiGraph()

    for work_id, work in document.sorted_works():
        G.add_node(
            work_id,
            type=NodeType.WORK.value,
            declared=True,
            title=work.title,
            authors_string=work.authors_string,
            authors=[
                document.authors[a].name if a in document.authors else a
                for a in work.authors
            ],
            year=work.year,
            month=work.month,
            url=work.primary_url,
        )

    for work_id, work in document.sorted_works():
        for reference in work.references:
            if reference.work not in G:
                G.add_node(
                    reference.work,
                    type=NodeType.WORK.value,
                    declared=False,
                )
            G.add_edge(
                work_id,
                reference.work,
                type=EdgeType.WORK_CITES_WORK.value,
                media_title=reference.media_title,
                authors_string=reference.authors_string,
            )

    return G


def citation_counts(G: nx.MultiDiGraph) -> List[Dict[str, Any]]:
    """
    Per declared work: number of references made and times cited.

    Rows come out in node id order.
    """
    rows: List[Dict[str, Any]] = []
    for node in sorted(G.nodes):
        attrs = G.nodes[node]
        if not attrs.get("declared"):
            continue
        rows.append(
            {
                "work_id": node,
                "title": attrs.get("title", ""),
                "year": attrs.get("year"),
                "authors": attrs.get("authors", []),
                "references": G.out_degree(node),
                "cited_by": G.in_degree(node),
            }
        )
    return rows
