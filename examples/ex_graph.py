import sys
from pathlib import Path

from works_graph.graph.builder import build_citation_graph, citation_counts
from works_graph.graph.dot import write_graph
from works_graph.loader import load_works

# 1. Load + validate the works file
works = load_works(Path(__file__).with_name("works.toml"))
works.validate()

# 2. Who cites whom
G = build_citation_graph(works)
for row in citation_counts(G):
    print(f"{row['work_id']}: {row['references']} refs, cited {row['cited_by']}x", file=sys.stderr)

# 3. Raw DOT on stdout (pipe into `dot -Tsvg` to render)
write_graph(works, sys.stdout.buffer)
