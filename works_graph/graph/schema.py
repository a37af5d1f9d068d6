# works_graph/graph/schema.py

from enum import Enum


class NodeType(str, Enum):
    WORK = "work"


class EdgeType(str, Enum):
    # Work -> work citation edges, one per Reference
    WORK_CITES_WORK = "WORK_CITES_WORK"
