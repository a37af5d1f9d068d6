# works_graph/graph/dot.py

"""
Graphviz DOT serialization of a works document.

Layout of the emitted text (one statement per line, no indentation):

    digraph works {
    node [
    margin = "0.5,0.15",
    ]
    "w1" [
    shape = box,
    URL = "https://example.org/w1",
    label = "Paper One\\nw1",
    ];
    "w1" -> "w2";
    }

Every interpolated value goes through ``quote`` so that no id, title or URL
can close its quoted string and inject extra statements.
"""

from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, BinaryIO, Iterator

if TYPE_CHECKING:
    from works_graph.models.works import Works

logger = logging.getLogger(__name__)

GRAPH_NAME = "works"
NODE_MARGIN = "0.5,0.15"

# DOT's own line-break escape, written as the two characters "\" "n".
LINE_BREAK = "\\n"


def escape(value: str) -> str:
    """
    Escape ``value`` for use inside a double-quoted DOT string.

    Backslashes and quotes are escaped; raw line breaks become DOT's
    ``\\n`` escape.
    """
    value = value.replace("\\", "\\\\").replace('"', '\\"')
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    return value.replace("\n", LINE_BREAK)


def quote(value: str) -> str:
    return f'"{escape(value)}"'


def iter_graph_lines(document: Works) -> Iterator[str]:
    """
    Yield the DOT statements for ``document``, one line at a time.

    Works come out in id order; the references of a work keep their
    document order.
    """
    yield f"digraph {GRAPH_NAME} {{"
    yield "node ["
    yield f"margin = {quote(NODE_MARGIN)},"
    yield "]"

    for work_id, work in document.sorted_works():
        node = quote(work_id)
        yield f"{node} ["
        yield "shape = box,"
        url = work.primary_url
        if url is not None:
            yield f"URL = {quote(url)},"
        yield f'label = "{escape(work.title)}{LINE_BREAK}{escape(work_id)}",'
        yield "];"
        for reference in work.references:
            yield f"{node} -> {quote(reference.work)};"

    yield "}"


def write_graph(document: Works, sink: BinaryIO) -> None:
    """
    Write ``document`` as UTF-8 DOT text to the binary stream ``sink``.

    The document is expected to be validated; a dangling reference is
    still written as an edge. Write errors propagate as-is and abort the
    emission. The caller owns ``sink`` and is responsible for closing it.
    """
    lines = 0
    for line in iter_graph_lines(document):
        sink.write(line.encode("utf-8") + b"\n")
        lines += 1
    sink.flush()

    logger.debug("Wrote %d DOT line(s) for %d work(s)", lines, len(document.works))


def render_graph(document: Works) -> str:
    """
    Return the DOT text ``write_graph`` would emit for ``document``.
    """
    buf = io.BytesIO()
    write_graph(document, buf)
    return buf.getvalue().decode("utf-8")
