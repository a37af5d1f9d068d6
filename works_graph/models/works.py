# works_graph/models/works.py

from __future__ import annotations

import logging
from typing import BinaryIO, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict

from works_graph.errors import (
    UnknownAuthorError,
    UnknownWorkError,
    WorksValidationError,
)

from .work import Author, AuthorId, Work, WorkId

logger = logging.getLogger(__name__)


class Works(BaseModel):
    """
    Root of a works document: every work and every author, keyed by id.

    Built once from the input file, validated once, then only read.
    """

    model_config = ConfigDict(frozen=True)

    works: Dict[WorkId, Work]
    authors: Dict[AuthorId, Author]

    def sorted_works(self) -> List[Tuple[WorkId, Work]]:
        """
        Works ordered by id, so that every walk over the document is
        reproducible regardless of the input's key order.
        """
        return sorted(self.works.items(), key=lambda item: item[0])

    def validate(self) -> None:
        validate(self)

    def write_graph(self, sink: BinaryIO) -> None:
        from works_graph.graph.dot import write_graph

        write_graph(self, sink)


def find_problems(document: Works) -> List[WorksValidationError]:
    """
    Collect every referential integrity violation in ``document``.

    Works are scanned in id order. For each work, its author ids are
    checked before its references; both lists are scanned in order.
    An empty list means the document is valid.
    """
    problems: List[WorksValidationError] = []

    for work_id, work in document.sorted_works():
        for author_id in work.authors:
            if author_id not in document.authors:
                problems.append(UnknownAuthorError(work_id, author_id))
        for reference in work.references:
            if reference.work not in document.works:
                problems.append(UnknownWorkError(work_id, reference.work))

    return problems


def validate(document: Works) -> None:
    """
    Check that every author id and every referenced work id resolves.

    Raises the first ``UnknownAuthorError`` / ``UnknownWorkError`` found.
    Cycles and self references are fine.
    """
    problems = find_problems(document)
    if problems:
        logger.debug("Document has %d integrity problem(s)", len(problems))
        raise problems[0]

    logger.debug(
        "Validated %d work(s) and %d author(s)",
        len(document.works),
        len(document.authors),
    )
