# works_graph/models/work.py

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Externally assigned identifiers. They are used verbatim as mapping keys
# and as node ids in the emitted graph.
WorkId = str
AuthorId = str


class Media(BaseModel):
    """
    Publication venue of a work (journal, proceedings, report series...).

    Purely descriptive; never checked against other entities.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    organization: Optional[str] = None
    number: Optional[str] = None


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class Reference(BaseModel):
    """
    A directed citation from the owning work to another work.

    Fields
    ------
    work:
        Id of the cited work. Must be a key of ``Works.works``.
    media_title:
        Optional override of the venue title, for when the citing work
        presents the cited one differently than its canonical record.
    authors_string:
        Optional override of the cited work's author line.
    """

    model_config = ConfigDict(frozen=True)

    work: WorkId
    media_title: Optional[str] = None
    authors_string: Optional[str] = None


class Work(BaseModel):
    """
    One cited or citing document.

    Fields
    ------
    title:
        Human readable title, used in the graph label.
    authors_string:
        Free-text rendering of the author list, for display.
    media, pages, year, month:
        Optional bibliographic metadata.
    authors:
        Ordered author ids. Each must be a key of ``Works.authors``.
    references:
        Other works this one cites (defaults to none).
    urls:
        Links to the work; the first one becomes the node's link.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    authors_string: str
    media: Optional[Media] = None
    pages: Optional[str] = None
    year: Optional[int] = None
    month: Optional[int] = None
    authors: List[AuthorId]
    references: List[Reference] = Field(default_factory=list)
    urls: List[str] = Field(default_factory=list)

    @property
    def primary_url(self) -> Optional[str]:
        return self.urls[0] if self.urls else None
