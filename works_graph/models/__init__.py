# works_graph/models/__init__.py

from .work import Author, AuthorId, Media, Reference, Work, WorkId
from .works import Works, find_problems, validate

__all__ = [
    "Author",
    "AuthorId",
    "Media",
    "Reference",
    "Work",
    "WorkId",
    "Works",
    "find_problems",
    "validate",
]
