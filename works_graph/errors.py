# works_graph/errors.py

from __future__ import annotations

from typing import Optional


class WorksGraphError(Exception):
    """
    Base class for every failure raised by works_graph.
    """
    pass


class DocumentLoadError(WorksGraphError):
    """
    The works document could not be read or deserialized.
    """
    pass


class WorksValidationError(WorksGraphError):
    """
    Referential integrity violation inside a works document.

    ``work_id`` is the work holding the dangling identifier.
    """

    def __init__(self, message: str, work_id: str) -> None:
        super().__init__(message)
        self.work_id = work_id


class UnknownAuthorError(WorksValidationError):
    def __init__(self, work_id: str, author_id: str) -> None:
        super().__init__(
            f"Unknown author ID: {author_id!r} (work_id={work_id!r})",
            work_id,
        )
        self.author_id = author_id


class UnknownWorkError(WorksValidationError):
    def __init__(self, work_id: str, referenced_work_id: str) -> None:
        super().__init__(
            f"Unknown work ID: {referenced_work_id!r} (work_id={work_id!r})",
            work_id,
        )
        self.referenced_work_id = referenced_work_id


class RendererError(WorksGraphError):
    """
    The external graph renderer could not be run or exited with an error.

    ``exit_status`` is None when the process never started.
    """

    def __init__(
        self,
        message: str,
        exit_status: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.exit_status = exit_status
        self.stderr = stderr
