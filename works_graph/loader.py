# works_graph/loader.py

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from works_graph.errors import DocumentLoadError
from works_graph.models.works import Works

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_works(text: str) -> Works:
    """
    Deserialize a TOML works document.

    The document has two top-level tables, ``works`` and ``authors``, each
    mapping an id to its record. TOML itself rejects a key declared twice,
    so two works (or two authors) can never silently share an id.

    Raises DocumentLoadError on syntax errors, missing required fields
    or wrongly typed values. No partial document is ever returned.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise DocumentLoadError(f"Invalid TOML: {e}") from e

    try:
        document = Works.model_validate(data)
    except ValidationError as e:
        raise DocumentLoadError(f"Invalid works document: {e}") from e

    logger.debug(
        "Parsed %d work(s) and %d author(s)",
        len(document.works),
        len(document.authors),
    )
    return document


def load_works(path: PathLike) -> Works:
    """
    Read and deserialize the works file at ``path``.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Failed to read works file {p}: {e}") from e

    logger.info("Loading works from %s", p)
    try:
        return parse_works(text)
    except DocumentLoadError as e:
        raise DocumentLoadError(f"{p}: {e}") from e
