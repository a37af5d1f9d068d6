# works_graph/render.py

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import List, Optional

from works_graph.config.settings import get_settings
from works_graph.errors import RendererError

logger = logging.getLogger(__name__)

# Output type that bypasses the renderer entirely.
RAW_OUTPUT_TYPE = "dot"


def renderer_command(output_type: str, command: Optional[str] = None) -> List[str]:
    """
    Build the renderer argv: the configured command plus ``-T <output_type>``.
    """
    base = command or get_settings().DOT_COMMAND
    argv = shlex.split(base)
    if not argv:
        raise RendererError("Renderer command is empty")
    return argv + ["-T", output_type]


def render(source: bytes, output_type: str, command: Optional[str] = None) -> bytes:
    """
    Pipe DOT ``source`` through Graphviz and return the rendered bytes.

    Blocks until the renderer exits; there is no timeout. A renderer that
    cannot be started, or that exits with a non-zero status, raises
    RendererError (the latter carrying the exit status and stderr).
    """
    argv = renderer_command(output_type, command)
    logger.info("Running renderer: %s", shlex.join(argv))

    try:
        result = subprocess.run(
            argv,
            input=source,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        # Missing executable, permission denied, ...
        raise RendererError(f"Failed to run `{argv[0]}`: {e}") from e

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise RendererError(
            f"`{argv[0]}` command execution failed: exit={result.returncode}"
            + (f": {stderr}" if stderr else ""),
            exit_status=result.returncode,
            stderr=stderr,
        )

    logger.debug("Renderer produced %d byte(s)", len(result.stdout))
    return result.stdout
