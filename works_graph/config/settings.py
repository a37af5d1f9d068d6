# works_graph/config/settings.py

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="WORKS_GRAPH_"
    )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    DOT_COMMAND: str = Field(
        default="dot",
        description=(
            "Graphviz renderer command. Split like a shell command line; "
            "'-T <format>' is appended when rendering."
        ),
    )

    DEFAULT_OUTPUT_TYPE: str = Field(
        default="svg",
        description="Output format used when -t is not given. 'dot' skips the renderer.",
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Root logging level for the CLI (DEBUG, INFO, WARNING, ...).",
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Singleton-style accessor so Settings is only constructed once.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
