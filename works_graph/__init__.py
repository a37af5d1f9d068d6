"""
Generate citation graphs of related works from a TOML description.
"""

from works_graph.models import Author, Media, Reference, Work, Works

__all__ = ["Author", "Media", "Reference", "Work", "Works"]
