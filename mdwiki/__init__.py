"""Read Markdown notes into frontmatter, headings and note records."""

__version__ = "0.1.3"
__all__ = ["frontmatter", "headings", "ingest"]