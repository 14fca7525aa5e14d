"""Collecting notes to include from a list of scanned files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Iterable, Protocol

from .frontmatter import Frontmatter, split
from .headings import Heading, extract

log = logging.getLogger(__name__)


class _Scanned(Protocol):
    relative_path: PurePath


@dataclass
class NoteData:
    """A Markdown note with its parsed frontmatter and outline."""

    source_file: PurePath
    frontmatter: Frontmatter
    headings: list[Heading] = field(default_factory=list)
    first_paragraph: str | None = None
    body: str = ""


def ingest_notes(scanned: Iterable[_Scanned], target_root: str | Path) -> list[NoteData]:
    """Read every ``.md`` file from ``scanned`` that is not marked ``wiki: false``.

    Files that cannot be read as UTF-8 text are logged and skipped. The result
    is sorted by relative path.
    """
    root = Path(target_root)
    notes: list[NoteData] = []
    for item in scanned:
        relative = PurePath(item.relative_path)
        if relative.suffix != ".md":
            continue
        try:
            content = (root / relative).read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as err:
            log.warning("failed to read markdown: path=%s error=%s", relative.as_posix(), err)
            continue
        fm, body = split(content)
        fm = fm or Frontmatter()
        if not should_ingest(fm):
            continue
        notes.append(
            NoteData(
                source_file=relative,
                frontmatter=fm,
                headings=extract(body),
                first_paragraph=first_paragraph(body),
                body=body,
            )
        )
    notes.sort(key=lambda note: note.source_file.parts)
    return notes


def should_ingest(fm: Frontmatter) -> bool:
    """Only an explicit ``wiki: false`` excludes a note."""
    return fm.wiki is not False


def first_paragraph(body: str) -> str | None:
    """Return the first prose paragraph, skipping headings, blank lines and fences."""
    in_fence = False
    paragraph: list[str] = []
    lines = body.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        text = line.strip()
        if text.startswith("```") or text.startswith("~~~"):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        if not text:
            if paragraph:
                break
            continue
        if text.startswith("#"):
            continue
        paragraph.append(text)
    return " ".join(paragraph) if paragraph else None