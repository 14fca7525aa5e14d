"""ATX heading extraction from Markdown text."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_LEVEL = 6


@dataclass(frozen=True)
class Heading:
    """An ATX heading: its level (1-6) and text."""

    level: int
    text: str


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def extract(content: str) -> list[Heading]:
    """Return the ATX headings of ``content``, ignoring fenced code blocks."""
    headings: list[Heading] = []
    in_fence = False
    for line in _lines(content):
        if _is_fence(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        heading = parse_atx(line)
        if heading is not None:
            headings.append(heading)
    return headings


def _is_fence(line: str) -> bool:
    stripped = line.lstrip()
    return stripped.startswith("```") or stripped.startswith("~~~")


def parse_atx(line: str) -> Heading | None:
    """Parse one line as an ATX heading, or return ``None``."""
    stripped = line.lstrip()
    level = len(stripped) - len(stripped.lstrip("#"))
    if level == 0 or level > _MAX_LEVEL:
        return None
    rest = stripped[level:]
    if rest and not rest.startswith(" "):
        return None
    text = rest.strip().rstrip("#").strip()
    return Heading(level=level, text=text)