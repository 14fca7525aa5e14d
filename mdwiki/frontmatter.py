"""Leading YAML-style frontmatter: detection, separation and a small field parser."""

from __future__ import annotations

from dataclasses import dataclass, field

_OPEN = "---\n"
_DELIM = "---"


@dataclass
class Frontmatter:
    """Fields recognised in a note's frontmatter."""

    wiki: bool | None = None
    fragment: bool | None = None
    title: str | None = None
    summary: str | None = None
    tags: list[str] = field(default_factory=list)
    related: list[str] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)


def _lines(text: str) -> list[str]:
    """Split on ``\\n``, dropping one trailing empty piece and a final ``\\r`` per line."""
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def split(content: str) -> tuple[Frontmatter | None, str]:
    """Separate leading frontmatter from the body.

    Frontmatter is only recognised when the text starts with ``---\\n`` and a
    later line consists of exactly ``---``. Otherwise ``(None, content)`` is
    returned unchanged.
    """
    if not content.startswith(_OPEN):
        return None, content
    rest = content[len(_OPEN):]
    end_pos = _find_end_delim(rest)
    if end_pos is None:
        return None, content
    yaml_block = rest[:end_pos]
    newline = rest.find("\n", end_pos)
    body_start = len(rest) if newline == -1 else newline + 1
    return parse(yaml_block), rest[body_start:]


def _find_end_delim(text: str) -> int | None:
    search_from = 0
    while (pos := text.find(_DELIM, search_from)) != -1:
        after = pos + len(_DELIM)
        at_line_start = pos == 0 or text[pos - 1] == "\n"
        at_line_end = after == len(text) or text[after] == "\n"
        if at_line_start and at_line_end:
            return pos
        search_from = after
    return None


def parse(block: str) -> Frontmatter:
    """Parse the known keys out of a frontmatter block; unknown keys are ignored."""
    fm = Frontmatter()
    lines = _lines(block)
    i = 0
    while i < len(lines):
        trimmed = lines[i].lstrip()
        if not trimmed or trimmed.startswith("#") or ":" not in trimmed:
            i += 1
            continue
        key, _, value = trimmed.partition(":")
        key = key.strip()
        value = value.strip()
        if value:
            _apply_scalar(fm, key, value)
            i += 1
            continue
        items: list[str] = []
        i += 1
        while i < len(lines):
            item_line = lines[i].lstrip()
            if item_line.startswith("- "):
                items.append(_unquote(item_line[2:]))
            elif item_line:
                break
            i += 1
        _apply_list(fm, key, items)
    return fm


def _apply_scalar(fm: Frontmatter, key: str, value: str) -> None:
    if key == "wiki":
        fm.wiki = _parse_bool(value)
    elif key == "fragment":
        fm.fragment = _parse_bool(value)
    elif key == "title":
        fm.title = _unquote(value)
    elif key == "summary":
        fm.summary = _unquote(value)
    elif key in ("tags", "related", "aliases"):
        setattr(fm, key, _parse_inline_list(value))


def _apply_list(fm: Frontmatter, key: str, items: list[str]) -> None:
    if key in ("tags", "related", "aliases"):
        setattr(fm, key, items)


def _parse_inline_list(value: str) -> list[str]:
    text = value.strip()
    if text.startswith("[") and text.endswith("]") and len(text) >= 2:
        pieces = (piece.strip() for piece in text[1:-1].split(","))
        return [_unquote(piece) for piece in pieces if piece]
    return [_unquote(text)]


def _unquote(value: str) -> str:
    text = value.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        return text[1:-1]
    return text


def _parse_bool(value: str) -> bool | None:
    lowered = value.strip().lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False
    return None