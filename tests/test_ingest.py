import logging
from dataclasses import dataclass
from pathlib import PurePath

from mdwiki.frontmatter import Frontmatter
from mdwiki.headings import Heading
from mdwiki.ingest import first_paragraph, ingest_notes, should_ingest


@dataclass
class Scanned:
    relative_path: PurePath


def test_wiki_false_excludes():
    assert should_ingest(Frontmatter(wiki=False)) is False


def test_wiki_true_includes():
    assert should_ingest(Frontmatter(wiki=True)) is True


def test_no_wiki_flag_includes():
    assert should_ingest(Frontmatter()) is True


def test_first_paragraph_skips_heading_and_fence():
    body = "# Title\n\n```\ncode\n```\n\nThis is the first para.\nstill first.\n\nsecond para."
    assert first_paragraph(body) == "This is the first para. still first."


def test_first_paragraph_none_when_only_headings():
    assert first_paragraph("# A\n\n## B\n") is None


def test_ingest_notes_filters_and_sorts(tmp_path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "b.md").write_text("---\ntitle: B\n---\n# B\n\nIntro text.\n\n## Part\n", encoding="utf-8")
    (tmp_path / "a.md").write_text("# A", encoding="utf-8")
    (tmp_path / "sub" / "c.md").write_text("plain", encoding="utf-8")
    (tmp_path / "skip.md").write_text("---\nwiki: false\n---\n# Skip", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("# not markdown", encoding="utf-8")

    scanned = [
        Scanned(PurePath(p))
        for p in ["sub/c.md", "b.md", "skip.md", "notes.txt", "a.md"]
    ]
    notes = ingest_notes(scanned, tmp_path)

    assert [n.source_file.as_posix() for n in notes] == ["a.md", "b.md", "sub/c.md"]
    b = notes[1]
    assert b.frontmatter.title == "B"
    assert b.body == "# B\n\nIntro text.\n\n## Part\n"
    assert b.headings == [Heading(1, "B"), Heading(2, "Part")]
    assert b.first_paragraph == "Intro text."
    assert notes[0].frontmatter == Frontmatter()
    assert notes[0].first_paragraph is None


def test_ingest_notes_skips_unreadable_files(tmp_path, caplog):
    (tmp_path / "bad.md").write_bytes(b"H\xffI")
    (tmp_path / "good.md").write_text("ok", encoding="utf-8")
    scanned = [Scanned(PurePath("bad.md")), Scanned(PurePath("good.md")), Scanned(PurePath("gone.md"))]

    with caplog.at_level(logging.WARNING, logger="mdwiki.ingest"):
        notes = ingest_notes(scanned, tmp_path)

    assert [n.source_file.as_posix() for n in notes] == ["good.md"]
    messages = [r.getMessage() for r in caplog.records]
    assert any("bad.md" in m for m in messages)
    assert any("gone.md" in m for m in messages)


def test_ingest_notes_preserves_crlf_in_body(tmp_path):
    (tmp_path / "n.md").write_bytes(b"# N\r\n\r\ntext\r\n")
    notes = ingest_notes([Scanned(PurePath("n.md"))], tmp_path)
    assert notes[0].body == "# N\r\n\r\ntext\r\n"
    assert notes[0].headings == [Heading(1, "N")]
    assert notes[0].first_paragraph == "text"