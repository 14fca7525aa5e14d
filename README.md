# mdwiki

A small library that reads Markdown notes into structured records: the
frontmatter at the top of each note, its ATX headings, its first prose
paragraph and the remaining body. It has no third-party dependencies.

## Frontmatter

`mdwiki.frontmatter.split(content)` looks for a block that starts the text
with a `---` line and ends at a later line consisting of exactly `---`. It
returns a `Frontmatter` and the body after the closing line. If the text
does not start with `---` followed by a newline, or if no closing line is
found, it returns `None` and the content unchanged.

```python
from mdwiki.frontmatter import split

fm, body = split("---\ntitle: Hello\ntags: [a, b]\n---\nbody text")
fm.title   # "Hello"
fm.tags    # ["a", "b"]
body       # "body text"
```

`mdwiki.frontmatter.parse(block)` parses the text of such a block directly.
It is a line-oriented `key: value` parser, not a full YAML parser. The
`Frontmatter` dataclass has these fields:

- `wiki`, `fragment`: `True` for `true`/`yes`, `False` for `false`/`no`
  (case-insensitive), otherwise `None`.
- `title`, `summary`: strings, with one pair of matching surrounding
  quotes (`"` or `'`) removed.
- `tags`, `related`, `aliases`: lists. They may be written inline as
  `[a, b]`, as a single scalar value (a one-item list), or as `- item`
  lines under a key with an empty value. Blank lines inside such a list
  are skipped.

Other keys and lines starting with `#` are ignored.

## Headings

`mdwiki.headings.extract(content)` returns a list of `Heading(level, text)`
for every ATX heading (`#` to `######`), skipping lines inside fenced code
blocks opened and closed with ```` ``` ```` or `~~~`.

```python
from mdwiki.headings import extract

[h.text for h in extract("# Title\n```\n# not a heading\n```\n## Part")]
# ["Title", "Part"]
```

`mdwiki.headings.parse_atx(line)` parses a single line. It returns `None`
for more than six `#`, or when the `#` run is not followed by a space or
the end of the line. Trailing `#` characters are stripped from the text.

## Ingesting notes

`mdwiki.ingest.ingest_notes(scanned, target_root)` takes an iterable of
objects with a `relative_path` attribute and a root directory. For each
path ending in `.md` it reads the file under the root as UTF-8, splits off
the frontmatter and builds a `NoteData` with:

- `source_file`: the relative path,
- `frontmatter`: the parsed `Frontmatter` (an empty one when there is none),
- `headings`: the headings of the body,
- `first_paragraph`: see below,
- `body`: the text after the frontmatter.

Files that cannot be read or are not valid UTF-8 are logged as a warning
(logger `mdwiki.ingest`) and skipped. The result is sorted by relative
path.

`should_ingest(fm)` decides inclusion: only an explicit `wiki: false`
excludes a note.

`first_paragraph(body)` returns the first run of consecutive non-blank
lines, joined with single spaces, skipping blank lines, heading lines and
fenced code blocks before it; `None` if there is none.

```python
from mdwiki.ingest import first_paragraph

first_paragraph("# Title\n\nFirst line.\nstill first.\n\nsecond.")
# "First line. still first."
```

## What this package does not do

It does not walk directories to find notes: the caller supplies the list
of files. It does not resolve links, render pages or write any output, and
it has no command-line program.