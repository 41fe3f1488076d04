from __future__ import annotations

from pathlib import Path

GUIDE = """# Setup guide

In order to start, you should install the CLI.

## Steps

- Install the package.
- Configure the settings.
- Running the tests

The colour of the color picker might change.
"""

NOTES = "Notes about the SDK.\n\nWe think this is generally fine.\n"


def write_sample_corpus(root: Path) -> Path:
    """Create a small directory of markdown and text documents."""
    corpus_dir = root / "docs"
    (corpus_dir / "nested").mkdir(parents=True)
    (corpus_dir / "guide.md").write_text(GUIDE, encoding="utf-8")
    (corpus_dir / "nested" / "notes.txt").write_text(NOTES, encoding="utf-8")
    (corpus_dir / "image.png").write_bytes(b"\x89PNG\r\n")
    return corpus_dir
