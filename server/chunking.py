# chunking.py
"""Splits a list of lines into page-labelled blocks that fit in one Discord message."""

from __future__ import annotations

from typing import Iterable, List


def page_header(page: int) -> str:
    return f"--- Page {page} --- \n \n"


def chunkify(items: Iterable[str], size: int) -> List[str]:
    """
    Greedily packs items (newline-joined) into chunks of at most `size` characters,
    each prefixed with its page header. Items are never split, so one item longer
    than `size` still becomes its own oversized chunk.
    """
    chunks: List[str] = []
    lines: List[str] = []
    length = 0  # length of "\n".join(lines)

    for item in items:
        header = page_header(len(chunks) + 1)
        if lines and length + len(item) + len(header) > size:
            chunks.append(header + "\n".join(lines))
            lines, length = [item], len(item)
        else:
            length += len(item) + (1 if lines else 0)
            lines.append(item)

    if lines:
        chunks.append(page_header(len(chunks) + 1) + "\n".join(lines))
    return chunks
