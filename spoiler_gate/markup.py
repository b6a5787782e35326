"""Spoiler blocks embedded in long-form text (guides, annotations, descriptions).

Two block forms are recognised:

  > [!SPOILER Chapter 12] Kaji survives the tower.
  > Further quoted lines belong to the same block.

  :::spoiler Chapter 40
  Any number of lines.
  :::

The chapter is optional; a block without one is an explicitly flagged
spoiler. An unclosed ::: container runs to the end of the text.
"""

import re
from typing import Any

from .gate import DEFAULT_UNTAGGED_THRESHOLD, should_hide, spoiler_label
from .models import GatedItem, ProgressState, normalize_chapter
from .reveal import RevealSession

Segment = dict[str, Any]  # {"type": "text"|"spoiler", "text": ..., "chapter": ..., "hidden": ...}

_QUOTE_MARKER = re.compile(r"^\[!SPOILER(?:\s+Chapter\s+(\d+))?\]\s*(.*)$", re.IGNORECASE)
_CONTAINER_OPEN = re.compile(r"^:::\s*spoiler\b(.*)$", re.IGNORECASE)
_CHAPTER = re.compile(r"Chapter\s+(\d+)", re.IGNORECASE)


def _chapter(raw: str | None) -> int | None:
    return normalize_chapter(int(raw)) if raw else None


def parse_spoiler_blocks(text: str) -> list[Segment]:
    """Split text into plain text and spoiler segments, in order."""
    segments: list[Segment] = []
    plain: list[str] = []

    def flush() -> None:
        if plain and "\n".join(plain).strip():
            segments.append({"type": "text", "text": "\n".join(plain).strip("\n")})
        plain.clear()

    lines = text.split("\n") if text else []
    i = 0
    while i < len(lines):
        stripped = lines[i].strip()

        if stripped.startswith(">"):
            match = _QUOTE_MARKER.match(stripped[1:].strip())
            if match:
                flush()
                body = [match.group(2)] if match.group(2) else []
                i += 1
                while i < len(lines) and lines[i].strip().startswith(">"):
                    quoted = lines[i].strip()[1:].strip()
                    if _QUOTE_MARKER.match(quoted):
                        break
                    body.append(quoted)
                    i += 1
                segments.append({
                    "type": "spoiler",
                    "chapter": _chapter(match.group(1)),
                    "text": "\n".join(body).strip(),
                })
                continue

        match = _CONTAINER_OPEN.match(stripped)
        if match:
            flush()
            found = _CHAPTER.search(match.group(1))
            body = []
            i += 1
            while i < len(lines) and lines[i].strip() != ":::":
                body.append(lines[i])
                i += 1
            i += 1  # closing fence
            segments.append({
                "type": "spoiler",
                "chapter": _chapter(found.group(1) if found else None),
                "text": "\n".join(body).strip(),
            })
            continue

        plain.append(lines[i])
        i += 1

    flush()
    return segments


def redact(
    text: str,
    progress: ProgressState,
    session: RevealSession | None = None,
    untagged_threshold: int = DEFAULT_UNTAGGED_THRESHOLD,
) -> list[Segment]:
    """Parse text and gate every spoiler block against progress.

    Hidden blocks keep their chapter but their text is replaced by the
    overlay caption. Blocks are keyed "block-1", "block-2", ... in order of
    appearance, which is what a RevealSession passed as session sees.
    """
    result: list[Segment] = []
    ordinal = 0
    for seg in parse_spoiler_blocks(text):
        if seg["type"] != "spoiler":
            result.append({**seg, "hidden": False})
            continue
        ordinal += 1
        item = GatedItem(key=f"block-{ordinal}", spoiler_chapter=seg["chapter"], is_spoiler=True)
        if session is not None:
            hidden = session.should_hide(item, progress, untagged_threshold)
        else:
            hidden = should_hide(item, progress, untagged_threshold)
        out = {**seg, "key": item.key, "hidden": hidden}
        if hidden:
            out["text"] = spoiler_label(item, progress)
        result.append(out)
    return result


def segments_to_text(segments: list[Segment]) -> str:
    """Join segments back into plain text."""
    return "\n".join(seg["text"] for seg in segments)
