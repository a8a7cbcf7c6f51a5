"""Parsing and rendering helpers for skills."""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

import aiofiles
import aiofiles.os
import yaml

from .types import GuidelineEntry

SKILL_FILE = "SKILL.md"
REFERENCES_DIR = "references"

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.*?)\s*#*\s*$")
_ENTRY_RE = re.compile(r"^(\d+)\.\s+(.+?)\s*$")
_LINK_RE = re.compile(r"\[([^\]]*)\]\(([^)\s]+)\)")
_REFERENCE_LINK_RE = re.compile(r"\]\((?:\./)?references/([^)\s#]+?)\.md(?:#[^)\s]*)?\)")
_INVOCATION_RE = re.compile(r"(?<!\S)\$([A-Za-z0-9][A-Za-z0-9_.-]*)")
_RANGE_RE = re.compile(r"^(\d+)\s*(?:[-–—]|\.\.)\s*(\d+)$")


def split_frontmatter(text: str) -> tuple[dict[str, object], str]:
    lines = text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}, text

    end_idx = None
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            end_idx = i
            break

    if end_idx is None:
        return {}, text

    yaml_text = "\n".join(lines[1:end_idx])
    body = "\n".join(lines[end_idx + 1 :])

    try:
        data = yaml.safe_load(yaml_text) or {}
    except yaml.YAMLError:
        return {}, text

    if not isinstance(data, dict):
        return {}, body

    return data, body


def find_invocations(text: str) -> list[str]:
    """Return ``$name`` tokens in order of first appearance."""
    names: list[str] = []
    for match in _INVOCATION_RE.finditer(text):
        name = match.group(1).rstrip(".")
        if name and name not in names:
            names.append(name)
    return names


def parse_item_ranges(value: object) -> tuple[tuple[int, int], ...]:
    """Parse a declared item scope such as ``"1-65, 74-78"``.

    Accepts a comma separated string, a single int, or a list of either.
    Returns inclusive ``(start, end)`` pairs in declaration order.

    Raises:
        ValueError: If a part is not a number or a range.
    """
    if value is None or value == "":
        return ()
    if isinstance(value, bool):
        raise ValueError(f"Invalid item range: {value!r}")
    if isinstance(value, int):
        return ((value, value),)
    if isinstance(value, (list, tuple)):
        parts = [str(v) for v in value]
    else:
        parts = str(value).split(",")

    ranges: list[tuple[int, int]] = []
    for part in parts:
        part = part.strip()
        if not part:
            continue
        if part.isdigit():
            ranges.append((int(part), int(part)))
            continue
        match = _RANGE_RE.match(part)
        if not match:
            raise ValueError(f"Invalid item range: {part!r}")
        start, end = int(match.group(1)), int(match.group(2))
        if start > end:
            raise ValueError(f"Item range is reversed: {part!r}")
        ranges.append((start, end))
    return tuple(ranges)


def _iter_lines_outside_fences(body: str):
    in_fence = False
    for line in body.splitlines():
        if line.lstrip().startswith(("```", "~~~")):
            in_fence = not in_fence
            continue
        if not in_fence:
            yield line


def extract_section(body: str, title: str) -> str | None:
    """Return the text under the level-2 heading starting with ``title``."""
    collected: list[str] | None = None
    in_fence = False
    for line in body.splitlines():
        if line.lstrip().startswith(("```", "~~~")):
            in_fence = not in_fence
        heading = None if in_fence else _HEADING_RE.match(line)
        if heading and len(heading.group(1)) <= 2:
            if collected is not None:
                break
            if len(heading.group(1)) == 2 and heading.group(2).lower().startswith(title.lower()):
                collected = []
            continue
        if collected is not None:
            collected.append(line)
    if collected is None:
        return None
    return "\n".join(collected).strip()


def chapter_from_link(text: str) -> str | None:
    match = _REFERENCE_LINK_RE.search(text)
    return match.group(1) if match else None


def parse_checklist(body: str) -> tuple[GuidelineEntry, ...]:
    """Extract numbered guideline entries from the ``## Checklist`` section.

    Entries are numbered lines starting in column 0; indented numbered
    lines are sub-points of the entry above. Entries inherit the chapter
    linked from the nearest group heading; an entry that links a chapter
    itself overrides it.
    """
    section = extract_section(body, "Checklist")
    if section is None:
        return ()

    entries: list[GuidelineEntry] = []
    current_chapter: str | None = None
    for line in _iter_lines_outside_fences(section):
        heading = _HEADING_RE.match(line)
        if heading:
            current_chapter = chapter_from_link(heading.group(2))
            continue
        match = _ENTRY_RE.match(line)
        if not match:
            continue
        text = match.group(2)
        chapter = chapter_from_link(text) or current_chapter
        statement = _LINK_RE.sub(r"\1", text).strip()
        entries.append(GuidelineEntry(number=int(match.group(1)), statement=statement, chapter=chapter))
    return tuple(entries)


def parse_reference_links(body: str) -> tuple[str, ...]:
    """Return chapter ids linked as ``references/<id>.md``, first occurrence order."""
    chapters: list[str] = []
    for line in _iter_lines_outside_fences(body):
        for match in _REFERENCE_LINK_RE.finditer(line):
            if match.group(1) not in chapters:
                chapters.append(match.group(1))
    return tuple(chapters)


def render_skill_prompt(name: str, body: str) -> str:
    parts = [f"SKILL: {name}", body.strip()]
    return "\n\n".join(part for part in parts if part)


def render_reference_prompt(skill: str, chapter: str, text: str) -> str:
    parts = [f"REFERENCE: {skill}/{chapter}", text.strip()]
    return "\n\n".join(part for part in parts if part)


async def read_text(path: Path) -> str:
    async with aiofiles.open(path, encoding="utf-8") as handle:
        return await handle.read()


async def list_skill_files(skills_dir: Path) -> list[Path]:
    if not await aiofiles.os.path.exists(skills_dir):
        return []

    def _collect() -> list[Path]:
        results: list[Path] = []
        for entry in sorted(skills_dir.iterdir()):
            if not entry.is_dir():
                continue
            candidate = entry / SKILL_FILE
            if candidate.is_file():
                results.append(candidate)
        return results

    return await asyncio.to_thread(_collect)


async def list_reference_files(skill_dir: Path) -> list[Path]:
    references_dir = skill_dir / REFERENCES_DIR
    if not await aiofiles.os.path.exists(references_dir):
        return []

    def _collect() -> list[Path]:
        return sorted(p for p in references_dir.glob("*.md") if p.is_file())

    return await asyncio.to_thread(_collect)
