"""Lazy loading of reference chapters that elaborate a skill's checklist."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import aiofiles.os

from utils import get_logger

from .errors import ChapterNotFound
from .parser import REFERENCES_DIR, list_reference_files, read_text
from .types import ReferenceChapter

if TYPE_CHECKING:
    from .registry import SkillsRegistry

logger = get_logger(__name__)


def normalize_chapter_id(chapter_ref: str) -> str:
    """Reduce a chapter reference to a bare file stem.

    ``references/07-methods.md``, ``07-methods.md`` and ``07-methods`` all
    become ``07-methods``.
    """
    value = chapter_ref.strip().replace("\\", "/")
    if value.startswith("./"):
        value = value[2:]
    if value.startswith(f"{REFERENCES_DIR}/"):
        value = value[len(REFERENCES_DIR) + 1 :]
    if value.endswith(".md"):
        value = value[:-3]
    return value


def _chapter_number(chapter_id: str) -> int | None:
    prefix = chapter_id.split("-", 1)[0]
    return int(prefix) if prefix.isdigit() else None


class ReferenceLoader:
    """Resolve and read ``references/*.md`` files on demand.

    Nothing is read until a chapter is requested; loaded chapters are kept
    for the lifetime of the loader.
    """

    def __init__(self, registry: SkillsRegistry) -> None:
        self.registry = registry
        self._loaded: dict[tuple[str, str], ReferenceChapter] = {}

    async def list_chapters(self, skill_name: str) -> list[str]:
        info = self.registry.get_info(skill_name)
        return [p.stem for p in await list_reference_files(info.path)]

    async def resolve_path(self, skill_name: str, chapter_ref: str) -> tuple[str, Path]:
        """Map a chapter reference to ``(chapter_id, path)``.

        Raises:
            SkillNotFound: If the skill is unknown.
            ChapterNotFound: If no matching chapter file exists.
        """
        info = self.registry.get_info(skill_name)
        references_dir = info.path / REFERENCES_DIR
        chapter_id = normalize_chapter_id(chapter_ref)

        # Only plain file names inside references/ are addressable
        if not chapter_id or "/" in chapter_id or chapter_id.startswith("."):
            raise ChapterNotFound(skill_name, chapter_ref, await self.list_chapters(skill_name))

        candidate = references_dir / f"{chapter_id}.md"
        if await aiofiles.os.path.isfile(candidate):
            return chapter_id, candidate

        # Bare chapter number, e.g. "7" or "07"
        if chapter_id.isdigit():
            wanted = int(chapter_id)
            for path in await list_reference_files(info.path):
                if _chapter_number(path.stem) == wanted:
                    return path.stem, path

        raise ChapterNotFound(skill_name, chapter_ref, await self.list_chapters(skill_name))

    async def load_reference(self, skill_name: str, chapter_ref: str) -> ReferenceChapter:
        """Load one chapter of ``skill_name``.

        Raises:
            SkillNotFound: If the skill is unknown.
            ChapterNotFound: If the chapter does not exist for that skill.
        """
        chapter_id, path = await self.resolve_path(skill_name, chapter_ref)
        key = (skill_name, chapter_id)
        cached = self._loaded.get(key)
        if cached is not None:
            return cached

        text = await read_text(path)
        chapter = ReferenceChapter(skill=skill_name, chapter=chapter_id, path=path, text=text)
        self._loaded[key] = chapter
        logger.debug(f"Loaded reference {skill_name}/{chapter_id} ({len(text)} chars)")
        return chapter
