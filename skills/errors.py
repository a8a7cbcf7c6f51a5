"""Lookup errors raised by the skills registry and reference loader."""

from __future__ import annotations

from typing import Iterable


class ReferenceNotFound(LookupError):
    """A requested skill or chapter does not correspond to a file on disk."""

    def __init__(self, message: str, available: Iterable[str] = ()) -> None:
        self.available = sorted(available)
        if self.available:
            message = f"{message}. Available: {', '.join(self.available)}"
        super().__init__(message)


class SkillNotFound(ReferenceNotFound):
    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        super().__init__(f"Skill '{name}' not found", available)


class ChapterNotFound(ReferenceNotFound):
    def __init__(self, skill: str, chapter: str, available: Iterable[str] = ()) -> None:
        self.skill = skill
        self.chapter = chapter
        super().__init__(f"Chapter '{chapter}' not found for skill '{skill}'", available)
