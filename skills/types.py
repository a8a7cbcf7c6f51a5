"""Data models for skills registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SkillInfo:
    name: str
    description: str
    path: Path
    source: str = "bundled"
    chapters: tuple[str, ...] = ()


@dataclass(frozen=True)
class GuidelineEntry:
    number: int
    statement: str
    chapter: str | None = None


@dataclass(frozen=True)
class Skill:
    """A fully parsed skill: front-matter, checklist and navigation links."""

    name: str
    description: str
    path: Path
    body: str
    checklist: tuple[GuidelineEntry, ...] = ()
    references: tuple[str, ...] = ()
    declared_items: tuple[tuple[int, int], ...] = ()

    def entry(self, number: int) -> GuidelineEntry | None:
        for item in self.checklist:
            if item.number == number:
                return item
        return None

    def entries_for(self, chapter: str) -> list[GuidelineEntry]:
        return [item for item in self.checklist if item.chapter == chapter]


@dataclass(frozen=True)
class ReferenceChapter:
    skill: str
    chapter: str
    path: Path
    text: str


@dataclass(frozen=True)
class ChapterRef:
    skill: str
    chapter: str

    @classmethod
    def parse(cls, value: str) -> ChapterRef:
        """Parse ``skill/chapter`` (or ``skill:chapter``) into a ChapterRef.

        Raises:
            ValueError: If either half is missing.
        """
        value = value.strip()
        sep = "/" if "/" in value else ":"
        skill, _, chapter = value.partition(sep)
        skill, chapter = skill.strip(), chapter.strip()
        if not skill or not chapter:
            raise ValueError(f"Expected '<skill>/<chapter>', got '{value}'")
        return cls(skill=skill, chapter=chapter)

    def __str__(self) -> str:
        return f"{self.skill}/{self.chapter}"


@dataclass(frozen=True)
class ResolvedInput:
    original: str
    rendered: str
    invoked_skills: tuple[str, ...] = field(default_factory=tuple)
