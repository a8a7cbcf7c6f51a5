"""Skill registry, reference loading and prompt assembly for skillbook."""

from .assembler import PromptAssembler
from .errors import ChapterNotFound, ReferenceNotFound, SkillNotFound
from .references import ReferenceLoader
from .registry import BUNDLED_SKILLS_DIR, SkillsRegistry, check_numbering
from .render import render_skills_section
from .types import (
    ChapterRef,
    GuidelineEntry,
    ReferenceChapter,
    ResolvedInput,
    Skill,
    SkillInfo,
)

__all__ = [
    "BUNDLED_SKILLS_DIR",
    "ChapterNotFound",
    "ChapterRef",
    "GuidelineEntry",
    "PromptAssembler",
    "ReferenceChapter",
    "ReferenceLoader",
    "ReferenceNotFound",
    "ResolvedInput",
    "Skill",
    "SkillInfo",
    "SkillNotFound",
    "SkillsRegistry",
    "check_numbering",
    "render_skills_section",
]
