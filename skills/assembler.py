"""Assemble the context handed to the language model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from utils import get_logger

from .parser import render_reference_prompt, render_skill_prompt
from .references import ReferenceLoader
from .types import ChapterRef

if TYPE_CHECKING:
    from .registry import SkillsRegistry

logger = get_logger(__name__)

SECTION_SEPARATOR = "\n\n"


class PromptAssembler:
    """Concatenate a request with skill checklists and reference chapters.

    Output order is the user request, then each skill in the order given,
    then each reference in the order given. Nothing is deduplicated.
    """

    def __init__(self, registry: SkillsRegistry, loader: ReferenceLoader | None = None) -> None:
        self.registry = registry
        self.loader = loader or ReferenceLoader(registry)

    async def assemble(
        self,
        user_request: str,
        skill_names: Iterable[str] = (),
        chapter_refs: Iterable[ChapterRef | str] = (),
    ) -> str:
        """Build the combined prompt text.

        Args:
            user_request: The user's request, included verbatim first. A blank
                request is left out.
            skill_names: Skills whose checklists follow the request.
            chapter_refs: ``ChapterRef`` objects or ``skill/chapter`` strings.

        Returns:
            The sections joined by a blank line.

        Raises:
            ReferenceNotFound: If any skill or chapter cannot be found.
        """
        sections: list[str] = []
        if user_request.strip():
            sections.append(user_request)

        for name in skill_names:
            skill = await self.registry.get_skill(name)
            sections.append(render_skill_prompt(skill.name, skill.body))

        for ref in chapter_refs:
            if isinstance(ref, str):
                ref = ChapterRef.parse(ref)
            chapter = await self.loader.load_reference(ref.skill, ref.chapter)
            sections.append(render_reference_prompt(chapter.skill, chapter.chapter, chapter.text))

        logger.debug(f"Assembled prompt with {len(sections)} section(s)")
        return SECTION_SEPARATOR.join(sections)
