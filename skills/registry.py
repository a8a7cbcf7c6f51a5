"""Skills registry implementation."""

from __future__ import annotations

from pathlib import Path

from config import Config
from utils import get_logger

from .assembler import PromptAssembler
from .errors import SkillNotFound
from .parser import (
    SKILL_FILE,
    find_invocations,
    list_reference_files,
    list_skill_files,
    parse_checklist,
    parse_item_ranges,
    parse_reference_links,
    read_text,
    split_frontmatter,
)
from .types import ResolvedInput, Skill, SkillInfo

logger = get_logger(__name__)

# Bundled skills ship with skillbook
BUNDLED_SKILLS_DIR = Path(__file__).parent / "bundled"


class SkillsRegistry:
    """Index skills by name and parse them on first reference."""

    def __init__(
        self,
        skills_dir: Path | str | None = None,
        include_bundled: bool | None = None,
    ) -> None:
        self.skills_dir = Path(skills_dir) if skills_dir is not None else Path(Config.SKILLS_DIR)
        self.include_bundled = (
            Config.INCLUDE_BUNDLED_SKILLS if include_bundled is None else include_bundled
        )
        self.skills: dict[str, SkillInfo] = {}
        self._parsed: dict[str, Skill] = {}

    async def load(self) -> None:
        # Load user skills first, then bundled skills (user skills take precedence)
        self.skills = await self._load_skills(self.skills_dir, source="user")
        self._parsed.clear()
        if not self.include_bundled:
            return
        bundled = await self._load_skills(BUNDLED_SKILLS_DIR, source="bundled")
        for name, skill in bundled.items():
            if name in self.skills:
                logger.info(f"User skill '{name}' overrides bundled skill")
                continue
            self.skills[name] = skill

    async def _load_skills(self, skills_dir: Path, source: str) -> dict[str, SkillInfo]:
        results: dict[str, SkillInfo] = {}
        for skill_file in await list_skill_files(skills_dir):
            content = await read_text(skill_file)
            frontmatter, _ = split_frontmatter(content)
            name = str(frontmatter.get("name", "")).strip()
            description = str(frontmatter.get("description", "")).strip()
            if not name or not description:
                logger.warning(f"Skipping skill without required fields: {skill_file}")
                continue
            if name in results:
                logger.warning(f"Duplicate skill '{name}' in {skills_dir}, keeping {results[name].path}")
                continue
            results[name] = SkillInfo(
                name=name,
                description=description,
                path=skill_file.parent,
                source=source,
                chapters=tuple(p.stem for p in await list_reference_files(skill_file.parent)),
            )
        logger.debug(f"Indexed {len(results)} {source} skill(s) from {skills_dir}")
        return results

    def list_skills(self) -> list[SkillInfo]:
        return sorted(self.skills.values(), key=lambda s: s.name)

    def get_info(self, name: str) -> SkillInfo:
        info = self.skills.get(name)
        if info is None:
            raise SkillNotFound(name, self.skills)
        return info

    async def load_skill_body(self, skill: SkillInfo) -> str:
        content = await read_text(skill.path / SKILL_FILE)
        _, body = split_frontmatter(content)
        return body.strip()

    async def get_skill(self, name: str) -> Skill:
        """Return the parsed skill named exactly ``name``.

        Raises:
            SkillNotFound: If no indexed skill has that name.
        """
        cached = self._parsed.get(name)
        if cached is not None:
            return cached

        info = self.get_info(name)
        content = await read_text(info.path / SKILL_FILE)
        frontmatter, body = split_frontmatter(content)
        body = body.strip()

        try:
            declared = parse_item_ranges(frontmatter.get("items"))
        except ValueError as e:
            logger.warning(f"Ignoring invalid items declaration in {info.path / SKILL_FILE}: {e}")
            declared = ()

        skill = Skill(
            name=info.name,
            description=info.description,
            path=info.path,
            body=body,
            checklist=parse_checklist(body),
            references=parse_reference_links(body),
            declared_items=declared,
        )
        self._parsed[name] = skill
        logger.debug(f"Parsed skill '{name}': {len(skill.checklist)} checklist entries")
        return skill

    async def resolve_user_input(self, user_input: str) -> ResolvedInput:
        """Expand ``$skill-name`` tokens into the assembled prompt.

        Tokens that do not name a known skill are left in place untouched.
        """
        invoked = tuple(name for name in find_invocations(user_input) if name in self.skills)
        if not invoked:
            return ResolvedInput(user_input, user_input, ())

        rendered = await PromptAssembler(self).assemble(user_input, invoked, [])
        return ResolvedInput(user_input, rendered, invoked)


def check_numbering(skill: Skill) -> list[str]:
    """Report checklist numbering problems for ``skill``.

    Numbers must be strictly increasing. When the skill declares item
    ranges, the checklist must enumerate exactly those numbers.
    """
    problems: list[str] = []
    if not skill.checklist:
        problems.append(f"{skill.name}: checklist is empty")
        return problems

    seen: set[int] = set()
    previous: int | None = None
    for entry in skill.checklist:
        if entry.number in seen:
            problems.append(f"{skill.name}: item {entry.number} is duplicated")
        elif previous is not None and entry.number < previous:
            problems.append(f"{skill.name}: item {entry.number} follows item {previous}")
        seen.add(entry.number)
        previous = entry.number

    if skill.declared_items:
        declared: set[int] = set()
        for start, end in skill.declared_items:
            declared.update(range(start, end + 1))
        for number in sorted(seen - declared):
            problems.append(f"{skill.name}: item {number} is outside the declared items")
        for number in sorted(declared - seen):
            problems.append(f"{skill.name}: declared item {number} is missing")
    return problems
