"""Render skills section for system prompt injection."""

from __future__ import annotations

from .types import SkillInfo

SKILLS_USAGE_RULES = """\
- Trigger rules: If the user names a skill (with `$skill-name` or plain text) OR the task clearly matches a skill's description, use that skill for that turn. Multiple mentions mean use them all. Do not carry skills across turns unless re-mentioned.
- Missing/blocked: If a named skill isn't listed or its `SKILL.md` can't be read, say so briefly and continue with the best fallback.
- Checklist first: open the skill's `SKILL.md` and walk the items relevant to the code at hand. Cite items by number when reporting findings (e.g. "Item 39: make defensive copies").
- Chapters on demand: each checklist group links one chapter under the skill's `references/` directory. Load only the chapters listed above whose items you need to explain or apply; summarize instead of pasting them whole."""

_SOURCE_TITLES = {
    "user": "User skills (override bundled skills with the same name)",
    "bundled": "Bundled skills",
}


def _render_skill(skill: SkillInfo) -> list[str]:
    path_str = str(skill.path).replace("\\", "/")
    lines = [f"- {skill.name}: {skill.description} (file: {path_str}/SKILL.md)"]
    if skill.chapters:
        lines.append(f"  - chapters in {path_str}/references/: {', '.join(skill.chapters)}")
    return lines


def render_skills_section(skills: list[SkillInfo]) -> str | None:
    """Render available skills as a system prompt section.

    Skills are grouped by where they were loaded from, user skills first,
    and each entry lists the reference chapters that can be opened for it.

    Returns:
        Formatted markdown section, or None if no skills available.
    """
    if not skills:
        return None

    lines: list[str] = [
        "## Skills",
        "Each skill below is a numbered checklist of guidelines in a `SKILL.md` file, "
        "with reference chapters that elaborate groups of items.",
    ]

    sources = sorted({s.source for s in skills}, key=lambda src: (src != "user", src))
    for source in sources:
        lines.append(f"### {_SOURCE_TITLES.get(source, source.capitalize() + ' skills')}")
        for skill in sorted((s for s in skills if s.source == source), key=lambda s: s.name):
            lines.extend(_render_skill(skill))

    lines.append("### How to use skills")
    lines.append(SKILLS_USAGE_RULES)

    return "\n".join(lines)
