"""Tests for render_skills_section."""

from pathlib import Path

from skills import SkillInfo, SkillsRegistry, render_skills_section

CORE = SkillInfo(
    name="effective-java-core",
    description="Review Java code against the Effective Java checklist.",
    path=Path("/opt/skillbook/bundled/effective-java-core"),
    source="bundled",
    chapters=("02-creating-destroying-objects", "07-methods"),
)


def test_render_skills_section_empty() -> None:
    assert render_skills_section([]) is None


def test_render_lists_chapters_per_skill() -> None:
    result = render_skills_section([CORE])

    assert result is not None
    assert "### Bundled skills" in result
    assert (
        "- effective-java-core: Review Java code against the Effective Java checklist. "
        "(file: /opt/skillbook/bundled/effective-java-core/SKILL.md)"
    ) in result
    assert (
        "  - chapters in /opt/skillbook/bundled/effective-java-core/references/: "
        "02-creating-destroying-objects, 07-methods"
    ) in result
    assert "### How to use skills" in result


def test_skill_without_chapters_has_no_chapter_line() -> None:
    lint = SkillInfo(name="lint", description="Lint.", path=Path("/skills/lint"), source="user")
    result = render_skills_section([lint])

    assert result is not None
    assert "- lint: Lint. (file: /skills/lint/SKILL.md)" in result
    assert "chapters in" not in result


def test_user_skills_listed_before_bundled() -> None:
    skills = [
        CORE,
        SkillInfo(name="zed", description="Z.", path=Path("/u/zed"), source="user"),
        SkillInfo(name="alpha", description="A.", path=Path("/u/alpha"), source="user"),
    ]
    result = render_skills_section(skills)

    assert result is not None
    user_at = result.index("### User skills")
    bundled_at = result.index("### Bundled skills")
    assert user_at < result.index("- alpha:") < result.index("- zed:") < bundled_at
    assert bundled_at < result.index("- effective-java-core:")


async def test_registry_indexes_chapters_for_rendering(write_skill) -> None:
    write_skill(
        "demo",
        "Demo skill.",
        "## Checklist\n1. One.",
        references={"02-second": "Two.\n", "01-first": "One.\n"},
    )
    registry = SkillsRegistry(skills_dir=write_skill.root, include_bundled=False)
    await registry.load()

    assert registry.skills["demo"].chapters == ("01-first", "02-second")
    result = render_skills_section(registry.list_skills())
    assert "### User skills" in result
    assert "references/: 01-first, 02-second" in result
