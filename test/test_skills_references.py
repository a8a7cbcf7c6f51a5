"""Tests for lazy reference chapter loading."""

import pytest
import pytest_asyncio

from skills import ChapterNotFound, ReferenceLoader, SkillNotFound, SkillsRegistry
from skills.references import normalize_chapter_id


@pytest_asyncio.fixture
async def loader(write_skill):
    write_skill(
        "demo",
        "Demo skill.",
        "## Checklist\n\n### Methods ([07-methods](references/07-methods.md))\n39. Copy.",
        references={
            "07-methods": "# Methods\n\n## 39. Make defensive copies when needed\n",
            "11-serialization": "# Serialization\n",
        },
    )
    (write_skill.root / "secret.md").write_text("top secret", encoding="utf-8")
    registry = SkillsRegistry(skills_dir=write_skill.root, include_bundled=False)
    await registry.load()
    return ReferenceLoader(registry)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("07-methods", "07-methods"),
        ("07-methods.md", "07-methods"),
        ("references/07-methods.md", "07-methods"),
        ("./references/07-methods.md", "07-methods"),
        ("references\\07-methods.md", "07-methods"),
        (" 7 ", "7"),
    ],
)
def test_normalize_chapter_id(value, expected):
    assert normalize_chapter_id(value) == expected


async def test_load_reference_by_id(loader):
    chapter = await loader.load_reference("demo", "07-methods")
    assert chapter.skill == "demo"
    assert chapter.chapter == "07-methods"
    assert "39." in chapter.text


@pytest.mark.parametrize("ref", ["7", "07", "07-methods.md", "references/07-methods.md"])
async def test_load_reference_alternate_forms(loader, ref):
    chapter = await loader.load_reference("demo", ref)
    assert chapter.chapter == "07-methods"


async def test_load_reference_is_memoized(loader):
    first = await loader.load_reference("demo", "07-methods")
    second = await loader.load_reference("demo", "7")
    assert first is second


async def test_nothing_loaded_until_requested(loader):
    assert loader._loaded == {}
    await loader.load_reference("demo", "11")
    assert list(loader._loaded) == [("demo", "11-serialization")]


async def test_unknown_chapter(loader):
    with pytest.raises(ChapterNotFound) as exc_info:
        await loader.load_reference("demo", "99-nothing")
    assert exc_info.value.available == ["07-methods", "11-serialization"]


@pytest.mark.parametrize("ref", ["../../secret", "../SKILL", "", "."])
async def test_paths_outside_references_rejected(loader, ref):
    with pytest.raises(ChapterNotFound):
        await loader.load_reference("demo", ref)


async def test_unknown_skill(loader):
    with pytest.raises(SkillNotFound):
        await loader.load_reference("effective-java-networking", "07-methods")


async def test_list_chapters(loader):
    assert await loader.list_chapters("demo") == ["07-methods", "11-serialization"]
