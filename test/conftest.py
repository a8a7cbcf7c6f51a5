"""Shared fixtures for skills tests."""

import os
import shutil
import tempfile
import textwrap

import pytest

_saved_home = None
_session_home = None


def pytest_configure(config):
    # config.py and utils.runtime resolve ~/.skillbook when first imported,
    # which happens while test modules are collected.
    global _saved_home, _session_home
    _saved_home = os.environ.get("HOME")
    _session_home = tempfile.mkdtemp(prefix="skillbook-home-")
    os.environ["HOME"] = _session_home


def pytest_unconfigure(config):
    if _saved_home is None:
        os.environ.pop("HOME", None)
    else:
        os.environ["HOME"] = _saved_home
    if _session_home:
        shutil.rmtree(_session_home, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point HOME and the skillbook config at ``tmp_path`` for every test."""
    from config import Config

    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Config, "SKILLS_DIR", str(tmp_path / "skills"))
    monkeypatch.setattr(Config, "INCLUDE_BUNDLED_SKILLS", True)
    monkeypatch.setattr(Config, "LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(Config, "TUI_THEME", "dark")
    return tmp_path


@pytest.fixture
def write_skill(tmp_path):
    """Factory that writes a skill directory under ``tmp_path / "skills"``.

    Usage:
        skill_dir = write_skill("lint", "Run lint checks.", "## Checklist\\n1. Do it.")
    """
    root = tmp_path / "skills"

    def _write(
        dirname: str,
        description: str | None,
        body: str,
        name: str | None = None,
        items: str | None = None,
        references: dict[str, str] | None = None,
    ):
        skill_dir = root / dirname
        skill_dir.mkdir(parents=True, exist_ok=True)
        header = ["---", f"name: {name or dirname}"]
        if description is not None:
            header.append(f"description: {description}")
        if items is not None:
            header.append(f"items: {items}")
        header.append("---")
        (skill_dir / "SKILL.md").write_text(
            "\n".join(header) + "\n\n" + textwrap.dedent(body).strip() + "\n",
            encoding="utf-8",
        )
        for chapter, text in (references or {}).items():
            ref_dir = skill_dir / "references"
            ref_dir.mkdir(exist_ok=True)
            (ref_dir / f"{chapter}.md").write_text(textwrap.dedent(text), encoding="utf-8")
        return skill_dir

    _write.root = root
    return _write
