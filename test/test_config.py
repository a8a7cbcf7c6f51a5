import os

import pytest

import config
from config import Config
from skills import SkillsRegistry


def test_runtime_dir_is_not_the_real_home():
    pwd = pytest.importorskip("pwd")
    real_home = pwd.getpwuid(os.getuid()).pw_dir
    assert not config._CONFIG_FILE.startswith(os.path.join(real_home, ".skillbook"))


def test_load_config_skips_comments_and_inline_comments(tmp_path):
    path = tmp_path / "config"
    path.write_text(
        "# heading\n\nSKILLS_DIR=/srv/skills  # shared\nTUI_THEME = light\nnot a pair\n",
        encoding="utf-8",
    )
    assert config._load_config(str(path)) == {"SKILLS_DIR": "/srv/skills", "TUI_THEME": "light"}


def test_validate_rejects_unknown_theme(monkeypatch):
    monkeypatch.setattr(Config, "TUI_THEME", "neon")
    with pytest.raises(ValueError, match="TUI_THEME"):
        Config.validate()


def test_validate_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setattr(Config, "LOG_LEVEL", "CHATTY")
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Config.validate()


async def test_registry_defaults_come_from_config(write_skill):
    write_skill("lint", "Run lint checks.", "## Checklist\n1. Lint.")
    registry = SkillsRegistry()
    await registry.load()

    assert registry.skills_dir == write_skill.root
    assert registry.skills["lint"].source == "user"
    assert "effective-java-core" in registry.skills


async def test_registry_honours_include_bundled_setting(monkeypatch, tmp_path):
    monkeypatch.setattr(Config, "INCLUDE_BUNDLED_SKILLS", False)
    registry = SkillsRegistry()
    await registry.load()

    assert registry.skills == {}
