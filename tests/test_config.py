from __future__ import annotations

import logging
from pathlib import Path
import textwrap

import pytest

from stringwash.config import CONFIG_ENV_VAR, StringwashConfig, WashProfile, load_config
from stringwash.errors import ConfigError, ProfileNotFoundError
from stringwash.modes import WashMode


def _write_config(path: Path, content: str) -> Path:
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


def test_load_config_builds_profile_washers(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path / "stringwash.yml",
        """
        version: 1
        default_profile: title
        profiles:
          title:
            mode: leading_and_trailing
          slug:
            mode: occurrences_of
            characters: "-_"
            include_whitespace: true
          comment:
            mode: input_text
        """,
    )
    config = load_config(str(config_path))
    assert set(config.profiles) == {"title", "slug", "comment"}
    assert config.washer()("  Title  ") == "Title"
    assert config.washer("slug")("my-new _page") == "mynewpage"
    assert config.washer("comment")("a\n\n\n\nb  c") == "a\n\nb c"


def test_load_config_from_env(tmp_path: Path, monkeypatch) -> None:
    config_path = _write_config(
        tmp_path / "env.yml",
        """
        version: 1
        profiles:
          dots:
            mode: trailing
            characters: "."
        """,
    )
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))
    config = load_config()
    assert config.washer("dots")("Done...") == "Done"


def test_load_config_without_path_or_env(monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    with pytest.raises(ConfigError):
        load_config()


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yml"))


def test_load_config_empty_file(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path / "empty.yml", "")
    with pytest.raises(ConfigError):
        load_config(str(config_path))


def test_load_config_rejects_unknown_version(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path / "v2.yml", "version: 2\n")
    with pytest.raises(ConfigError):
        load_config(str(config_path))


def test_load_config_rejects_unknown_default_profile(tmp_path: Path) -> None:
    config_path = _write_config(
        tmp_path / "bad.yml",
        """
        version: 1
        default_profile: nope
        profiles:
          title: {}
        """,
    )
    with pytest.raises(ConfigError):
        load_config(str(config_path))


def test_load_config_warns_when_characters_are_ignored(tmp_path: Path, caplog) -> None:
    config_path = _write_config(
        tmp_path / "ignored.yml",
        """
        version: 1
        profiles:
          line:
            mode: input_line
            characters: "x"
        """,
    )
    with caplog.at_level(logging.WARNING, logger="stringwash.config"):
        config = load_config(str(config_path))
    assert "ignores them" in caplog.text
    assert config.washer("line")(" x  y ") == "x y"


def test_washer_unknown_profile() -> None:
    config = StringwashConfig(version=1)
    with pytest.raises(ProfileNotFoundError):
        config.washer("missing")


def test_washer_without_profiles_uses_defaults() -> None:
    config = StringwashConfig(version=1)
    assert config.washer()("\t hi \n") == "hi"


def test_profile_character_set_resolution() -> None:
    default = WashProfile()
    assert " " in default.character_set()
    assert "\n" in default.character_set()

    only_x = WashProfile(characters="x")
    assert "x" in only_x.character_set()
    assert " " not in only_x.character_set()

    newlines = WashProfile(mode=WashMode.trailing, include_newlines=True)
    assert "\n" in newlines.character_set()
    assert " " not in newlines.character_set()
    assert newlines.build_washer()("keep  \n\n") == "keep  "


def test_profile_rejects_empty_characters() -> None:
    with pytest.raises(ValueError):
        WashProfile(characters="")


def test_load_config_malformed_yaml(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path / "broken.yml", "version: 1\nprofiles: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(str(config_path))


def test_washer_empty_name_is_not_the_default_profile() -> None:
    config = StringwashConfig(
        version=1,
        default_profile="title",
        profiles={"title": WashProfile()},
    )
    with pytest.raises(ProfileNotFoundError):
        config.washer("")
