"""Configuration loading for named wash profiles."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from stringwash.charsets import NEWLINES, WHITESPACES, WHITESPACES_AND_NEWLINES, CharacterSet
from stringwash.errors import ConfigError, ProfileNotFoundError
from stringwash.modes import WashMode
from stringwash.normalize import TextWasher

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STRINGWASH_CONFIG"


class WashProfile(BaseModel):
    mode: WashMode = WashMode.leading_and_trailing
    characters: Optional[str] = None
    include_whitespace: bool = False
    include_newlines: bool = False

    @field_validator("characters")
    @classmethod
    def validate_characters(cls, value: Optional[str]) -> Optional[str]:
        if value == "":
            raise ValueError("characters must not be empty; omit it to use the default set")
        return value

    @property
    def has_explicit_set(self) -> bool:
        return self.characters is not None or self.include_whitespace or self.include_newlines

    def character_set(self) -> CharacterSet:
        if not self.has_explicit_set:
            return WHITESPACES_AND_NEWLINES
        charset = CharacterSet.characters_in(self.characters or "")
        if self.include_whitespace:
            charset = charset | WHITESPACES
        if self.include_newlines:
            charset = charset | NEWLINES
        return charset

    def build_washer(self) -> TextWasher:
        return TextWasher(mode=self.mode, character_set=self.character_set())


class StringwashConfig(BaseModel):
    version: int
    default_profile: Optional[str] = None
    profiles: Dict[str, WashProfile] = Field(default_factory=dict)

    @field_validator("version")
    @classmethod
    def validate_version(cls, value: int) -> int:
        if value != 1:
            raise ValueError("Only version 1 config is supported")
        return value

    @model_validator(mode="after")
    def validate_default_profile(self) -> "StringwashConfig":
        if self.default_profile is not None and self.default_profile not in self.profiles:
            raise ValueError(f"default_profile {self.default_profile!r} is not a configured profile")
        return self

    def washer(self, name: Optional[str] = None) -> TextWasher:
        profile_name = name if name is not None else self.default_profile
        if profile_name is None:
            return TextWasher()
        profile = self.profiles.get(profile_name)
        if profile is None:
            raise ProfileNotFoundError(profile_name)
        logger.debug("Using wash profile %s (mode=%s)", profile_name, profile.mode.value)
        return profile.build_washer()


def load_config(path: Optional[str] = None) -> StringwashConfig:
    config_path = _resolve_config_path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    try:
        payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    try:
        config = StringwashConfig(**payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {config_path}: {exc}") from exc
    _warn_ignored_sets(config)
    logger.debug("Loaded %d wash profiles from %s", len(config.profiles), config_path)
    return config


def _resolve_config_path(path: Optional[str]) -> Path:
    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if not env_path:
        raise ConfigError(f"No config path given and {CONFIG_ENV_VAR} is not set")
    return Path(env_path).expanduser()


def _warn_ignored_sets(config: StringwashConfig) -> None:
    for name, profile in config.profiles.items():
        if profile.has_explicit_set and not profile.mode.uses_character_set:
            logger.warning(
                "Profile %s sets characters but mode %s ignores them", name, profile.mode.value
            )


__all__ = ["CONFIG_ENV_VAR", "StringwashConfig", "WashProfile", "load_config"]
