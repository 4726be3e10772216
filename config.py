"""
Central configuration for rule switches, display and logging.
Pydantic models give type-safe settings loaded from the environment or JSON.
"""
from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

ConfigDict = Dict[str, Any]

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUE_VALUES


class RulesSettings(BaseModel):
    """Game rules and variant settings."""

    board_size: int = Field(default=8, ge=4, le=26, description="Board length and width in squares")
    captures_mandatory: bool = Field(default=False, description="Reject simple moves and skips while a capture exists")
    allow_skip: bool = Field(default=True, description="Accept explicit skip-turn requests")
    enforce_side_to_move: bool = Field(default=True, description="Only pieces of the side to move may act")

    @field_validator('board_size', mode='before')
    @classmethod
    def validate_board_size(cls, v):
        v = int(v)
        if v % 2:
            raise ValueError("board_size must be even")
        return v

    @field_validator('captures_mandatory', 'allow_skip', 'enforce_side_to_move', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        if isinstance(v, str):
            return v.strip().lower() in _TRUE_VALUES
        return bool(v)


class DisplaySettings(BaseModel):
    """Text rendering settings for board snapshots."""

    use_unicode: bool = Field(default=False, description="Use Unicode discs instead of letters")
    show_indices: bool = Field(default=True, description="Label rows and columns with coordinates")
    show_borders: bool = Field(default=True, description="Draw '|' separators around squares")

    @field_validator('use_unicode', 'show_indices', 'show_borders', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        if isinstance(v, str):
            return v.strip().lower() in _TRUE_VALUES
        return bool(v)


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class DraughtsConfig(BaseModel):
    """Main configuration model for the draughts engine."""

    rules: RulesSettings = Field(default_factory=RulesSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    @classmethod
    def from_env(cls) -> 'DraughtsConfig':
        """Create configuration from environment variables."""
        return cls(
            rules=RulesSettings(
                board_size=os.getenv('DRAUGHTS_BOARD_SIZE', '8'),
                captures_mandatory=_env_flag('DRAUGHTS_MANDATORY', 'false'),
                allow_skip=_env_flag('DRAUGHTS_ALLOW_SKIP', 'true'),
                enforce_side_to_move=_env_flag('DRAUGHTS_ENFORCE_TURN', 'true'),
            ),
            display=DisplaySettings(
                use_unicode=_env_flag('DRAUGHTS_UNICODE', 'false'),
                show_indices=_env_flag('DRAUGHTS_INDICES', 'true'),
                show_borders=_env_flag('DRAUGHTS_BORDERS', 'true'),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('DRAUGHTS_LOG_LEVEL', 'INFO'),
            ),
        )

    def to_dict(self) -> ConfigDict:
        """Convert configuration to dictionary."""
        return {
            'rules': self.rules.model_dump(),
            'display': self.display.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'DraughtsConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            rules=RulesSettings(**data.get('rules', {})),
            display=DisplaySettings(**data.get('display', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )

    def update_from_dict(self, updates: ConfigDict) -> None:
        """Update configuration from dictionary, re-validating each touched section."""
        for section, settings in updates.items():
            if hasattr(self, section) and isinstance(settings, dict):
                section_model = getattr(self, section)
                merged = section_model.model_dump()
                merged.update({k: v for k, v in settings.items() if k in merged})
                setattr(self, section, type(section_model)(**merged))


# Global configuration instance
_config: Optional[DraughtsConfig] = None


def get_config() -> DraughtsConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = DraughtsConfig.from_env()
    return _config


def load_config_from_file(filepath: str) -> DraughtsConfig:
    """Load configuration from file and update global instance."""
    global _config
    _config = DraughtsConfig.load_from_file(filepath)
    return _config


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


def get_rules_settings() -> RulesSettings:
    """Get game rules configuration settings."""
    return get_config().rules


def get_display_settings() -> DisplaySettings:
    """Get display configuration settings."""
    return get_config().display


def get_logging_settings() -> LoggingSettings:
    """Get logging configuration settings."""
    return get_config().logging


def setup_logging() -> None:
    """Configure root logging once, controlled by env var DRAUGHTS_LOG_LEVEL."""
    if getattr(setup_logging, "_configured", False):
        return
    level: int = getattr(logging, get_logging_settings().log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
