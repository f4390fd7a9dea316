"""Conversion options, per-mode presets, and environment overrides.

Options are a Pydantic model so that values coming from the CLI or from the
environment are validated in one place.  ``ConversionOptions.for_mode`` gives
the preset for a processor mode; ``ConversionOptions.from_env`` layers
``APEXMD_*`` variables (and a project ``.env`` file) on top of it.
"""

import enum
import logging
import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, model_validator

logger = logging.getLogger(__name__)

ROOT = Path(__file__).parent.parent.parent.resolve()


class Mode(str, enum.Enum):
    """Processor compatibility modes."""

    COMMONMARK = "commonmark"
    GFM = "gfm"
    MULTIMARKDOWN = "multimarkdown"
    KRAMDOWN = "kramdown"
    UNIFIED = "unified"


# ─── Mode Presets ────────────────────────────────────────────────────────────

# CommonMark has no tables at all; every other mode gets the table extensions
MODE_PRESETS: dict[Mode, dict[str, bool]] = {
    Mode.COMMONMARK: {
        "enable_tables": False,
        "enable_strikethrough": False,
        "enable_task_lists": False,
        "row_headers": False,
    },
    Mode.GFM: {
        "enable_tables": True,
        "enable_strikethrough": True,
        "enable_task_lists": True,
        "row_headers": False,
    },
    Mode.MULTIMARKDOWN: {
        "enable_tables": True,
        "enable_strikethrough": False,
        "enable_task_lists": False,
        "row_headers": True,
    },
    Mode.KRAMDOWN: {
        "enable_tables": True,
        "enable_strikethrough": False,
        "enable_task_lists": False,
        "row_headers": True,
    },
    Mode.UNIFIED: {
        "enable_tables": True,
        "enable_strikethrough": True,
        "enable_task_lists": True,
        "row_headers": True,
    },
}

# Boolean options that may be switched from the environment
_BOOL_ENV_VARS = {
    "pretty": "APEXMD_PRETTY",
    "standalone": "APEXMD_STANDALONE",
    "enable_aria": "APEXMD_ARIA",
    "advanced_tables": "APEXMD_ADVANCED_TABLES",
}


class ConversionOptions(BaseModel):
    """Everything that changes how markdown is parsed, transformed, and rendered."""

    mode: Mode = Mode.UNIFIED

    # Parsing
    enable_tables: bool = True
    advanced_tables: bool = True
    enable_strikethrough: bool = True
    enable_task_lists: bool = True
    hard_wrap: bool = False
    escape_html: bool = False

    # Table rendering
    caption_position: Literal["above", "below"] = "above"
    row_headers: bool = True
    enable_aria: bool = False

    # Output
    pretty: bool = False
    standalone: bool = False
    title: str | None = None
    stylesheet: str | None = None

    @model_validator(mode="after")
    def disable_advanced_without_tables(self) -> "ConversionOptions":
        """Advanced table features only make sense when tables are parsed."""
        if not self.enable_tables and self.advanced_tables:
            self.advanced_tables = False
        return self

    @classmethod
    def for_mode(cls, mode: Mode | str, **overrides) -> "ConversionOptions":
        """Return the preset for *mode* with *overrides* applied on top."""
        mode = Mode(mode)
        settings: dict = dict(MODE_PRESETS[mode])
        settings.update(overrides)
        return cls(mode=mode, **settings)

    @classmethod
    def from_env(cls, **overrides) -> "ConversionOptions":
        """Build options from ``APEXMD_*`` environment variables.

        Keyword overrides win over the environment; ``None`` overrides are
        ignored so callers can pass unset CLI flags straight through.
        """
        load_dotenv(ROOT / ".env")

        mode = overrides.pop("mode", None) or _get_env("APEXMD_MODE", Mode.UNIFIED.value)
        settings: dict = {}

        caption_position = _get_env("APEXMD_CAPTION_POSITION")
        if caption_position is not None:
            settings["caption_position"] = caption_position.lower()

        for option_name, env_key in _BOOL_ENV_VARS.items():
            value = _get_bool(env_key)
            if value is not None:
                settings[option_name] = value

        settings.update({key: value for key, value in overrides.items() if value is not None})
        logger.debug("Options from environment: mode=%s, %s", mode, settings)
        return cls.for_mode(mode, **settings)


# ─── Environment Helpers ─────────────────────────────────────────────────────


def _get_env(key: str, default: str | None = None) -> str | None:
    """Return a stripped environment value, treating blank as unset."""
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_bool(key: str) -> bool | None:
    value = _get_env(key)
    if value is None:
        return None
    lowered = value.lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean, got {value!r}")
