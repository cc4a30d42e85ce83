from __future__ import annotations

import os
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator

from loadassert.verbose import setup_logger

ABORTED_BY_SCRIPT_EXIT_CODE = 108


def _colors_default() -> bool:
    # https://no-color.org: any value disables color
    return "NO_COLOR" not in os.environ


class AssertConfig(BaseModel):
    """Process-wide settings for diagnostics and failure logging."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    colors: bool = Field(default_factory=_colors_default)
    show_origin: bool = True
    log_file: str | None = None
    verbose: bool = False
    abort_exit_code: int = Field(ABORTED_BY_SCRIPT_EXIT_CODE, ge=1, le=255)

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: str | None) -> str | None:
        """Expand ${VAR} references, rejecting variables that are unset.

        Raises ValueError naming the reference so the error points at the
        config rather than surfacing later as a bad path.
        """
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception:
            # Variable is missing and has no default
            raise ValueError(f"log_file '{v}' references an unset environment variable")


_active_config: AssertConfig | None = None


def get_config() -> AssertConfig:
    """Return the active config, falling back to defaults."""
    global _active_config
    if _active_config is None:
        _active_config = AssertConfig()
    return _active_config


def configure(config: AssertConfig | None = None) -> AssertConfig:
    """Install *config* as the active config and set up its log handlers."""
    global _active_config
    config = config if config is not None else AssertConfig()
    _active_config = config

    if config.log_file or config.verbose:
        setup_logger(
            Path(config.log_file) if config.log_file else None,
            verbose=config.verbose,
        )

    return config


def reset_config() -> None:
    """Drop the active config so the next lookup rebuilds defaults."""
    global _active_config
    _active_config = None


def load_config(path: Path) -> AssertConfig:
    """Load and validate a config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = AssertConfig(**raw)

    # Resolve a relative log_file against the config file location
    if config.log_file:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config = config.model_copy(
                update={"log_file": str((config_dir / log_path).resolve())}
            )

    return config
