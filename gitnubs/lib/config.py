"""
Configuration loader for git-nubs.

Settings come from, in increasing precedence: built-in defaults, a
.git-nubs.env file at the project root, and GIT_NUBS_* environment
variables.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from . import envparse
from . import validate
from .versions import VERSION_TAG_GLOBS, VersionGrammar

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".git-nubs.env"

CONFIG_KEYS = (
    "GIT_NUBS_SURROUND_ERROR",
    "GIT_NUBS_REMOTE_TIMEOUT",
    "GIT_NUBS_VERSION_TAG_PATTERNS",
    "GIT_NUBS_FALLBACK_VERSION",
)

TRUTHY = {"true", "1", "yes"}


class ConfigError(Exception):
    """Configuration could not be loaded."""


@dataclass(frozen=True)
class NubsConfig:
    """Settings shared by the git helpers and the CLI."""
    surround_error: bool = True  # Blank lines around insist_* error messages
    remote_timeout: int = 60  # ls-remote, remote show
    version_tag_patterns: tuple[str, ...] = VERSION_TAG_GLOBS
    fallback_version: str = "0.0.0"

    @property
    def grammar(self) -> VersionGrammar:
        """Default version grammar, prefiltered by version_tag_patterns."""
        return VersionGrammar(globs=self.version_tag_patterns)


DEFAULT_CONFIG = NubsConfig()


def config_from_mapping(env: Mapping[str, str]) -> NubsConfig:
    """Validate raw GIT_NUBS_* settings and return NubsConfig."""
    raw = dict(env)
    try:
        validate.validate(raw, "config")
    except validate.ValidationError as e:
        raise ConfigError(str(e)) from e

    patterns = tuple(raw.get("GIT_NUBS_VERSION_TAG_PATTERNS", "").split())
    return NubsConfig(
        surround_error=raw.get("GIT_NUBS_SURROUND_ERROR", "true").lower() in TRUTHY,
        remote_timeout=int(raw.get("GIT_NUBS_REMOTE_TIMEOUT", DEFAULT_CONFIG.remote_timeout)),
        version_tag_patterns=patterns or DEFAULT_CONFIG.version_tag_patterns,
        fallback_version=raw.get("GIT_NUBS_FALLBACK_VERSION", DEFAULT_CONFIG.fallback_version),
    )


def load_config(
    project_root: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> NubsConfig:
    """
    Load configuration for a project.

    Args:
        project_root: Directory that may hold a .git-nubs.env file
        environ: Environment to read GIT_NUBS_* overrides from
            (defaults to os.environ)

    Raises:
        ConfigError: if the file is malformed or a value is invalid
    """
    if environ is None:
        environ = os.environ

    raw: dict[str, str] = {}
    if project_root is not None:
        config_path = Path(project_root) / CONFIG_FILENAME
        if config_path.exists():
            try:
                raw.update(envparse.load_env(str(config_path)))
            except ValueError as e:
                raise ConfigError(f"{config_path}: {e}") from e
            logger.debug("Loaded %s", config_path)

    for key in CONFIG_KEYS:
        if key in environ:
            raw[key] = environ[key]

    return config_from_mapping(raw)
