"""
Configuration loading.

Settings come from a YAML file (explicit path, else $NOMENCLATOR_CONFIG) with
$NOMENCLATOR_PROFILE overriding the profile:

    profile: ARTIST
    max_results: 8
    similarity_threshold: 65
    max_candidates: 300
    log_level: DEBUG
    corpus:
      - showNewSection
      - fadeInPage
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from nomenclator.naming import constants

logger = logging.getLogger("nomenclator.config")

CONFIG_ENV_VAR = "NOMENCLATOR_CONFIG"
PROFILE_ENV_VAR = "NOMENCLATOR_PROFILE"


class ConfigError(Exception):
    """Raised when a configuration file exists but cannot be used."""


@dataclass
class NomenclatorConfig:
    profile: str = "DEFAULT"
    max_results: int = constants.DEFAULT_MAX_RESULTS
    similarity_threshold: int = constants.EXISTING_NAME_THRESHOLD
    max_candidates: int = constants.MAX_CANDIDATES
    corpus: Optional[list[str]] = None
    log_level: str = "INFO"


_INT_FIELDS = ("max_results", "similarity_threshold", "max_candidates")


def _coerce(values: dict) -> dict:
    coerced = dict(values)
    for key in _INT_FIELDS:
        if key in coerced:
            try:
                coerced[key] = int(coerced[key])
            except (TypeError, ValueError) as e:
                raise ConfigError(f"{key} must be an integer, got {coerced[key]!r}") from e
    if "corpus" in coerced and coerced["corpus"] is not None:
        if not isinstance(coerced["corpus"], list):
            raise ConfigError("corpus must be a list of identifiers")
        coerced["corpus"] = [str(item) for item in coerced["corpus"]]
    if "profile" in coerced:
        coerced["profile"] = str(coerced["profile"])
    if "log_level" in coerced:
        level = str(coerced["log_level"]).upper()
        # getLevelName maps known names to their numeric level
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"log_level must be a logging level name, got {coerced['log_level']!r}")
        coerced["log_level"] = level
    return coerced


def load_config(path: Optional[Union[str, Path]] = None) -> NomenclatorConfig:
    """
    Load configuration from YAML.

    Args:
        path: Config file path (default: $NOMENCLATOR_CONFIG, else built-in defaults)

    Returns:
        NomenclatorConfig with file values and environment overrides applied

    Raises:
        ConfigError: The file is not valid YAML, is not a mapping, or holds
            values of the wrong type. A missing file is not an error.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)

    values: dict = {}
    if path:
        config_path = Path(path)
        if config_path.is_file():
            try:
                loaded = yaml.safe_load(config_path.read_text(encoding="utf-8"))
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Cannot read config {config_path}: {e}") from e
            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise ConfigError(f"Config {config_path} must be a mapping")
            values = loaded
            logger.info(f"Loaded config from {config_path}")
        else:
            logger.warning(f"Config file {config_path} not found, using defaults")

    known = {f.name for f in fields(NomenclatorConfig)}
    unknown = sorted(k for k in values if k not in known)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(map(str, unknown))}")

    settings = _coerce({k: v for k, v in values.items() if k in known})

    profile_override = os.environ.get(PROFILE_ENV_VAR)
    if profile_override:
        settings["profile"] = profile_override

    return NomenclatorConfig(**settings)
