"""Configuration loading and option resolution for the CLI.

Precedence is CLI flags, then the config file (explicit --config or the first
default location found), then built-in defaults. Config problems are logged
and never abort the run.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from constants import Constants

logger = logging.getLogger(__name__)

@dataclass
class RunOptions:
    """Resolved options for one run."""
    path: str = Constants.DEFAULT_PATH
    dep: str = Constants.DEFAULT_DEP
    licences: bool = False
    verbose: bool = True
    metadata_file: str = Constants.METADATA_FILE
    container_marker: str = Constants.CONTAINER_MARKER


def _default_config_path() -> Optional[str]:
    for candidate in Constants.CONFIG_LOCATIONS:
        path = os.path.expanduser(candidate)
        if os.path.isfile(path):
            return path
    return None


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load a YAML (or .json) config file.

    Args:
        path: Explicit config path; default locations are searched when None.

    Returns:
        Config mapping, empty when absent or unreadable.
    """
    if not path:
        path = _default_config_path()
        if not path:
            return {}
    elif not os.path.isfile(path):
        logger.warning("Config file not found: %s", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.lower().endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level must be a mapping", path)
        return {}
    logger.debug("Loaded config from: %s", path)
    return data


def _config_str(cfg: Dict[str, Any], key: str, default: str) -> str:
    value = cfg.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value.strip():
        logger.warning("Ignoring config key '%s': expected a non-empty string", key)
        return default
    return value


def resolve_options(args, cfg: Optional[Dict[str, Any]] = None) -> RunOptions:
    """Merge parsed CLI arguments over config values and defaults.

    Verbose output is on unless licenses-only was requested without verbose.
    """
    cfg = cfg or {}
    licences = bool(getattr(args, "LICENCES", False))
    verbose = bool(getattr(args, "VERBOSE", False)) or not licences
    return RunOptions(
        path=getattr(args, "PATH", None) or _config_str(cfg, "path", Constants.DEFAULT_PATH),
        dep=getattr(args, "DEP", None) or _config_str(cfg, "dep", Constants.DEFAULT_DEP),
        licences=licences,
        verbose=verbose,
        metadata_file=_config_str(cfg, "metadata_file", Constants.METADATA_FILE),
        container_marker=_config_str(cfg, "container_marker", Constants.CONTAINER_MARKER),
    )
