"""
Configuration Loader for fuzzratio.

This module provides YAML loading for FuzzConfig.

Author: fuzzratio Project
Date: 2026-10-18
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Union

from .parsers import parse_fuzz_config

if TYPE_CHECKING:
    from .fuzz_config import FuzzConfig

logger = logging.getLogger(__name__)


def load_fuzz_config(path: Union[str, Path]) -> "FuzzConfig":
    """Load FuzzConfig from a YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        FuzzConfig built from the ``fuzz`` section (or the whole document).

    Raises:
        FileNotFoundError: If config file does not exist.
        ValueError: If the document is not a mapping or values are invalid.
    """
    import yaml

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

    config = parse_fuzz_config(data)
    logger.debug(f"Loaded fuzz config from {config_path}: {config.to_dict()}")
    return config


__all__ = ["load_fuzz_config"]
