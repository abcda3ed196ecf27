# Dialex Command-Line Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Dialex parsing options.

Options are read from YAML or TOML, either at the top level of the file or under
a `dialex` section:

    # dialex.yaml
    dialex:
      style: gnu
      scheme_names: [myapp]
      ignore_unknown_options: true

    # dialex.toml
    [dialex]
    style = { base = "flexible", case_sensitive = true }
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import ValidationError

from dialex.logger import logger
from dialex.options import ParsingOptions

CONFIG_FILENAMES = ("dialex.yaml", "dialex.yml", "dialex.toml", ".dialex.yaml", ".dialex.toml")


def find_config() -> Path | None:
    candidates = [Path.cwd() / name for name in CONFIG_FILENAMES]
    if os.environ.get("DIALEX_CONFIG"):
        candidates.append(Path(os.environ["DIALEX_CONFIG"]))
    candidates.extend(
        [
            Path.home() / ".config" / "dialex" / "dialex.yaml",
            Path.home() / ".config" / "dialex" / "dialex.toml",
        ]
    )
    return next((path for path in candidates if path.is_file()), None)


def read_config(path: str | Path) -> dict[str, Any]:
    """Read a YAML or TOML file into a dictionary of parsing option fields."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    with path.open(encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Config file {path} must contain a mapping.")
    section = raw_config.get("dialex", raw_config)
    if not isinstance(section, dict):
        raise ValueError(f"The 'dialex' section in {path} must be a mapping.")
    return section


def load_parsing_options(path: str | Path, **overrides: Any) -> ParsingOptions:
    """Load `ParsingOptions` from a config file, applying keyword overrides.

    Raises:
        ValueError: If the file format is unsupported or its contents are invalid.
    """
    data = {**read_config(path), **overrides}
    try:
        options = ParsingOptions.model_validate(data)
    except ValidationError as error:
        logger.error("Invalid parsing options in '%s': %s", path, error)
        raise ValueError(f"Invalid parsing options in {path}: {error}") from error
    logger.debug("Loaded parsing options from '%s' with style '%s'.", path, options.style)
    return options
