"""Level file loading and saving (YAML or JSON)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

import yaml

from ..models.level import LevelDefinition

log = logging.getLogger(__name__)


def load_level(path: Union[str, Path]) -> LevelDefinition:
    """Load and validate a level file.

    PyYAML parses JSON as well, so ``.json`` files go through the same path.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the level is malformed
    """
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f)

    level = LevelDefinition.model_validate(data)
    log.info(f"Loaded level {level.id} from {path}")
    return level


def dump_level(level: LevelDefinition, path: Union[str, Path]) -> Path:
    """Write a level in the camelCase format. ``.json`` paths get JSON, others YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = level.to_data()

    with open(path, "w") as f:
        if path.suffix.lower() == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, sort_keys=False)

    log.debug(f"Saved level {level.id} to {path}")
    return path
