"""
Chunker configuration from YAML files.
Keys are ChunkerConfig field names; command-line values take precedence.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from filechunker.chunking.schemas import ChunkerConfig

logger = logging.getLogger(__name__)


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a mapping of ChunkerConfig fields from YAML.
    An empty file gives an empty mapping; any other non-mapping document is rejected.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    logger.debug("Loaded chunker config from %s: %s", path, sorted(data))
    return data


def build_config(file_values: Optional[Dict[str, Any]] = None, **overrides: Any) -> ChunkerConfig:
    """Merge non-None overrides over file values and validate into a ChunkerConfig."""
    values: Dict[str, Any] = dict(file_values or {})
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ChunkerConfig.model_validate(values)
