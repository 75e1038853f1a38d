"""Load :class:`TextConfig` from a YAML or JSON file."""
import json
import logging
from pathlib import Path
from typing import Optional, Union

import yaml

from .models import TextConfig

logger = logging.getLogger(__name__)


def _read_mapping(path: Path) -> dict:
    suffix = path.suffix.lower()
    with open(path, encoding="utf-8") as f:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(f) or {}
        if suffix == ".json":
            return json.load(f)
    raise ValueError(
        f"Unsupported config type '{suffix}' for: {path}. "
        "Supported extensions: .json, .yaml, .yml"
    )


def load_config(config_path: Optional[Union[str, Path]] = None) -> TextConfig:
    """Build a :class:`TextConfig` from *config_path*.

    ``None`` returns the defaults. Values are validated by Pydantic, so an
    invalid file raises ``pydantic.ValidationError``.

    Raises
    ------
    FileNotFoundError
        If *config_path* does not exist.
    ValueError
        If the extension is not ``.json``, ``.yaml`` or ``.yml``, or the
        file does not hold a mapping.
    """
    if config_path is None:
        return TextConfig()

    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    data = _read_mapping(path)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    logger.info("Loaded text config from %s", path)
    return TextConfig(**data)
