"""Loading of the optional scoring configuration file."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from codescore.consts import CONFIG_ENV_VAR, DEFAULT_CONFIG_FILENAME
from codescore.errors import ConfigError
from codescore.models.model_config import ScoringConfig

logger = logging.getLogger(__name__)


def find_config(root_dir: Path | str, explicit: Path | str | None = None) -> Path | None:
    """Locate the configuration file for a run.

    Precedence: explicit path, then the CODESCORE_CONFIG environment
    variable, then codescore.json in the project root.

    Args:
        root_dir: Project root.
        explicit: Path given on the command line, if any.

    Returns:
        Path to the configuration file, or None to use defaults.
    """
    if explicit:
        return Path(explicit)

    env_path = os.getenv(CONFIG_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)

    default_path = Path(root_dir) / DEFAULT_CONFIG_FILENAME
    if default_path.exists():
        return default_path
    return None


def load_config(path: Path | str | None) -> ScoringConfig:
    """Load and validate a configuration file.

    Unlike input artifacts, a broken configuration is fatal.

    Args:
        path: Configuration file, or None for defaults.

    Returns:
        Validated ScoringConfig.

    Raises:
        ConfigError: If the file is missing, not JSON, or fails validation.
    """
    if path is None:
        return ScoringConfig()

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    try:
        config = ScoringConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e

    logger.info(f"Loaded config: {path} (blend_mode={config.blend_mode.value})")
    return config
