"""Safe loading of JSON artifacts written by external tools.

A missing artifact means the tool was not run, and a corrupt one must not
abort the run, so both come back as None.
"""

import json
import logging
from pathlib import Path
from typing import Any

from codescore.models.model_artifact import ArtifactBundle, ArtifactSource
from codescore.models.model_config import ArtifactPaths

logger = logging.getLogger(__name__)


def read_artifact(path: Path | str) -> Any | None:
    """Read and parse a JSON artifact.

    Args:
        path: Location of the artifact.

    Returns:
        Parsed JSON document, or None if the file is missing or unreadable.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"Artifact not found: {path}")
        return None

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse artifact {path}: {e}")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read artifact {path}: {e}")
        return None


def resolve_path(path: str, root_dir: Path | str) -> Path:
    """Resolve a configured path against the project root."""
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return Path(root_dir) / candidate


def load_artifacts(paths: ArtifactPaths, root_dir: Path | str) -> ArtifactBundle:
    """Read every configured artifact.

    Args:
        paths: Artifact locations.
        root_dir: Directory relative paths are resolved against.

    Returns:
        ArtifactBundle with None for each absent or corrupt artifact.
    """
    loaded = {
        source.value: read_artifact(resolve_path(paths.for_source(source), root_dir))
        for source in ArtifactSource
    }
    bundle = ArtifactBundle(**loaded)

    present = [source.value for source in bundle.present_sources()]
    logger.info(f"Loaded {len(present)} artifacts: {', '.join(present) or 'none'}")
    return bundle
