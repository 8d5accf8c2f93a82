"""Pass-through of an externally maintained scorecard."""

import logging
from typing import Any

from codescore.normalizers.base import coerce_number

logger = logging.getLogger(__name__)

# Scorecard field → norm key
SCORECARD_FIELDS = {
    "issuesFound": "issuesFound",
    "issuesFixed": "issuesFixed",
    "fixAttempts": "fixAttempts",
    "compilable": "compilation",
    "compilation": "compilation",
    "unitTestPassRate": "unitTestPassRate",
}


def normalize_scorecard(artifact: Any | None) -> dict[str, float]:
    """Copy recognized scorecard fields into a norm table.

    Values are taken verbatim: integers stay integers, numeric strings are
    parsed, and booleans (e.g. `"compilable": true`) become 100 or 0.
    Unparsable values are skipped.

    Args:
        artifact: Parsed scorecard, or None

    Returns:
        Norms keyed by dimension (empty if the scorecard is absent)
    """
    if artifact is None:
        return {}
    if not isinstance(artifact, dict):
        logger.warning(f"Scorecard is not a JSON object, ignoring ({type(artifact).__name__})")
        return {}

    norms: dict[str, float] = {}
    for field, value in artifact.items():
        key = SCORECARD_FIELDS.get(field)
        if key is None:
            logger.debug(f"Ignoring unrecognized scorecard field: {field}")
            continue

        if isinstance(value, bool):
            norms[key] = 100 if value else 0
        elif isinstance(value, (int, float)) and coerce_number(value) is not None:
            norms[key] = value
        else:
            number = coerce_number(value)
            if number is None:
                logger.info(f"Skipping non-numeric scorecard field {field}: {value!r}")
                continue
            norms[key] = number

    return norms
