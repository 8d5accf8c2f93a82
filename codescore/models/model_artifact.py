"""Models for raw tool artifacts read at the start of a scoring run."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class ArtifactSource(str, Enum):
    """Named source of a raw artifact."""

    COVERAGE = "coverage"
    LINTER = "linter"
    SECURITY = "security"
    COMPLEXITY = "complexity"
    PLATFORM = "platform"
    SCORECARD = "scorecard"
    FILE_METADATA = "file_metadata"


class ArtifactBundle(BaseModel):
    """Parsed JSON documents for one scoring run.

    Each field holds whatever the tool wrote, or None when the artifact is
    absent or could not be parsed. The contents are never validated here;
    normalizers are responsible for tolerating any shape.
    """

    coverage: Any | None = None
    linter: Any | None = None
    security: Any | None = None
    complexity: Any | None = None
    platform: Any | None = None
    scorecard: Any | None = None
    file_metadata: Any | None = None

    def get(self, source: ArtifactSource) -> Any | None:
        """Return the artifact for a source."""
        return getattr(self, source.value)

    def present_sources(self) -> list[ArtifactSource]:
        """List the sources that produced a parsed artifact."""
        return [source for source in ArtifactSource if self.get(source) is not None]
