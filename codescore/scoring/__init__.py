"""Blending and composite scoring of norm tables."""

from codescore.scoring.blender import blend_norms, blend_value, fill_missing
from codescore.scoring.composite import (
    analyze_weights,
    build_breakdown,
    calculate_composite,
)
from codescore.scoring.engine import ScoringEngine

__all__ = [
    # Blending
    "blend_norms",
    "blend_value",
    "fill_missing",
    # Composite scoring
    "analyze_weights",
    "build_breakdown",
    "calculate_composite",
    # Orchestration
    "ScoringEngine",
]
