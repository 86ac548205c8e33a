"""Image artifact resolution."""

from .file import ArtifactStalenessResolver
from .planner import ConversionPlan, ConversionPlanner

__all__ = ["ArtifactStalenessResolver", "ConversionPlan", "ConversionPlanner"]
