"""Conversion planning: source URI in, destination + decision out."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .file import ArtifactStalenessResolver


class ConversionPlan(BaseModel):
    """Outcome of planning a single source image."""

    source: str = Field(..., description="Resolved filesystem path of the source image")
    destination: str = Field(..., description="Filesystem path of the converted image")
    needs_conversion: bool = Field(..., description="Whether the destination must be generated")

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)


class ConversionPlanner:
    """
    Resolve a source image and decide whether its converted sibling is due.

    No locking is done: two concurrent plans for the same source may both
    report ``needs_conversion=True``. Callers that convert under load
    should serialize on the destination path.
    """

    def __init__(self, resolver: ArtifactStalenessResolver, target_suffix: str = ".webp"):
        self.resolver: ArtifactStalenessResolver = resolver
        self.target_suffix: str = target_suffix

    def plan(self, source_uri: str, suffix: str | None = None) -> ConversionPlan:
        """
        Raises:
            ConvertorError: if the source URI cannot be resolved.
        """
        source = self.resolver.resolve(source_uri)
        target_suffix = self.target_suffix if suffix is None else suffix
        destination = self.resolver.convert_suffix(source, target_suffix)

        if destination == source:
            return ConversionPlan(source=source, destination=destination, needs_conversion=False)

        return ConversionPlan(
            source=source,
            destination=destination,
            needs_conversion=self.resolver.needs_conversion(source, destination),
        )
