"""Configuration and wiring."""

from collections.abc import Mapping
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .common.file_storage_impl import LocalFileDriver, LocalFileReadFactory
from .image.file import ArtifactStalenessResolver
from .image.planner import ConversionPlanner
from .utils.debugger import Debugger
from .utils.url_convertor import PrefixUrlConvertor


class NextGenImagesConfig(BaseModel):
    """Settings for next-gen image resolution."""

    debug: bool = Field(False, description="Record suppressed filesystem errors via loguru")
    url_mappings: dict[str, str] = Field(
        default_factory=dict,
        description="Public base URL -> filesystem directory",
    )
    target_suffix: str = Field(".webp", description="Suffix of converted images")

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    @field_validator("target_suffix")
    @classmethod
    def validate_target_suffix(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("target_suffix must start with '.' and name an extension")
        return v

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "NextGenImagesConfig":
        return cls.model_validate(dict(data))


def build_resolver(config: NextGenImagesConfig) -> ArtifactStalenessResolver:
    """Wire the local filesystem collaborators into a resolver."""
    return ArtifactStalenessResolver(
        file_read_factory=LocalFileReadFactory(),
        file_driver=LocalFileDriver(),
        url_convertor=PrefixUrlConvertor(config.url_mappings),
        debugger=Debugger(enabled=config.debug),
    )


def build_planner(config: NextGenImagesConfig) -> ConversionPlanner:
    return ConversionPlanner(build_resolver(config), target_suffix=config.target_suffix)
