"""
Plugin Schema - Pipeline Input

PluginData is the single immutable value the pipeline consumes. It is produced
by the interactive prompt (or by tests) and validated on construction, so the
pipeline and the descriptor generator never need to re-check it.
"""
import re
from enum import Enum
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator

from plugdecomp.config import JAVA_VERSIONS, VERSION_PATTERN


class MappingError(ValueError):
    """Raised when a string does not name a known mapping"""
    pass


class Mapping(str, Enum):
    """Name-mapping scheme used by a plugin's internals"""
    MOJANG = "Mojang"
    SPIGOT = "Spigot/Obfuscated"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> "Mapping":
        """
        Parse a mapping from its display value or member name.

        Raises:
            MappingError: If the value names neither mapping
        """
        text = str(value).strip()
        for mapping in cls:
            if text == mapping.value or text.upper() == mapping.name:
                return mapping
        raise MappingError(f"Unknown mapping: {value!r}")


class Internals(BaseModel):
    """Marks a plugin that uses non-public server APIs"""
    model_config = ConfigDict(frozen=True)

    mapping: Mapping = Field(..., description="Mojang or Spigot/Obfuscated")


class PluginData(BaseModel):
    """Everything needed to scaffold one Gradle workspace"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Gradle root project name")
    java_version: int = Field(..., description="Toolchain language version")
    jarfile: Path = Field(..., description="Compiled plugin jar to decompile")
    output_dir: Path = Field(..., description="Workspace directory to populate")
    version: str = Field(..., description="Minecraft version (e.g., '1.21.4')")
    internals: Optional[Internals] = Field(None, description="Set when the plugin uses server internals")

    @field_validator("name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    @field_validator("java_version")
    @classmethod
    def _validate_java_version(cls, v: int) -> int:
        if v not in JAVA_VERSIONS:
            allowed = ", ".join(str(version) for version in JAVA_VERSIONS)
            raise ValueError(f"java_version must be one of {allowed}")
        return v

    @field_validator("jarfile")
    @classmethod
    def _validate_jarfile(cls, v: Path) -> Path:
        if not v.is_file():
            raise ValueError(f"jarfile does not exist: {v}")
        return v

    @field_validator("version")
    @classmethod
    def _validate_version(cls, v: str) -> str:
        if not re.fullmatch(VERSION_PATTERN, v):
            raise ValueError(f"not a Minecraft release version: {v!r}")
        return v

    @property
    def java_sourceset(self) -> Path:
        return self.output_dir / "src" / "main" / "java"

    @property
    def resources_sourceset(self) -> Path:
        return self.output_dir / "src" / "main" / "resources"


__all__ = ["Mapping", "MappingError", "Internals", "PluginData"]
