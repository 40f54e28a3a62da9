"""modgen configuration.

Typed toolchain settings baked into the generated project.  All settings use
Pydantic v2 models so they are validated at construction time; callers that
need a different toolchain build their own ``Config`` (or ``model_copy`` the
default one) and hand it to ``ProjectGenerator``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class KotlinConfig(BaseModel):
    """Versions used only by the Kotlin variant."""

    kotlin_version: str = Field(default="1.9.22")
    fabric_kotlin_version: str = Field(
        default="1.10.17+kotlin.1.9.22",
        description="fabric-language-kotlin adapter version",
    )


class Config(BaseModel):
    """Global modgen configuration.

    Holds the Minecraft/Fabric versions rendered into ``gradle.properties``,
    ``build.gradle`` and ``fabric.mod.json``.  Instances are typically created
    once by the CLI entry point and then passed to the generator.
    """

    minecraft_version: str = Field(default="1.20.4")
    yarn_mappings: str = Field(default="1.20.4+build.3")
    loader_version: str = Field(default="0.15.6")
    fabric_version: str = Field(default="0.95.4+1.20.4", description="Fabric API version")
    loom_version: str = Field(default="1.5-SNAPSHOT")
    java_version: int = Field(default=17, ge=17, description="Java release targeted by javac")
    mod_version: str = Field(default="1.0.0")
    kotlin: KotlinConfig = Field(default_factory=KotlinConfig)

    @property
    def minecraft_dependency(self) -> str:
        """The ``depends.minecraft`` constraint written to ``fabric.mod.json``."""
        return f"~{self.minecraft_version}"

    def template_context(self) -> dict[str, Any]:
        """Return the toolchain variables exposed to every template."""
        return {
            "minecraft_version": self.minecraft_version,
            "minecraft_dependency": self.minecraft_dependency,
            "yarn_mappings": self.yarn_mappings,
            "loader_version": self.loader_version,
            "fabric_version": self.fabric_version,
            "loom_version": self.loom_version,
            "java_version": self.java_version,
            "mod_version": self.mod_version,
            "kotlin_version": self.kotlin.kotlin_version,
            "fabric_kotlin_version": self.kotlin.fabric_kotlin_version,
        }
