"""modgen scaffolder -- generates Fabric mod project skeletons.

This module takes a resolved ``GenerationRequest`` and renders a minimal
buildable Fabric mod: Gradle build files, ``fabric.mod.json``, a mixin
configuration and a Java or Kotlin entry-point class.

Quick usage::

    from modgen.scaffolder import ProjectGenerator, resolve_request

    request = resolve_request("./mymod", mod_name="My Mod")
    written = ProjectGenerator().generate(request)
"""

from modgen.scaffolder.errors import (
    InvalidFieldError,
    MissingRequiredFieldError,
    ScaffoldError,
    ScaffoldIOError,
    TargetExistsError,
)
from modgen.scaffolder.generator import ProjectGenerator
from modgen.scaffolder.request import (
    DEFAULT_MAIN_CLASS,
    GenerationRequest,
    Language,
    resolve_request,
)
from modgen.scaffolder.templates import RenderedFile, TemplateRenderer

__all__ = [
    "DEFAULT_MAIN_CLASS",
    "GenerationRequest",
    "InvalidFieldError",
    "Language",
    "MissingRequiredFieldError",
    "ProjectGenerator",
    "RenderedFile",
    "ScaffoldError",
    "ScaffoldIOError",
    "TargetExistsError",
    "TemplateRenderer",
    "resolve_request",
]
