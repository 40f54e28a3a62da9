"""Generation request model and the input resolver that builds it.

``resolve_request`` turns raw command-line style options into a complete,
immutable ``GenerationRequest``: the mod id falls back to the target
directory name and the main class falls back to ``DEFAULT_MAIN_CLASS``.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidFieldError, MissingRequiredFieldError


DEFAULT_MAIN_CLASS = "net.fabricmc.example.ExampleMod"

# Fabric Loader's mod id rule.
_MOD_ID_RE = re.compile(r"^[a-z][a-z0-9_-]{1,63}$")
_JAVA_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_JAVA_RESERVED_WORDS = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "false", "final", "finally", "float", "for", "goto", "if",
    "implements", "import", "instanceof", "int", "interface", "long", "native",
    "new", "null", "package", "private", "protected", "public", "return",
    "short", "static", "strictfp", "super", "switch", "synchronized", "this",
    "throw", "throws", "transient", "true", "try", "void", "volatile", "while",
    "_",
})


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """Source language of the generated entry point."""
    JAVA = "java"
    KOTLIN = "kotlin"

    @property
    def source_dir(self) -> str:
        """Directory under ``src/main`` holding sources for this language."""
        return self.value

    @property
    def extension(self) -> str:
        return "kt" if self is Language.KOTLIN else "java"


# ---------------------------------------------------------------------------
# Request model
# ---------------------------------------------------------------------------

class GenerationRequest(BaseModel):
    """A fully resolved, read-only description of the project to generate."""

    model_config = ConfigDict(frozen=True)

    target_path: Path = Field(..., description="Directory the project is written to")
    mod_id: str = Field(..., min_length=1, description="Fabric mod id")
    mod_name: str = Field(..., min_length=1, description="Human-readable mod name")
    language: Language = Field(default=Language.JAVA)
    main_class: str = Field(default=DEFAULT_MAIN_CLASS, description="Fully qualified entry-point class")

    @field_validator("mod_id")
    @classmethod
    def _check_mod_id(cls, value: str) -> str:
        try:
            validate_mod_id(value)
        except InvalidFieldError as exc:
            raise ValueError(exc.reason) from exc
        return value

    @field_validator("main_class")
    @classmethod
    def _check_main_class(cls, value: str) -> str:
        try:
            validate_main_class(value)
        except InvalidFieldError as exc:
            raise ValueError(exc.reason) from exc
        return value

    @property
    def package(self) -> str:
        return self.main_class.rpartition(".")[0]

    @property
    def class_name(self) -> str:
        return self.main_class.rpartition(".")[2]

    @property
    def package_path(self) -> str:
        """The package as a relative directory, e.g. ``com/example``."""
        return self.package.replace(".", "/")

    @property
    def maven_group(self) -> str:
        """Maven group for ``gradle.properties``: the package minus its last segment."""
        parent, _, _ = self.package.rpartition(".")
        return parent or self.package

    @property
    def archives_base_name(self) -> str:
        """Jar base name: the last package segment, or the mod id for one-segment packages."""
        parent, _, last = self.package.rpartition(".")
        return last if parent else self.mod_id


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

def resolve_request(
    target_path: str | Path,
    *,
    mod_name: str | None,
    mod_id: str | None = None,
    use_kotlin: bool = False,
    main_class: str | None = None,
) -> GenerationRequest:
    """Build a ``GenerationRequest`` from raw options.

    Args:
        target_path: Directory the project will be created in.
        mod_name: Display name.  Required.
        mod_id: Mod id.  Defaults to the last component of *target_path*.
        use_kotlin: Select the Kotlin variant instead of Java.
        main_class: Fully qualified entry-point class.  Defaults to
            ``DEFAULT_MAIN_CLASS``.

    Raises:
        MissingRequiredFieldError: If *mod_name* is absent or blank.
        InvalidFieldError: If the mod id or main class is malformed.
    """
    if not mod_name or not mod_name.strip():
        raise MissingRequiredFieldError("mod_name")

    path = Path(target_path)
    try:
        return GenerationRequest(
            target_path=path,
            mod_id=mod_id or _derive_mod_id(path),
            mod_name=mod_name,
            language=Language.KOTLIN if use_kotlin else Language.JAVA,
            main_class=main_class or DEFAULT_MAIN_CLASS,
        )
    except ValidationError as exc:
        error = exc.errors()[0]
        reason = error.get("ctx", {}).get("error", error["msg"])
        raise InvalidFieldError(str(error["loc"][0]), str(error["input"]), str(reason)) from exc


def validate_mod_id(mod_id: str) -> None:
    """Raise ``InvalidFieldError`` unless *mod_id* satisfies Fabric's id rule."""
    if not _MOD_ID_RE.match(mod_id):
        raise InvalidFieldError(
            "mod_id",
            mod_id,
            "must be 2-64 characters of lowercase letters, digits, '-' or '_', "
            "starting with a letter (pass --id to override the directory name)",
        )


def validate_main_class(main_class: str) -> None:
    """Raise ``InvalidFieldError`` unless *main_class* is a packaged Java name."""
    segments = main_class.split(".")
    if len(segments) < 2:
        raise InvalidFieldError("main_class", main_class, "must include a package, e.g. com.example.MyMod")
    for segment in segments:
        if not _JAVA_IDENTIFIER_RE.match(segment):
            raise InvalidFieldError(
                "main_class", main_class, f"{segment!r} is not a valid Java identifier"
            )
        if segment in _JAVA_RESERVED_WORDS:
            raise InvalidFieldError(
                "main_class", main_class, f"{segment!r} is a reserved Java keyword"
            )


def _derive_mod_id(path: Path) -> str:
    """Last component of *path*, resolving ``.``-style paths against the cwd."""
    if path.name in ("", ".", ".."):
        return path.resolve().name
    return path.name
