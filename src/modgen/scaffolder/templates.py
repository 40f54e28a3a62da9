"""Jinja2 template rendering for mod scaffolding.

Provides the ``TemplateRenderer`` class which loads Jinja2 templates from the
``modgen/scaffolder/templates/`` directory, and the static per-language
template sets that describe which templates make up a project and where each
rendered file lands.  Rendering is pure: nothing here touches the target
directory.
"""

from __future__ import annotations

import json
from pathlib import Path, PurePosixPath
from typing import Any, NamedTuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..config import Config
from .request import GenerationRequest, Language


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Template sets
# ---------------------------------------------------------------------------


class TemplateSpec(NamedTuple):
    """A template name paired with the template for its output path."""

    template: str
    output: str


class RenderedFile(NamedTuple):
    """A rendered template ready to be written under the target root."""

    path: PurePosixPath
    content: str


_COMMON_TEMPLATES: tuple[TemplateSpec, ...] = (
    TemplateSpec("common/build.gradle.j2", "build.gradle"),
    TemplateSpec("common/settings.gradle.j2", "settings.gradle"),
    TemplateSpec("common/gradle.properties.j2", "gradle.properties"),
    TemplateSpec("common/gitignore.j2", ".gitignore"),
    TemplateSpec("common/fabric.mod.json.j2", "src/main/resources/fabric.mod.json"),
    TemplateSpec("common/mixins.json.j2", "src/main/resources/{{ mod_id }}.mixins.json"),
)

_ENTRYPOINT_OUTPUT = "src/main/{{ source_dir }}/{{ package_path }}/{{ class_name }}.{{ extension }}"

TEMPLATE_SETS: dict[Language, tuple[TemplateSpec, ...]] = {
    Language.JAVA: _COMMON_TEMPLATES + (TemplateSpec("java/Entrypoint.java.j2", _ENTRYPOINT_OUTPUT),),
    Language.KOTLIN: _COMMON_TEMPLATES + (TemplateSpec("kotlin/Entrypoint.kt.j2", _ENTRYPOINT_OUTPUT),),
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for mod scaffolding.

    The environment uses ``StrictUndefined`` so a placeholder with no bound
    value raises ``jinja2.UndefinedError`` instead of rendering empty.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["json_string"] = _json_string_filter
        self.env.filters["groovy_string"] = _groovy_string_filter

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"common/build.gradle.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string, such as an output path template."""
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- Project rendering -------------------------------------------------

    def render_project(
        self, request: GenerationRequest, config: Config | None = None
    ) -> list[RenderedFile]:
        """Render every template of the request's language variant.

        Returns:
            ``RenderedFile`` pairs in template-set order, with paths relative
            to the target root.
        """
        context = build_context(request, config or Config())
        rendered: list[RenderedFile] = []
        for spec in TEMPLATE_SETS[request.language]:
            path = PurePosixPath(self.render_string(spec.output, context))
            rendered.append(RenderedFile(path, self.render(spec.template, context)))
        return rendered

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


# ---------------------------------------------------------------------------
# Context building
# ---------------------------------------------------------------------------


def build_context(request: GenerationRequest, config: Config) -> dict[str, Any]:
    """Build the Jinja2 template context from a request and toolchain config."""
    return {
        **config.template_context(),
        "mod_id": request.mod_id,
        "mod_name": request.mod_name,
        "main_class": request.main_class,
        "package": request.package,
        "package_path": request.package_path,
        "class_name": request.class_name,
        "maven_group": request.maven_group,
        "archives_base_name": request.archives_base_name,
        "kotlin": request.language is Language.KOTLIN,
        "source_dir": request.language.source_dir,
        "extension": request.language.extension,
    }


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _json_string_filter(value: str) -> str:
    """Quote a value as a JSON string literal."""
    return json.dumps(value, ensure_ascii=False)


def _groovy_string_filter(value: str) -> str:
    """Quote a value as a single-quoted Groovy string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n")
    return f"'{escaped}'"
