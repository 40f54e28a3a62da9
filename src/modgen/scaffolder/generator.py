"""Main scaffolding orchestrator.

Takes a resolved ``GenerationRequest``, renders the template set for its
language variant and writes the result under the request's target path.
Everything is rendered before the first write, so a rendering failure never
leaves a half-populated tree behind.
"""

from __future__ import annotations

from pathlib import Path

from ..config import Config
from ..utils import is_empty_dir, run_command
from .errors import ScaffoldIOError, TargetExistsError
from .request import GenerationRequest
from .templates import RenderedFile, TemplateRenderer


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``GenerationRequest``, generates a Fabric mod skeleton containing:
    - Gradle build files (``build.gradle``, ``settings.gradle``,
      ``gradle.properties``) and a ``.gitignore``
    - ``fabric.mod.json`` and ``<mod_id>.mixins.json`` resources
    - A Java or Kotlin entry-point class under its package directory
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def render(self, request: GenerationRequest) -> list[RenderedFile]:
        """Render the project without touching the filesystem."""
        return self.renderer.render_project(request, self.config)

    def generate(
        self,
        request: GenerationRequest,
        *,
        force: bool = False,
        init_git: bool = False,
    ) -> list[Path]:
        """Generate the project under ``request.target_path``.

        Args:
            request: The resolved generation request.
            force: Write into an existing non-empty directory, overwriting
                any file with the same name.
            init_git: Run ``git init`` in the project once files are written.

        Returns:
            Paths of the written files, in template order.

        Raises:
            TargetExistsError: If the target has content and *force* is off.
            ScaffoldIOError: If any directory creation or write fails.
        """
        root = request.target_path
        files = self.render(request)

        self._check_target(root, force)

        written = [self._write(root, rendered) for rendered in files]

        if init_git:
            init_repository(root)

        return written

    # -- Internals ---------------------------------------------------------

    @staticmethod
    def _check_target(root: Path, force: bool) -> None:
        try:
            if not root.exists():
                return
            if not root.is_dir():
                raise ScaffoldIOError(root, "exists and is not a directory")
            if not force and not is_empty_dir(root):
                raise TargetExistsError(root)
        except OSError as exc:
            raise ScaffoldIOError(root, exc.strerror or str(exc)) from exc

    @staticmethod
    def _write(root: Path, rendered: RenderedFile) -> Path:
        out = root.joinpath(*rendered.path.parts)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(rendered.content, encoding="utf-8")
        except OSError as exc:
            raise ScaffoldIOError(out, exc.strerror or str(exc)) from exc
        return out


# ---------------------------------------------------------------------------
# Git
# ---------------------------------------------------------------------------

def init_repository(root: Path) -> None:
    """Initialise an empty git repository in *root*."""
    try:
        code, _, stderr = run_command(["git", "init", "--quiet"], cwd=root)
    except FileNotFoundError as exc:
        raise ScaffoldIOError(root, "git is not installed") from exc
    if code != 0:
        raise ScaffoldIOError(root, f"git init failed: {stderr}")
