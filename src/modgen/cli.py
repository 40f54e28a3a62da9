"""modgen command-line entry point.

Usage::

    modgen ./mymod --name "My Mod"
    modgen ./foo --id foomod --name "Foo Mod" --kotlin --main com.example.Foo
    python -m modgen ./mymod -n "My Mod" --git
"""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from modgen import __version__
from modgen.config import Config
from modgen.scaffolder import ProjectGenerator, ScaffoldError, resolve_request
from modgen.utils import console, print_error, print_success, print_summary_table, print_warning


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``modgen`` command."""
    parser = argparse.ArgumentParser(
        prog="modgen",
        description="Create a new Fabric mod project",
    )

    parser.add_argument(
        "path",
        metavar="PATH",
        help="Directory to create the project in",
    )
    parser.add_argument(
        "--id", "-i",
        dest="mod_id",
        default="",
        metavar="MOD_ID",
        help="Mod id (default: name of the target directory)",
    )
    parser.add_argument(
        "--name", "-n",
        dest="mod_name",
        default=None,
        metavar="NAME",
        help="Display name of the mod (required)",
    )
    parser.add_argument(
        "--kotlin", "-k",
        action="store_true",
        help="Generate a Kotlin entry point instead of Java",
    )
    parser.add_argument(
        "--main", "-m",
        dest="main_class",
        default=None,
        metavar="MAIN_CLASS",
        help="Fully qualified main class (default: net.fabricmc.example.ExampleMod)",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Write into an existing non-empty directory, overwriting files",
    )
    parser.add_argument(
        "--git", "-g",
        action="store_true",
        help="Initialise a git repository in the new project",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run(argv: list[str] | None = None, config: Config | None = None) -> int:
    """Parse *argv*, generate the project and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        request = resolve_request(
            args.path,
            mod_name=args.mod_name,
            mod_id=args.mod_id,
            use_kotlin=args.kotlin,
            main_class=args.main_class,
        )
        if args.force and request.target_path.exists():
            print_warning(f"Overwriting files in {request.target_path}")
        written = ProjectGenerator(config).generate(
            request, force=args.force, init_git=args.git
        )
    except ScaffoldError as exc:
        print_error(str(exc))
        return 1

    print_summary_table(
        {
            "Mod id": request.mod_id,
            "Name": request.mod_name,
            "Language": request.language.value,
            "Main class": request.main_class,
            "Target": str(request.target_path),
        },
        title="Fabric mod",
    )
    for path in written:
        console.print(f"  [dim]wrote[/dim] {escape(str(path))}")
    print_success(f"Created {request.mod_name} in {request.target_path}")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
