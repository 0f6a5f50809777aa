"""Application entry point — CLI dispatcher.

Handles three execution modes:
  1. `jarsmith init [DIR]` — scaffolds jarsmith.toml and a sample src/ tree.
  2. `jarsmith build [DIR]` (default) — loads the descriptor and materializes
     the backend workspace. The build tool itself is not invoked.
  3. `jarsmith --version` — prints the version.

Exit codes: 0 on success, 1 on a configuration/source/filesystem error,
2 on bad usage.
"""

import logging
import sys
from pathlib import Path

from . import __version__

logger = logging.getLogger(__name__)

_USAGE = """\
usage: jarsmith [init|build] [PROJECT_DIR]
       jarsmith --version
"""

_COMMANDS = ("init", "build")


def _configure_logging() -> None:
    from .utils import log_level

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    logging.getLogger("jarsmith").setLevel(log_level())


def _build(project_dir: Path) -> int:
    from .descriptor import load_descriptor
    from .materialize import materialize

    project = load_descriptor(project_dir)
    result = materialize(
        project.descriptor,
        project.source_root,
        project.workspace_root,
        resource_root=project.resource_root,
    )
    print(f"Workspace ready: {result.project_dir}")
    print(f"Expected archive: {result.archive_path}")
    return 0


def _init(project_dir: Path) -> int:
    from .scaffold import init_project

    init_project(project_dir)
    print(f"Initialized a new jarsmith project in {project_dir}")
    return 0


def run(argv: list[str]) -> int:
    """Dispatch argv (without the program name) and return an exit code."""
    from .errors import JarsmithError

    if argv and argv[0] in ("-V", "--version"):
        print(f"jarsmith {__version__}")
        return 0
    if argv and argv[0] in ("-h", "--help"):
        print(_USAGE, end="")
        return 0

    command = "build"
    if argv and argv[0] in _COMMANDS:
        command, argv = argv[0], argv[1:]
    if len(argv) > 1 or (argv and argv[0].startswith("-")):
        sys.stderr.write(_USAGE)
        return 2
    project_dir = Path(argv[0]) if argv else Path.cwd()

    try:
        if command == "init":
            return _init(project_dir)
        return _build(project_dir)
    except (JarsmithError, OSError) as e:
        logger.debug("%s failed", command, exc_info=True)
        sys.stderr.write(f"[ERROR] {e}\n")
        return 1


def main() -> None:
    """Main entry point."""
    _configure_logging()
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
