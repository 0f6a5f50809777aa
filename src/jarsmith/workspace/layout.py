"""Workspace directory layout and source placement.

Manages the backend layout under a workspace root:
  - <root>/.gitignore                     (ignore everything generated)
  - <root>/<backend>/src/main/java        (rewritten sources, by package)
  - <root>/<backend>/src/main/resources   (always present, may be empty)
  - <root>/<backend>/src/test/java

Key classes: WorkspaceRoot, LayoutBuilder.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from ..descriptor import Backend
from ..sources.rewriter import RewrittenUnit
from ..sources.walker import iter_resources

logger = logging.getLogger(__name__)

# Maven standard directory layout, shared by both backends
_SOURCE_DIR = ("src", "main", "java")
_RESOURCE_DIR = ("src", "main", "resources")
_TEST_SOURCE_DIR = ("src", "test", "java")

_GITIGNORE = "*\n"


@dataclass(frozen=True)
class WorkspaceRoot:
    """Explicit workspace location passed to every writer."""

    root: Path
    backend: Backend

    @property
    def project_dir(self) -> Path:
        """Directory the external build tool runs in."""
        return self.root / self.backend.value

    @property
    def source_dir(self) -> Path:
        return self.project_dir.joinpath(*_SOURCE_DIR)

    @property
    def resource_dir(self) -> Path:
        return self.project_dir.joinpath(*_RESOURCE_DIR)

    @property
    def test_source_dir(self) -> Path:
        return self.project_dir.joinpath(*_TEST_SOURCE_DIR)

    def package_dir(self, package_path: tuple[str, ...]) -> Path:
        return self.source_dir.joinpath(*package_path)

    def output_dir(self) -> Path:
        """Where the build tool leaves its archives."""
        if self.backend is Backend.GRADLE:
            return self.project_dir / "build" / "libs"
        return self.project_dir / "target"


def write_text(path: Path, content: str) -> None:
    """Write UTF-8 text without newline translation."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


class LayoutBuilder:
    """Creates the backend skeleton and places rewritten units in it."""

    def __init__(self, workspace: WorkspaceRoot) -> None:
        self.workspace = workspace

    def init_skeleton(self) -> None:
        """Create the backend directory skeleton.

        Safe to call multiple times and from concurrent callers; existing
        directories are left alone. A regular file in the way raises OSError.
        """
        ws = self.workspace
        ws.root.mkdir(parents=True, exist_ok=True)
        write_text(ws.root / ".gitignore", _GITIGNORE)

        for directory in (ws.source_dir, ws.resource_dir, ws.test_source_dir):
            directory.mkdir(parents=True, exist_ok=True)

        logger.debug("Workspace skeleton ready at %s", ws.project_dir)

    def place(self, rewritten: RewrittenUnit) -> Path:
        """Write a rewritten unit under its package directory.

        Returns:
            The path of the written file.

        Raises:
            OSError: If a package path segment is an existing regular file
                (FileExistsError or NotADirectoryError, depending on depth).
        """
        target_dir = self.workspace.package_dir(rewritten.package_path)
        target_dir.mkdir(parents=True, exist_ok=True)

        dest = target_dir / rewritten.file_name
        write_text(dest, rewritten.content)
        logger.debug("Placed %s at %s", rewritten.unit.display_path, dest)
        return dest

    def copy_resources(self, resource_root: Path) -> list[Path]:
        """Copy every file under resource_root into the resource directory.

        Relative paths are preserved; file contents are copied verbatim.
        """
        copied: list[Path] = []
        for segments, src in iter_resources(resource_root):
            dest = self.workspace.resource_dir.joinpath(*segments)
            dest.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src, dest)
            copied.append(dest)
            logger.debug("Copied resource %s", "/".join(segments))

        if copied:
            logger.info("Copied %d resource file(s)", len(copied))
        return copied
